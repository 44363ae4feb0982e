from z_dep_discovery.models.dependency import (
    ROOT_LOCATOR,
    Dependency,
    ImportEdge,
    ImportPath,
    Locator,
)
from z_dep_discovery.models.manifest import ManifestRecord, PomFile
from z_dep_discovery.models.tool import ToolContext

__all__ = [
    "ROOT_LOCATOR",
    "Dependency",
    "ImportEdge",
    "ImportPath",
    "Locator",
    "ManifestRecord",
    "PomFile",
    "ToolContext",
]
