"""z-dep-discovery: build-tool dependency graph discovery."""

__version__ = "0.1.0"

from z_dep_discovery.builders import (
    Builder,
    BuilderRegistry,
    MavenBuilder,
    create_default_registry,
)
from z_dep_discovery.discovery import ManifestLocator, find_ancestor
from z_dep_discovery.exceptions import (
    AnalysisError,
    BinaryNotFoundError,
    BuildError,
    CommandExecutionError,
    DiscoveryError,
    NotInitializedError,
    ParseInconsistencyError,
)
from z_dep_discovery.graph import TreeParser, compute_import_paths, parse_maven_tree
from z_dep_discovery.models import (
    ROOT_LOCATOR,
    Dependency,
    ImportEdge,
    ImportPath,
    Locator,
    ManifestRecord,
    ToolContext,
)
from z_dep_discovery.resolve import BinaryResolver

__all__ = [
    "ROOT_LOCATOR",
    "AnalysisError",
    "BinaryNotFoundError",
    "BinaryResolver",
    "BuildError",
    "Builder",
    "BuilderRegistry",
    "CommandExecutionError",
    "Dependency",
    "DiscoveryError",
    "ImportEdge",
    "ImportPath",
    "Locator",
    "ManifestLocator",
    "ManifestRecord",
    "MavenBuilder",
    "NotInitializedError",
    "ParseInconsistencyError",
    "ToolContext",
    "TreeParser",
    "compute_import_paths",
    "create_default_registry",
    "find_ancestor",
    "parse_maven_tree",
]
