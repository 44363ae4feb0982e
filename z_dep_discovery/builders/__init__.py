from z_dep_discovery.builders.base import Builder
from z_dep_discovery.builders.maven import MavenBuilder
from z_dep_discovery.builders.registry import (
    BuilderDescriptor,
    BuilderRegistry,
    create_default_registry,
)

__all__ = [
    "Builder",
    "BuilderDescriptor",
    "BuilderRegistry",
    "MavenBuilder",
    "create_default_registry",
]
