"""Builder registry: look up build tool integrations by module type."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from z_dep_discovery.builders.base import Builder
from z_dep_discovery.core.logging import get_logger

logger = get_logger("registry")


@dataclass
class BuilderDescriptor:
    """A build ecosystem the CLI can hand modules to."""

    type_tag: str
    display_name: str
    manifest_names: list[str]
    factory: Callable[[], Builder]


class BuilderRegistry:
    """Builders keyed by module type tag ("mvn", ...)."""

    def __init__(self) -> None:
        self._builders: dict[str, BuilderDescriptor] = {}

    def register(self, descriptor: BuilderDescriptor) -> None:
        self._builders[descriptor.type_tag] = descriptor
        logger.debug("registry.registered", type_tag=descriptor.type_tag)

    def get(self, type_tag: str) -> BuilderDescriptor | None:
        return self._builders.get(type_tag)

    def list_all(self) -> list[BuilderDescriptor]:
        """Registered builders, sorted by type tag."""
        return sorted(self._builders.values(), key=lambda d: d.type_tag)

    def create(self, type_tag: str) -> Builder:
        """Instantiate the builder for *type_tag*. Raises KeyError if unknown."""
        desc = self._builders.get(type_tag)
        if desc is None:
            raise KeyError(f"No builder registered for type '{type_tag}'")
        return desc.factory()

    def find_for_directory(self, directory: str | Path) -> list[BuilderDescriptor]:
        """Builders with a manifest directly inside *directory*."""
        root = Path(directory)
        return [
            d
            for d in self._builders.values()
            if any((root / name).is_file() for name in d.manifest_names)
        ]


def create_default_registry() -> BuilderRegistry:
    """Create registry with Maven registered."""
    from z_dep_discovery.builders.maven import MavenBuilder

    registry = BuilderRegistry()
    registry.register(
        BuilderDescriptor(
            type_tag="mvn",
            display_name="Apache Maven",
            manifest_names=["pom.xml"],
            factory=MavenBuilder,
        )
    )
    return registry
