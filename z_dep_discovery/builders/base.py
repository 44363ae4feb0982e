"""Abstract base class for build tool integrations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from z_dep_discovery.models.dependency import Dependency
from z_dep_discovery.models.manifest import ManifestRecord


class Builder(ABC):
    """
    One build ecosystem (Maven, Gradle, ...).
    Each builder knows how to find its binaries, build a module, and ask the
    build tool for the module's resolved dependency graph.
    All builders produce list[Dependency].
    """

    @property
    @abstractmethod
    def type_tag(self) -> str:
        """Module type identifier, e.g. 'mvn'."""
        ...

    @abstractmethod
    def initialize(self) -> None:
        """Resolve tool binaries. Raises BinaryNotFoundError for required tools."""
        ...

    @abstractmethod
    def build(self, module_dir: str | Path, force: bool = False) -> None:
        """Build the module, cleaning first when *force* is set."""
        ...

    @abstractmethod
    def analyze(self, module_dir: str | Path, allow_unresolved: bool = False) -> list[Dependency]:
        """
        Run the tool's dependency listing and return deduplicated dependencies.

        Args:
            module_dir: Module directory (where the manifest lives).
            allow_unresolved: Accept partially resolved output where the
                builder supports it.
        """
        ...

    @abstractmethod
    def is_built(self, module_dir: str | Path, allow_unresolved: bool = False) -> bool:
        """Whether dependencies are resolvable without building first."""
        ...

    @abstractmethod
    def is_module(self, target: str | Path) -> bool:
        """Whether *target* is (or contains) a manifest of this ecosystem."""
        ...

    @abstractmethod
    def discover_modules(self, root_dir: str | Path) -> list[ManifestRecord]:
        """Find module manifests under *root_dir*."""
        ...
