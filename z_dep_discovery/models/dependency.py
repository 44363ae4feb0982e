"""Dependency graph data types: locators, import paths and dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

ROOT_FETCHER = "root"

# Separator between locators in a serialized import path.
PATH_SEPARATOR = " -> "


@dataclass(frozen=True)
class Locator:
    """Structural identity of a dependency: (fetcher, package, revision)."""

    fetcher: str
    package: str
    revision: str

    @property
    def is_root(self) -> bool:
        return self.fetcher == ROOT_FETCHER

    def __str__(self) -> str:
        return f"{self.fetcher}+{self.package}${self.revision}"

    @classmethod
    def parse(cls, text: str) -> Locator:
        """Inverse of ``str(locator)``: ``fetcher+package$revision``."""
        fetcher, sep, rest = text.partition("+")
        package, sep2, revision = rest.rpartition("$")
        if not sep or not sep2:
            raise ValueError(f"Invalid locator string: {text!r}")
        return cls(fetcher=fetcher, package=package, revision=revision)


ROOT_LOCATOR = Locator(ROOT_FETCHER, ROOT_FETCHER, ROOT_FETCHER)


class ImportPath(tuple):
    """Ordered chain of locators from the analysis root to a dependency.

    Serializes with root-tagged entries dropped, so a path that only holds
    the root sentinel serializes to ``""``.
    """

    def __new__(cls, locators=()):
        return super().__new__(cls, locators)

    def __str__(self) -> str:
        return PATH_SEPARATOR.join(str(loc) for loc in self if not loc.is_root)

    def __repr__(self) -> str:
        return f"ImportPath({list(self)!r})"

    @classmethod
    def parse(cls, text: str) -> ImportPath:
        if not text:
            return cls()
        return cls(Locator.parse(part) for part in text.split(PATH_SEPARATOR))


@dataclass(frozen=True)
class ImportEdge:
    """One observation while walking a tree: *locator* was reached via *via*."""

    locator: Locator
    via: ImportPath


@dataclass
class Dependency:
    """A deduplicated dependency and the distinct paths it was reached through."""

    locator: Locator
    via: list[str] = field(default_factory=list)

    @property
    def fetcher(self) -> str:
        return self.locator.fetcher

    @property
    def package(self) -> str:
        return self.locator.package

    @property
    def revision(self) -> str:
        return self.locator.revision

    def via_paths(self) -> list[ImportPath]:
        return [ImportPath.parse(p) for p in self.via]

    def to_dict(self) -> dict[str, Any]:
        return {
            "fetcher": self.fetcher,
            "package": self.package,
            "revision": self.revision,
            "via": list(self.via),
        }
