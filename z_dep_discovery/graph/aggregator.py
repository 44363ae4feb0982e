"""Aggregate import edges into deduplicated dependencies with provenance."""

from __future__ import annotations

from collections.abc import Iterable

from z_dep_discovery.models.dependency import Dependency, ImportEdge, Locator


def compute_import_paths(edges: Iterable[ImportEdge]) -> list[Dependency]:
    """Group edges by locator and collect the distinct paths to each.

    Root-tagged locators are the synthetic analysis root and are skipped.
    An edge coming straight from the root contributes no path, but its
    locator is still emitted (with ``via == []``).
    """
    paths: dict[Locator, set[str]] = {}
    for edge in edges:
        if edge.locator.is_root:
            continue
        paths.setdefault(edge.locator, set()).add(str(edge.via))

    return [
        Dependency(locator=locator, via=sorted(p for p in via if p))
        for locator, via in paths.items()
    ]
