"""Manifest discovery: root manifest first, nested manifests otherwise."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

import structlog

from z_dep_discovery.core.logging import get_logger
from z_dep_discovery.discovery.files import find_ancestor, is_file
from z_dep_discovery.discovery.pom import parse_pom, pom_display_name
from z_dep_discovery.exceptions import PomParseError
from z_dep_discovery.models.manifest import ManifestRecord, PomFile


class ManifestLocator:
    """Find build manifests for one build ecosystem.

    If ``<root>/<manifest_name>`` exists, that single manifest describes the
    whole project. Otherwise every nested manifest is its own module.
    """

    def __init__(
        self,
        manifest_name: str = "pom.xml",
        type_tag: str = "mvn",
        parser: Callable[[Path], PomFile] = parse_pom,
        name_resolver: Callable[[PomFile], str] = pom_display_name,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self.manifest_name = manifest_name
        self.type_tag = type_tag
        self._parser = parser
        self._name_resolver = name_resolver
        self._log = logger or get_logger("manifest")

    def find_root(self, path: str | Path) -> str | None:
        """Nearest directory at or above *path* containing the manifest."""
        return find_ancestor(lambda d: is_file(d, self.manifest_name), path)

    def discover(self, root_dir: str | Path) -> list[ManifestRecord]:
        root = Path(root_dir)
        root_manifest = root / self.manifest_name
        if is_file(root, self.manifest_name):
            self._log.debug("manifest.root_found", path=str(root_manifest))
            return [
                ManifestRecord(
                    name=self._display_name(root_manifest),
                    path=self.manifest_name,
                    type=self.type_tag,
                )
            ]

        records = []
        for hit in sorted(root.glob(f"**/{self.manifest_name}")):
            if not hit.is_file():
                continue
            records.append(
                ManifestRecord(
                    name=self._display_name(hit),
                    path=hit.relative_to(root).as_posix(),
                    type=self.type_tag,
                )
            )
        self._log.debug("manifest.nested_found", root=str(root), count=len(records))
        return records

    def _display_name(self, manifest: Path) -> str:
        fallback = os.path.basename(os.path.abspath(manifest.parent))
        try:
            pom = self._parser(manifest)
        except PomParseError as e:
            self._log.debug("manifest.parse_failed", path=str(manifest), error=str(e))
            return fallback
        return self._name_resolver(pom) or fallback
