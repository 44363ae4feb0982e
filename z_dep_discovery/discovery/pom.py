"""Minimal pom.xml reader: only the fields used to name a module."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from z_dep_discovery.exceptions import PomParseError
from z_dep_discovery.models.manifest import PomFile

_NS = "{http://maven.apache.org/POM/4.0.0}"

_FIELDS = {
    "artifactId": "artifact_id",
    "groupId": "group_id",
    "version": "version",
    "description": "description",
    "name": "name",
    "url": "url",
}


def _local(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def parse_pom_text(content: str) -> PomFile:
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise PomParseError(f"Invalid XML: {e}") from e

    if _local(root.tag) != "project":
        raise PomParseError(f"Expected <project> root element, got <{_local(root.tag)}>")

    pom = PomFile()
    # Direct children only: <parent><artifactId> must not leak into the module.
    for child in root:
        attr = _FIELDS.get(_local(child.tag))
        if attr and child.text:
            setattr(pom, attr, child.text.strip())
    return pom


def parse_pom(path: str | Path) -> PomFile:
    """Read and parse a pom.xml file. Raises PomParseError on any failure."""
    try:
        content = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise PomParseError(f"Cannot read {path}: {e}") from e
    return parse_pom_text(content)


def pom_display_name(pom: PomFile) -> str:
    """Preferred display name for a module: <name>, then <artifactId>."""
    return pom.name or pom.artifact_id
