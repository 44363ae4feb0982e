"""Data models for build manifests."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ManifestRecord:
    """A discovered module manifest."""

    name: str  # display name, e.g. POM <name> or <artifactId>
    path: str  # manifest path relative to the search root, POSIX form
    type: str  # builder type tag, e.g. "mvn"


@dataclass
class PomFile:
    """The subset of a pom.xml used to describe a module."""

    artifact_id: str = ""
    group_id: str = ""
    version: str = ""
    description: str = ""
    name: str = ""
    url: str = ""
