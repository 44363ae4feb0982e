"""Output schemas for the JSON report."""

from __future__ import annotations

from pydantic import BaseModel

from z_dep_discovery.models.dependency import Dependency
from z_dep_discovery.models.manifest import ManifestRecord


class DependencySchema(BaseModel):
    """One dependency; ``via`` is always present, possibly empty."""

    fetcher: str
    package: str
    revision: str
    via: list[str] = []

    @classmethod
    def from_dependency(cls, dep: Dependency) -> DependencySchema:
        return cls(**dep.to_dict())


class ManifestSchema(BaseModel):
    name: str
    path: str
    type: str

    @classmethod
    def from_record(cls, record: ManifestRecord) -> ManifestSchema:
        return cls(name=record.name, path=record.path, type=record.type)


class AnalysisReport(BaseModel):
    """Dependencies of one module."""

    module_dir: str
    builder: str
    dependencies: list[DependencySchema]
