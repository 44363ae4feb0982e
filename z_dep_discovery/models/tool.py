"""Resolved external tool binaries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ToolContext:
    """A binary that answered its version probe."""

    cmd: str  # name or path as it was invoked
    version: str  # raw version output, stripped
