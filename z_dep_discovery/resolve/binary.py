"""Binary resolution: find the first candidate executable that reports a version."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Callable

import structlog

from z_dep_discovery.core.logging import get_logger
from z_dep_discovery.core.process import run_logged
from z_dep_discovery.exceptions import BinaryNotFoundError
from z_dep_discovery.models.tool import ToolContext

# A probe returns the version text for a command, or raises.
VersionProbe = Callable[[str], str]


def version_probe(version_args: Sequence[str], timeout: float | None = None) -> VersionProbe:
    """Build a probe that runs ``<cmd> <version_args...>``.

    Some tools (``java -version``) print their version to stderr, so an
    empty stdout falls back to stderr.
    """
    args = list(version_args)

    def probe(cmd: str) -> str:
        result = run_logged([cmd, *args], timeout=timeout)
        if result.stdout.strip():
            return result.stdout
        return result.stderr

    return probe


class BinaryResolver:
    """Try candidate binaries in order; first one with a version wins."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._log = logger or get_logger("binary")

    def which(self, candidates: Sequence[str], probe: VersionProbe) -> ToolContext:
        """Return the first candidate whose probe yields a non-empty version.

        Empty candidates (e.g. an unset ``$MAVEN_BINARY``) are skipped.
        Raises BinaryNotFoundError naming every candidate tried.
        """
        tried: list[str] = []
        for cmd in candidates:
            if not cmd:
                continue
            tried.append(cmd)
            try:
                version = probe(cmd)
            except Exception as e:
                self._log.debug("binary.probe_failed", cmd=cmd, error=str(e))
                continue
            version = (version or "").strip()
            if not version:
                self._log.debug("binary.probe_empty", cmd=cmd)
                continue
            self._log.debug("binary.resolved", cmd=cmd, version=version.splitlines()[0])
            return ToolContext(cmd=cmd, version=version)
        raise BinaryNotFoundError(tried)

    def which_version(
        self,
        version_flags: str,
        *candidates: str,
        timeout: float | None = None,
    ) -> ToolContext:
        """Shorthand: ``which_version("--version", "$MAVEN_BINARY", "mvn")``."""
        return self.which(candidates, version_probe(version_flags.split(), timeout=timeout))
