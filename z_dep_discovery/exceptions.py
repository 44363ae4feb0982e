"""Custom exceptions for z-dep-discovery."""

from __future__ import annotations

from collections.abc import Sequence


class DiscoveryError(Exception):
    """Base exception for all dependency discovery errors."""


class BinaryNotFoundError(DiscoveryError):
    """Raised when no candidate binary produced a usable version."""

    def __init__(self, candidates: Sequence[str], hint: str | None = None):
        self.candidates = list(candidates)
        self.hint = hint
        message = f"Could not resolve a working binary (tried: {self.candidates})"
        if hint:
            message = f"{message}; {hint}"
        super().__init__(message)


class CommandExecutionError(DiscoveryError):
    """Raised when an external command fails to run or exits non-zero."""

    def __init__(
        self,
        cmd: Sequence[str],
        cwd: str | None,
        returncode: int | None,
        stdout: str = "",
        stderr: str = "",
        reason: str | None = None,
    ):
        self.cmd = list(cmd)
        self.cwd = cwd
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        detail = reason or f"exit {returncode}"
        super().__init__(
            f"Running `{' '.join(self.cmd)}` in {cwd or '.'} failed ({detail}): "
            f"{stderr.strip()[-1000:]}"
        )


class ParseInconsistencyError(DiscoveryError):
    """Raised when dependency tree output breaks the expected format."""

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"{reason}: {line!r}")


class PomParseError(DiscoveryError):
    """Raised when a manifest file cannot be deserialized."""


class BuildError(DiscoveryError):
    """Raised when a module build fails."""


class AnalysisError(DiscoveryError):
    """Raised when the dependency tree command fails."""


class NotInitializedError(DiscoveryError):
    """Raised when a builder is used before initialize()."""
