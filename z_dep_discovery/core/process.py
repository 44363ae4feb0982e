"""External command helpers: capture stdout/stderr separately as text."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import structlog

from z_dep_discovery.core.logging import get_logger
from z_dep_discovery.exceptions import CommandExecutionError


@dataclass
class CommandResult:
    """Captured output of a finished command."""

    stdout: str
    stderr: str
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run(
    cmd: Sequence[str],
    cwd: str | Path | None = None,
    timeout: float | None = None,
) -> CommandResult:
    """Run *cmd* and capture its output. Does not raise on non-zero exit.

    Raises ``OSError`` (e.g. ``FileNotFoundError``) when the executable
    cannot be started and ``subprocess.TimeoutExpired`` on timeout.
    """
    result = subprocess.run(
        list(cmd),
        cwd=str(cwd) if cwd is not None else None,
        capture_output=True,
        text=True,
        errors="replace",
        timeout=timeout,
    )
    return CommandResult(stdout=result.stdout, stderr=result.stderr, returncode=result.returncode)


def run_logged(
    cmd: Sequence[str],
    cwd: str | Path | None = None,
    timeout: float | None = None,
    logger: structlog.stdlib.BoundLogger | None = None,
) -> CommandResult:
    """Run *cmd* with debug logging, raising CommandExecutionError on failure.

    The raised error carries stdout as well as stderr: Maven reports most
    failures on stdout.
    """
    log = logger or get_logger("process")
    cmd = list(cmd)
    cwd_str = str(cwd) if cwd is not None else None
    log.debug("command.start", cmd=" ".join(cmd), cwd=cwd_str)

    try:
        result = run(cmd, cwd=cwd, timeout=timeout)
    except subprocess.TimeoutExpired as e:
        log.debug("command.timeout", cmd=" ".join(cmd), timeout=timeout)
        raise CommandExecutionError(
            cmd,
            cwd_str,
            None,
            stdout=_as_text(e.stdout),
            stderr=_as_text(e.stderr),
            reason=f"timed out after {timeout}s",
        ) from e
    except OSError as e:
        log.debug("command.spawn_failed", cmd=" ".join(cmd), error=str(e))
        raise CommandExecutionError(cmd, cwd_str, None, reason=str(e)) from e

    if not result.ok:
        log.debug(
            "command.failed",
            cmd=" ".join(cmd),
            returncode=result.returncode,
            stderr=result.stderr[-1000:],
        )
        raise CommandExecutionError(
            cmd,
            cwd_str,
            result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )

    log.debug("command.done", cmd=" ".join(cmd), stdout_bytes=len(result.stdout))
    return result


def _as_text(data: str | bytes | None) -> str:
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode(errors="replace")
    return data
