"""Environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class Settings:
    """Runtime settings, read from environment variables.

    Environment variables:
        JAVA_BINARY            Java binary tried before ``java``
        MAVEN_BINARY           Maven binary tried before ``mvn``
        ZDEPS_COMMAND_TIMEOUT  seconds before an external command is killed
                               (default: no timeout)
        ZDEPS_LOG_LEVEL        log level (default: INFO)
        ZDEPS_LOG_FORMAT       console | json (default: console)
    """

    java_binary: str = ""
    maven_binary: str = ""
    command_timeout: float | None = None
    log_level: str = "INFO"
    log_format: str = "console"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return cls(
            java_binary=env.get("JAVA_BINARY", ""),
            maven_binary=env.get("MAVEN_BINARY", ""),
            command_timeout=_parse_timeout(env.get("ZDEPS_COMMAND_TIMEOUT", "")),
            log_level=env.get("ZDEPS_LOG_LEVEL", "INFO").upper(),
            log_format=env.get("ZDEPS_LOG_FORMAT", "console").lower(),
        )


def _parse_timeout(raw: str) -> float | None:
    raw = raw.strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"ZDEPS_COMMAND_TIMEOUT must be a number of seconds, got {raw!r}")
    if value <= 0:
        raise ValueError(f"ZDEPS_COMMAND_TIMEOUT must be positive, got {raw!r}")
    return value
