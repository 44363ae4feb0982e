"""Logging for the z-deps CLI: structlog events rendered through stdlib logging."""

from __future__ import annotations

import logging
import logging.config

import structlog

from z_dep_discovery.config import Settings


def setup_logging(settings: Settings | None = None, verbose: bool = False) -> None:
    """Route structlog events to stderr.

    ``ZDEPS_LOG_FORMAT=json`` emits one JSON object per line with an ISO
    timestamp; the console format is short and human readable. ``verbose``
    forces DEBUG regardless of ``ZDEPS_LOG_LEVEL``.
    """
    settings = settings or Settings.from_env()
    log_level = "DEBUG" if verbose else settings.log_level

    if settings.log_format == "json":
        pre_chain: list[structlog.types.Processor] = [
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
        ]
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        pre_chain = [
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
        ]
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # stdout is reserved for --json output.
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "zdeps": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": pre_chain,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        renderer,
                    ],
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "zdeps",
                },
            },
            "loggers": {
                "z_dep_discovery": {
                    "handlers": ["stderr"],
                    "level": log_level,
                    "propagate": False,
                },
            },
        }
    )


def get_logger(area: str) -> structlog.stdlib.BoundLogger:
    """Default logger for a component area, e.g. ``get_logger("maven")``."""
    return structlog.get_logger(f"z_dep_discovery.{area}")
