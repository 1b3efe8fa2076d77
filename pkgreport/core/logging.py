"""Logging for the pkg-report CLI — structlog rendered through stdlib logging."""

from __future__ import annotations

import logging
import logging.config
import os

import structlog

_LEVEL_ENV = "PKGREPORT_LOG_LEVEL"
_FORMAT_ENV = "PKGREPORT_LOG_FORMAT"


def setup_logging(verbose: bool = False) -> None:
    """Send pkgreport events to stderr.

    ``PKGREPORT_LOG_LEVEL`` picks the level (default INFO; ``-v`` forces
    DEBUG). ``PKGREPORT_LOG_FORMAT=json`` switches to one JSON object per
    line for CI logs.
    """
    level = "DEBUG" if verbose else os.environ.get(_LEVEL_ENV, "INFO").upper()
    as_json = os.environ.get(_FORMAT_ENV, "console").lower() == "json"

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso" if as_json else "%H:%M:%S", utc=as_json),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # stdout is reserved for the CLI summary
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "pkgreport": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": pre_chain,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        _renderer(as_json),
                    ],
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "pkgreport",
                },
            },
            "root": {"handlers": ["stderr"], "level": "WARNING"},
            "loggers": {"pkgreport": {"level": level}},
        }
    )


def _renderer(as_json: bool) -> structlog.types.Processor:
    if as_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)
