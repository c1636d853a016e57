"""Structured logging configuration (structlog over stdlib logging)."""

from __future__ import annotations

import logging
import logging.config
import os
import sys

import structlog


def _pre_chain(log_format: str) -> list[structlog.types.Processor]:
    """Processors shared by structlog events and foreign stdlib records."""
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if log_format == "json":
        processors.append(structlog.processors.dict_tracebacks)
    else:
        processors.append(structlog.processors.format_exc_info)
    return processors


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def setup_logging(level: str | None = None) -> None:
    """Configure structlog and stdlib logging for the CLI.

    Environment:
        LICENSESCAN_LOG_LEVEL   default WARNING
        LICENSESCAN_LOG_FORMAT  console | json (default console)

    An explicit *level* (``--verbose``) wins over the environment. Output goes
    to stderr because stdout carries the report.
    """
    log_level = (level or os.environ.get("LICENSESCAN_LOG_LEVEL", "WARNING")).upper()
    log_format = os.environ.get("LICENSESCAN_LOG_FORMAT", "console").lower()
    pre_chain = _pre_chain(log_format)

    # Not cached: each CLI invocation may reconfigure (tests invoke many times).
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "licensescan": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": pre_chain,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        _renderer(log_format),
                    ],
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "licensescan",
                },
            },
            "root": {"handlers": ["stderr"], "level": "WARNING"},
            "loggers": {
                "licensescan": {"level": log_level},
            },
        }
    )
