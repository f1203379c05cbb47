"""Structlog configuration shared by the library and the CLI"""

from __future__ import annotations

import logging
import logging.config
import sys

import structlog

from diffparse.config import Settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog + stdlib logging from settings (defaults when None)."""
    settings = settings or Settings()
    log_level = getattr(logging, settings.log_level, logging.WARNING)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    # Diagnostics go to stderr; stdout is reserved for command output.
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": {"()": lambda: formatter}},
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": sys.stderr,
                }
            },
            "loggers": {
                "diffparse": {"handlers": ["default"], "level": log_level, "propagate": False},
            },
        }
    )


def get_logger(name: str):
    """Return a structlog logger over the stdlib logger of that name.

    Nothing is configured here; until configure_logging runs, events go to
    stdlib logging and are dropped unless the host has set up handlers.
    """
    return structlog.wrap_logger(logging.getLogger(name))
