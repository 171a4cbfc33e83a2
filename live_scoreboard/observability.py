"""Logging setup for the live scoreboard."""

import logging
import sys

import structlog

from .config import Config


def configure_logging(config: Config) -> None:
    """Configure stdlib logging and structlog from the application config.

    structlog events are printed straight to stdout by ``PrintLoggerFactory``
    and rendered as JSON when ``log_format`` is ``json`` or as console lines
    when it is ``text``. The stdlib setup only applies to loggers of
    third-party libraries that log through ``logging``.
    """
    level = getattr(logging, config.log_level)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        stream=sys.stdout,
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)

    if config.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    structlog.get_logger().debug(
        "Logging configured",
        environment=config.environment.value,
        log_level=config.log_level,
        log_format=config.log_format,
    )
