"""structlog setup for scripts and applications using the SDK."""

import logging

import structlog


def configure_logging(level: str = "info") -> None:
    """Configure structlog with console output filtered at `level`.

    Args:
        level: Standard logging level name (debug, info, warning, error)
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )
