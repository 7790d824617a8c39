"""
Logging for the masonry layout engine.

The engine, the config loader, and the CLI share one package logger.
The engine only logs at DEBUG, so library callers see nothing unless
they opt in; the CLI switches levels through :func:`set_verbosity`.
"""

import logging

LOGGER_NAME = "simple_masonry"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(
        name: str = LOGGER_NAME,
        level: int = logging.INFO,
        handler: logging.Handler | None = None,
) -> logging.Logger:
    """
    Return the named logger with a single formatted handler attached.

    Calling again with the same name only updates the level.

    Args:
        name: Logger name; defaults to the package logger.
        level: Logging level (e.g., logging.INFO, logging.DEBUG).
        handler: Handler to attach instead of a stderr stream handler.

    """
    layout_logger = logging.getLogger(name)
    layout_logger.setLevel(level)
    if not layout_logger.handlers:
        handler = handler or logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        layout_logger.addHandler(handler)
        layout_logger.propagate = False
    return layout_logger


def set_verbosity(*, verbose: bool) -> None:
    """Show engine DEBUG messages when ``verbose``, otherwise INFO and up."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


# Shared logger used across modules
logger = setup_logger()
