"""Logging configuration for xlreports.

Modules log through ``logging.getLogger(__name__)``; this module only wires a
console handler onto the package logger so CLI runs can surface those records.

Usage:
    from xlreports.utils.logging import configure_logging

    configure_logging("DEBUG")
"""

import logging

PACKAGE_LOGGER = "xlreports"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: str | None = None,
) -> logging.Logger:
    """Configure the ``xlreports`` logger with a single console handler.

    Calling it again replaces the handler installed by the previous call, so
    the level can be changed without duplicating output.

    Args:
        level: Log level (int or string like "INFO").
        format_string: Custom format string (uses default if None).

    Returns:
        The configured package logger.

    Raises:
        ValueError: If a string level is not one of LEVEL_NAMES.
    """
    if isinstance(level, str):
        name = level.upper()
        if name not in LEVEL_NAMES:
            raise ValueError(f"Unknown log level: {level!r}")
        level = getattr(logging, name)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        if getattr(handler, "_xlreports_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    handler._xlreports_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
