"""Logging setup."""

import logging

from attribute_field.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | int | None = None) -> None:
    """Configure root logging once.

    Args:
        level: Log level name or number; defaults to the configured log_level
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger(__name__).debug("[LOGGING] Configured at level %s", logging.getLevelName(level))
