"""Utilities - logging."""

from attribute_field.utilities.logging import setup_logging

__all__ = [
    "setup_logging",
]
