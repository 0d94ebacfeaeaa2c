"""
Utility helpers shared across blazelint packages.
"""

from .logging import configure_logging, get_logger, set_log_level, time_call
from .naming import camel_to_snake, normalize_kind

__all__ = [
    "camel_to_snake",
    "configure_logging",
    "get_logger",
    "normalize_kind",
    "set_log_level",
    "time_call",
]
