"""
Utility helpers for the tabular library.
"""

from .app_logger import configure_logging, get_logger
from .column_reference import to_index, to_label

__all__ = [
    "configure_logging",
    "get_logger",
    "to_index",
    "to_label",
]
