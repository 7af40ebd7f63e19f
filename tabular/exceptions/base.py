"""
Base exception for the tabular library.
"""

from typing import Any, Dict, Optional


class TabularException(Exception):
    """Base error carrying a stable code and structured details."""

    def __init__(self, message: str, code: str = "TABULAR_ERROR",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
