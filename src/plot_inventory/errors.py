"""
Exceptions raised by the plot inventory package.
"""

from __future__ import annotations


class PlotInventoryError(Exception):
    """Base class for plot inventory errors."""


class ApiRequestError(PlotInventoryError):
    """An inventory API call returned an error response."""

    def __init__(self, code: str, message: str, details: list | None = None):
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message
        self.details = details or []
