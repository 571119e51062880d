"""Exceptions raised while processing SVG path data."""

from __future__ import annotations


class PathDataError(Exception):
    """Base exception for path-data related errors."""


class PathDataSyntaxError(PathDataError):
    """Raised by strict parsing when the path data cannot be read completely.

    Attributes:
        position: index into the path data string where parsing stopped
    """

    def __init__(self, message: str, position: int):
        super().__init__(f"{message} (at position {position})")
        self.position = position
