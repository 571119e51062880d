"""Assembling parsed path commands into subpaths of typed segments."""

from __future__ import annotations

import logging
from typing import List, Sequence

from svgpathdata.arc import ArcConverter
from svgpathdata.commands import (
    Arc,
    ClosePath,
    CubicBezier,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadraticBezier,
    SmoothCubic,
    SmoothQuadratic,
    VerticalLineTo,
)
from svgpathdata.geom import ORIGIN, Point
from svgpathdata.segments import Cubic, Line, PathGeometry, Quadratic, Segment, Subpath

logger = logging.getLogger(__name__)


class PathGeometryBuilder:
    """
    Folds an ordered sequence of absolute path commands into a `PathGeometry`.

    A builder is meant for a single `build` call; use the `from_commands`
    class method for the common case.
    """

    def __init__(self):
        self._subpaths: List[Subpath] = []
        self._segments: List[Segment] = []
        self._current_point: Point = ORIGIN
        self._subpath_start: Point = ORIGIN

    @classmethod
    def from_commands(cls, commands: Sequence[PathCommand]) -> PathGeometry:
        """Build the geometry described by _commands_."""
        return cls().build(commands)

    def _finish_subpath(self, closed: bool) -> None:
        # Open subpaths without segments are dropped, explicitly closed ones are kept
        if self._segments or closed:
            self._subpaths.append(Subpath(self._subpath_start, tuple(self._segments), closed))
        self._segments = []

    def _append(self, segment: Segment, end: Point) -> None:
        # After a Z the current point is the subpath start, so drawing on
        # without a MoveTo opens a new subpath starting there
        self._segments.append(segment)
        self._current_point = end

    def build(self, commands: Sequence[PathCommand]) -> PathGeometry:
        """
        Build the geometry described by _commands_.

        Args:
            commands: absolute commands as produced by `PathCommandParser`

        Returns:
            PathGeometry: the resulting geometry
        """
        for command in commands:
            current = self._current_point
            if isinstance(command, MoveTo):
                self._finish_subpath(closed=False)
                self._current_point = command.point
                self._subpath_start = command.point
            elif isinstance(command, LineTo):
                self._append(Line(current, command.point), command.point)
            elif isinstance(command, HorizontalLineTo):
                end = Point(command.x, current.y)
                self._append(Line(current, end), end)
            elif isinstance(command, VerticalLineTo):
                end = Point(current.x, command.y)
                self._append(Line(current, end), end)
            elif isinstance(command, (CubicBezier, SmoothCubic)):
                self._append(Cubic(current, command.control1, command.control2, command.end), command.end)
            elif isinstance(command, (QuadraticBezier, SmoothQuadratic)):
                self._append(Quadratic(current, command.control, command.end), command.end)
            elif isinstance(command, Arc):
                segment = ArcConverter.to_segment(current, command.params)
                if segment is None:
                    logger.debug("Dropping arc with coincident endpoints at (%g, %g)", current.x, current.y)
                else:
                    self._append(segment, command.params.end)
            elif isinstance(command, ClosePath):
                self._finish_subpath(closed=True)
                self._current_point = self._subpath_start
            else:
                raise TypeError(f"Unknown path command {type(command).__name__}")

        # Finish any remaining open subpath
        self._finish_subpath(closed=False)
        return PathGeometry(tuple(self._subpaths))
