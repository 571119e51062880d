"""Serialization of path geometry (and path commands) to canonical path-data text."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from svgpathdata.arc import ArcConverter, ArcFlattener
from svgpathdata.commands import (
    Arc,
    ArcParams,
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
from svgpathdata.common import ARC_HALF_TURN_TOLERANCE, DEFAULT_PRECISION
from svgpathdata.geom import Point
from svgpathdata.segments import Cubic, EllipticalArc, Line, PathGeometry, Quadratic, Segment

###############################################################################
# SerializerOptions
###############################################################################


class ArcMode(Enum):
    """How elliptical arc segments are written."""

    ARC = "arc"  # endpoint parameterization: A rx ry rotation large-arc sweep x y
    CUBIC = "cubic"  # flattened to cubic Beziers: one C per piece


@dataclass(frozen=True)
class SerializerOptions:
    """Options of the path-data serializer.

    Attributes:
        precision: maximum number of fraction digits per number
        arc_mode: how elliptical arcs are written (for consumers without arc support use CUBIC)
    """

    precision: int = DEFAULT_PRECISION
    arc_mode: ArcMode = ArcMode.ARC

    def to_dict(self) -> dict:
        """Convert options to a dictionary for serialization."""
        return {
            "precision": self.precision,
            "arc_mode": self.arc_mode.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> SerializerOptions:
        """Create SerializerOptions from a dictionary."""
        return cls(
            precision=data.get("precision", DEFAULT_PRECISION),
            arc_mode=ArcMode(data.get("arc_mode", ArcMode.ARC.value)),
        )


DEFAULT_OPTIONS = SerializerOptions()


###############################################################################
# PathSerializer
###############################################################################


class PathSerializer:
    """
    Renders geometry back to path data.

    Output is canonical: absolute commands only, an explicit M per subpath,
    one command token per segment and single spaces between all tokens, e.g.
    "M 100 100 L 200 100 L 200 200 Z".
    """

    def __init__(self, options: Optional[SerializerOptions] = None):
        self.options = options if options is not None else DEFAULT_OPTIONS

    @staticmethod
    def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
        """
        Render _value_ in fixed decimal notation.

        At most _precision_ fraction digits are written; trailing zeros and a
        trailing "." are removed, so integral values have no ".0".
        Scientific notation is never used and negative zero renders as "0".
        """
        text = f"{value:.{precision}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        if text in ("-0", ""):
            text = "0"
        return text

    def _numbers(self, values: Iterable[float]) -> List[str]:
        return [self.format_number(value, self.options.precision) for value in values]

    def _points(self, points: Iterable[Point]) -> List[str]:
        return self._numbers(v for point in points for v in point)

    def format_bezier(self, control_points: Sequence[Point]) -> str:
        """
        Render a Bezier curve given by its control points (start point included).

        2 points are written as L, 3 as Q and 4 as C.

        Raises:
            ValueError: for any other number of control points
        """
        letters = {2: "L", 3: "Q", 4: "C"}
        letter = letters.get(len(control_points))
        if letter is None:
            raise ValueError(f"Bezier curve needs 2, 3 or 4 control points, got {len(control_points)}")
        return " ".join([letter] + self._points(control_points[1:]))

    def format_arc_params(self, params: ArcParams) -> str:
        """Render an arc command in endpoint parameterization."""
        numbers = self._numbers((params.rx, params.ry, params.rotation_degrees))
        flags = ["1" if params.large_arc else "0", "1" if params.sweep else "0"]
        return " ".join(["A"] + numbers + flags + self._points([params.end]))

    def _round_down(self, value: float) -> float:
        scale = 10**self.options.precision
        rounded = math.floor(value * scale) / scale
        return rounded if rounded > 0.0 else value

    def arc_params(self, arc: EllipticalArc) -> ArcParams:
        """
        Endpoint parameters of _arc_ as they are written.

        A half-turn arc has its center on the chord, i.e. its radii are the smallest
        ones spanning the chord (typically the result of radius correction). Rounding
        such radii up would move the center off the chord by far more than the number
        precision when read back, so they are rounded down instead: reading them
        back scales them up to the same ellipse again.
        """
        _, params = ArcConverter.center_to_endpoint(arc)
        if abs(abs(arc.sweep_angle) - math.pi) <= ARC_HALF_TURN_TOLERANCE:
            params = replace(params, rx=self._round_down(params.rx), ry=self._round_down(params.ry))
        return params

    def format_segment(self, segment: Segment) -> str:
        """
        Render a single segment as one command (arcs in CUBIC mode: one C per piece).

        An arc without extent is written as a line to its end point, so that the
        segment is kept when the output is read back.
        """
        if isinstance(segment, (Line, Quadratic, Cubic)):
            return self.format_bezier(segment.control_points)
        if isinstance(segment, EllipticalArc):
            if ArcFlattener.segment_count(segment.sweep_angle) == 0:
                return self.format_bezier([segment.start, segment.end])
            if self.options.arc_mode is ArcMode.CUBIC:
                return " ".join(self.format_bezier(cubic.control_points) for cubic in segment.to_cubics())
            return self.format_arc_params(self.arc_params(segment))
        raise TypeError(f"Unknown segment type {type(segment).__name__}")

    def serialize(self, geometry: PathGeometry) -> str:
        """
        Serialize _geometry_ to a path-data string.

        Args:
            geometry (PathGeometry): the geometry to serialize

        Returns:
            str: path data (d attribute value); empty for an empty geometry
        """
        parts: List[str] = []
        for subpath in geometry.subpaths:
            parts.append(" ".join(["M"] + self._points([subpath.start_point])))
            for segment in subpath.segments:
                parts.append(self.format_segment(segment))
            if subpath.closed:
                parts.append("Z")
        return " ".join(parts)

    def format_command(self, command: PathCommand) -> str:
        """
        Render a single absolute command using its own letter.

        Smooth commands keep their shorthand form (S c2 end, T end).
        """
        if isinstance(command, (MoveTo, LineTo)):
            values = self._points([command.point])
        elif isinstance(command, HorizontalLineTo):
            values = self._numbers([command.x])
        elif isinstance(command, VerticalLineTo):
            values = self._numbers([command.y])
        elif isinstance(command, CubicBezier):
            values = self._points([command.control1, command.control2, command.end])
        elif isinstance(command, SmoothCubic):
            values = self._points([command.control2, command.end])
        elif isinstance(command, QuadraticBezier):
            values = self._points([command.control, command.end])
        elif isinstance(command, SmoothQuadratic):
            values = self._points([command.end])
        elif isinstance(command, Arc):
            return self.format_arc_params(command.params)
        elif isinstance(command, ClosePath):
            values = []
        else:
            raise TypeError(f"Unknown path command {type(command).__name__}")
        return " ".join([command.letter] + values)

    def serialize_commands(self, commands: Sequence[PathCommand]) -> str:
        """Serialize a list of commands, one token per command, separated by spaces."""
        return " ".join(self.format_command(command) for command in commands)
