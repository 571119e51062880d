"""Path commands as produced by the command parser.

All coordinates are absolute. The smooth variants already carry the reflected
control point resolved by the parser, so consumers never need parser state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from svgpathdata.geom import Point

###############################################################################
# ArcParams
###############################################################################


@dataclass(frozen=True)
class ArcParams:
    """Endpoint parameterization of an elliptical arc, as written in path data.

    Attributes:
        rx: X radius of the ellipse (non-negative)
        ry: Y radius of the ellipse (non-negative)
        rotation_degrees: Rotation of the ellipse's x-axis in degrees
        large_arc: If True, use the arc spanning more than half the ellipse
        sweep: If True, the arc is drawn in positive-angle direction
        end: The endpoint of the arc
    """

    rx: float
    ry: float
    rotation_degrees: float
    large_arc: bool
    sweep: bool
    end: Point

    @property
    def is_degenerate(self) -> bool:
        """True if a radius is zero, i.e. the arc is drawn as a straight line."""
        return self.rx == 0.0 or self.ry == 0.0


###############################################################################
# Commands
###############################################################################


@dataclass(frozen=True)
class MoveTo:
    """Move to point (M)"""

    letter: ClassVar[str] = "M"
    point: Point


@dataclass(frozen=True)
class LineTo:
    """Line to point (L)"""

    letter: ClassVar[str] = "L"
    point: Point


@dataclass(frozen=True)
class HorizontalLineTo:
    """Horizontal line to x coordinate (H)"""

    letter: ClassVar[str] = "H"
    x: float


@dataclass(frozen=True)
class VerticalLineTo:
    """Vertical line to y coordinate (V)"""

    letter: ClassVar[str] = "V"
    y: float


@dataclass(frozen=True)
class CubicBezier:
    """Cubic Bezier curve (C)"""

    letter: ClassVar[str] = "C"
    control1: Point
    control2: Point
    end: Point


@dataclass(frozen=True)
class SmoothCubic:
    """Smooth cubic Bezier curve (S); _control1_ is the resolved reflection."""

    letter: ClassVar[str] = "S"
    control1: Point
    control2: Point
    end: Point


@dataclass(frozen=True)
class QuadraticBezier:
    """Quadratic Bezier curve (Q)"""

    letter: ClassVar[str] = "Q"
    control: Point
    end: Point


@dataclass(frozen=True)
class SmoothQuadratic:
    """Smooth quadratic Bezier curve (T); _control_ is the resolved reflection."""

    letter: ClassVar[str] = "T"
    control: Point
    end: Point


@dataclass(frozen=True)
class Arc:
    """Elliptical arc (A)"""

    letter: ClassVar[str] = "A"
    params: ArcParams


@dataclass(frozen=True)
class ClosePath:
    """Close path (Z)"""

    letter: ClassVar[str] = "Z"


PathCommand = Union[
    MoveTo,
    LineTo,
    HorizontalLineTo,
    VerticalLineTo,
    CubicBezier,
    SmoothCubic,
    QuadraticBezier,
    SmoothQuadratic,
    Arc,
    ClosePath,
]
