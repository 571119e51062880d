"""Segment, subpath and geometry value types produced by parsing path data."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from svgpathdata.bezier import BezierCurve
from svgpathdata.common import POLYGONIZE_STEPS_DEFAULT
from svgpathdata.geom import BoundingBox, GeomMath, Point

if TYPE_CHECKING:
    from svgpathdata.commands import ArcParams  # pylint: disable=unused-import

# Arc end points are recomputed from the center form, so allow for float noise
CLOSING_TOLERANCE: float = 1.0e-9

###############################################################################
# Segments
###############################################################################


@dataclass(frozen=True)
class Line:
    """Straight line segment from _start_ to _end_."""

    start: Point
    end: Point

    @property
    def control_points(self) -> Tuple[Point, ...]:
        """The defining points (start, end)."""
        return (self.start, self.end)

    def point_at(self, t: float) -> Point:
        """Point at parameter _t_ in [0, 1]."""
        return self.start + (self.end - self.start) * t


@dataclass(frozen=True)
class Quadratic:
    """Quadratic Bezier segment."""

    start: Point
    control: Point
    end: Point

    @property
    def control_points(self) -> Tuple[Point, ...]:
        """The control points (start, control, end)."""
        return (self.start, self.control, self.end)

    def point_at(self, t: float) -> Point:
        """Point at parameter _t_ in [0, 1]."""
        return Point(*BezierCurve.evaluate([p.as_tuple() for p in self.control_points], t))


@dataclass(frozen=True)
class Cubic:
    """Cubic Bezier segment."""

    start: Point
    control1: Point
    control2: Point
    end: Point

    @property
    def control_points(self) -> Tuple[Point, ...]:
        """The control points (start, control1, control2, end)."""
        return (self.start, self.control1, self.control2, self.end)

    def point_at(self, t: float) -> Point:
        """Point at parameter _t_ in [0, 1]."""
        return Point(*BezierCurve.evaluate([p.as_tuple() for p in self.control_points], t))


@dataclass(frozen=True)
class EllipticalArc:
    """
    Elliptical arc in center parameterization.

    The arc runs on the ellipse with the given _center_, radii _rx_/_ry_ and x-axis
    _rotation_ from _start_angle_ over the signed _sweep_angle_. All angles are
    in radians; a positive sweep runs in the direction of increasing angle.
    """

    center: Point
    rx: float
    ry: float
    rotation: float
    start_angle: float
    sweep_angle: float

    @property
    def end_angle(self) -> float:
        """Angle (radians) at which the arc ends."""
        return self.start_angle + self.sweep_angle

    @property
    def start(self) -> Point:
        """First point of the arc."""
        return self.point_at_angle(self.start_angle)

    @property
    def end(self) -> Point:
        """Last point of the arc."""
        return self.point_at_angle(self.end_angle)

    @property
    def control_points(self) -> Tuple[Point, ...]:
        """Start and end point of the arc."""
        return (self.start, self.end)

    @property
    def is_large_arc(self) -> bool:
        """True if the arc spans more than half the ellipse."""
        return abs(self.sweep_angle) > math.pi

    def point_at_angle(self, angle: float) -> Point:
        """Point on the (rotated) ellipse at parametric _angle_."""
        local = Point(self.rx * math.cos(angle), self.ry * math.sin(angle))
        return self.center + GeomMath.rotate(local, self.rotation)

    def point_at(self, t: float) -> Point:
        """Point at parameter _t_ in [0, 1]."""
        return self.point_at_angle(self.start_angle + t * self.sweep_angle)

    def to_endpoint(self) -> Tuple[Point, ArcParams]:
        """Start point and endpoint parameterization of this arc."""
        from svgpathdata.arc import ArcConverter  # pylint: disable=import-outside-toplevel

        return ArcConverter.center_to_endpoint(self)

    def to_cubics(self) -> List[Cubic]:
        """Approximate this arc by cubic Bezier segments (at most a quarter turn each)."""
        from svgpathdata.arc import ArcFlattener  # pylint: disable=import-outside-toplevel

        return ArcFlattener.to_cubics(self)


Segment = Union[Line, Quadratic, Cubic, EllipticalArc]


def _segment_points(segment: Segment, steps: int) -> NDArray[np.float64]:
    """Polygonize a single segment into an array of shape (n, 2)."""
    if isinstance(segment, EllipticalArc):
        cubics = segment.to_cubics()
        if not cubics:
            return np.array([segment.start.as_tuple()], dtype=np.float64)
        parts = [_segment_points(cubic, steps) for cubic in cubics]
        return np.vstack([parts[0]] + [part[1:] for part in parts[1:]])
    if isinstance(segment, (Line, Quadratic, Cubic)):
        return BezierCurve.polygonize_curve([p.as_tuple() for p in segment.control_points], steps)
    raise TypeError(f"Unknown segment type {type(segment).__name__}")


def _segment_signature(segment: Segment) -> Tuple[str, List[float]]:
    """Type name and comparable values of a segment (used by approx_equal)."""
    if isinstance(segment, EllipticalArc):
        # Angles wrap around (pi == -pi), so compare the arc by points on it instead
        points = [segment.start, segment.point_at(0.5), segment.end, segment.center]
        values = [v for p in points for v in p] + [segment.rx, segment.ry]
        return "EllipticalArc", values
    if isinstance(segment, (Line, Quadratic, Cubic)):
        return type(segment).__name__, [v for p in segment.control_points for v in p]
    raise TypeError(f"Unknown segment type {type(segment).__name__}")


###############################################################################
# Subpath
###############################################################################


@dataclass(frozen=True)
class Subpath:
    """
    One contiguous run of connected segments sharing a single start point.

    A closed subpath is sealed by an implicit line from the end of its last
    segment back to _start_point_ (see `closing_segment`).

    Attributes:
        start_point: the point the subpath starts at (its MoveTo)
        segments: the ordered segments
        closed: True if the subpath was closed with Z
    """

    start_point: Point
    segments: Tuple[Segment, ...] = field(default_factory=tuple)
    closed: bool = False

    @property
    def end_point(self) -> Point:
        """The point the last segment ends at (the start point for empty subpaths)."""
        if not self.segments:
            return self.start_point
        return self.segments[-1].end

    @property
    def closing_segment(self) -> Optional[Line]:
        """The implicit closing line of a closed subpath, None if open or already sealed."""
        if not self.closed or self.end_point.is_close(self.start_point, CLOSING_TOLERANCE):
            return None
        return Line(self.end_point, self.start_point)

    def polygonize(self, steps: int = POLYGONIZE_STEPS_DEFAULT) -> NDArray[np.float64]:
        """
        Approximate the subpath by a polyline.

        Args:
            steps: Number of line segments used per curve segment (arcs: per cubic piece)

        Returns:
            NDArray[np.float64] of shape (n, 2); closed subpaths end at their start point
        """
        if steps < 1:
            raise ValueError(f"steps must be at least 1, got {steps}")
        segments: List[Segment] = list(self.segments)
        closing = self.closing_segment
        if closing is not None:
            segments.append(closing)

        parts = [np.array([self.start_point.as_tuple()], dtype=np.float64)]
        for segment in segments:
            parts.append(_segment_points(segment, steps)[1:])
        return np.vstack(parts)


###############################################################################
# PathGeometry
###############################################################################


@dataclass(frozen=True)
class PathGeometry:
    """
    Ordered sequence of subpaths; the result of parsing one path-data string.

    Instances are immutable; edits are done by building a new geometry.
    """

    subpaths: Tuple[Subpath, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """True if the geometry has no subpaths."""
        return not self.subpaths

    @property
    def segment_count(self) -> int:
        """Total number of segments over all subpaths."""
        return sum(len(subpath.segments) for subpath in self.subpaths)

    def polygonize(self, steps: int = POLYGONIZE_STEPS_DEFAULT) -> List[NDArray[np.float64]]:
        """Polygonize every subpath; see `Subpath.polygonize`."""
        return [subpath.polygonize(steps) for subpath in self.subpaths]

    def bounding_box(self, steps: int = POLYGONIZE_STEPS_DEFAULT) -> Optional[BoundingBox]:
        """
        Bounding box of the polygonized geometry.

        Curves are approximated with _steps_ line segments each, so the box is exact
        for lines and a close approximation for curves. None for an empty geometry.
        """
        if self.is_empty:
            return None
        return BoundingBox.from_points(np.vstack(self.polygonize(steps)))

    def approx_equal(self, other: PathGeometry, rtol: float = 1e-9, atol: float = 1e-9) -> bool:
        """Check if two geometries are approximately equal within numerical tolerances.

        Subpath structure (count, closed flags, segment kinds) must match exactly,
        coordinates are compared with numpy's allclose.

        Args:
            other: Another PathGeometry to compare with
            rtol: Relative tolerance for floating point comparison
            atol: Absolute tolerance for floating point comparison

        Returns:
            True if geometries are approximately equal, False otherwise
        """
        if not isinstance(other, PathGeometry):
            return False
        if len(self.subpaths) != len(other.subpaths):
            return False

        for own, theirs in zip(self.subpaths, other.subpaths):
            if own.closed != theirs.closed or len(own.segments) != len(theirs.segments):
                return False
            if not np.allclose(own.start_point.as_tuple(), theirs.start_point.as_tuple(), rtol=rtol, atol=atol):
                return False
            for own_segment, their_segment in zip(own.segments, theirs.segments):
                own_kind, own_values = _segment_signature(own_segment)
                their_kind, their_values = _segment_signature(their_segment)
                if own_kind != their_kind:
                    return False
                if not np.allclose(own_values, their_values, rtol=rtol, atol=atol):
                    return False

        return True
