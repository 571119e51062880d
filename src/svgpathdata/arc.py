"""Elliptical arc handling: endpoint/center parameterization and flattening to cubic Beziers.

Conversion follows the SVG implementation notes (SVG 1.1 appendix F.6.5/F.6.6):
an arc written in path data is described by its two endpoints, radii, x-axis
rotation and the large-arc/sweep flags, while geometric operations need the
ellipse center, start angle and signed sweep angle.
"""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from svgpathdata.commands import ArcParams
from svgpathdata.common import ARC_MAX_SWEEP, ARC_SPLIT_EPSILON, GEOMETRY_EPSILON
from svgpathdata.geom import GeomMath, Point
from svgpathdata.segments import Cubic, EllipticalArc, Line, Segment

_TAU = 2.0 * math.pi


###############################################################################
# ArcConverter
###############################################################################
class ArcConverter:
    """Static methods converting between the two arc parameterizations."""

    @staticmethod
    def endpoint_to_center(
        # pylint: disable=too-many-arguments,too-many-positional-arguments,too-many-locals
        start: Point,
        end: Point,
        rx: float,
        ry: float,
        rotation_degrees: float,
        large_arc: bool,
        sweep: bool,
    ) -> Optional[EllipticalArc]:
        """
        Convert an arc from endpoint to center parameterization.

        Radii that are too small to span the chord are scaled up uniformly until the
        arc becomes possible. The conversion never raises for finite input.

        Args:
            start (Point): start point P0 of the arc
            end (Point): end point P1 of the arc
            rx (float): x radius (sign is ignored)
            ry (float): y radius (sign is ignored)
            rotation_degrees (float): rotation of the ellipse's x-axis in degrees
            large_arc (bool): select the arc spanning more than half the ellipse
            sweep (bool): select the arc running in positive-angle direction

        Returns:
            Optional[EllipticalArc]: the arc in center parameterization,
                None if the endpoints coincide or a radius is zero
        """
        rx = abs(rx)
        ry = abs(ry)
        if rx == 0.0 or ry == 0.0 or start.is_close(end, GEOMETRY_EPSILON):
            return None

        phi = math.radians(rotation_degrees)

        # Step 1: half chord in the ellipse's local frame
        x1p, y1p = GeomMath.rotate((start - end) * 0.5, -phi)

        # Step 2: radius correction
        x1p_sq = x1p * x1p
        y1p_sq = y1p * y1p
        lam = x1p_sq / (rx * rx) + y1p_sq / (ry * ry)
        if lam > 1.0:
            scale = math.sqrt(lam)
            rx *= scale
            ry *= scale

        # Step 3: center in the local frame; negative radicands are float noise
        rx_sq = rx * rx
        ry_sq = ry * ry
        denominator = rx_sq * y1p_sq + ry_sq * x1p_sq
        if denominator == 0.0:
            return None
        radicand = max(0.0, (rx_sq * ry_sq - denominator) / denominator)
        coefficient = math.sqrt(radicand)
        if large_arc == sweep:
            coefficient = -coefficient
        cxp = coefficient * rx * y1p / ry
        cyp = -coefficient * ry * x1p / rx

        # Step 4: absolute center
        center = GeomMath.rotate(Point(cxp, cyp), phi) + GeomMath.midpoint(start, end)

        # Step 5 + 6: start angle and signed sweep
        theta1 = math.atan2((y1p - cyp) / ry, (x1p - cxp) / rx)
        theta2 = math.atan2((-y1p - cyp) / ry, (-x1p - cxp) / rx)
        delta = theta2 - theta1
        if not sweep and delta > 0.0:
            delta -= _TAU
        elif sweep and delta < 0.0:
            delta += _TAU

        return EllipticalArc(center, rx, ry, phi, theta1, delta)

    @staticmethod
    def center_to_endpoint(arc: EllipticalArc) -> Tuple[Point, ArcParams]:
        """
        Convert an arc from center to endpoint parameterization.

        Args:
            arc (EllipticalArc): the arc in center parameterization

        Returns:
            Tuple[Point, ArcParams]: the start point of the arc and its endpoint parameters
        """
        params = ArcParams(
            rx=arc.rx,
            ry=arc.ry,
            rotation_degrees=math.degrees(arc.rotation),
            large_arc=abs(arc.sweep_angle) > math.pi,
            sweep=arc.sweep_angle > 0.0,
            end=arc.end,
        )
        return arc.start, params

    @staticmethod
    def to_segment(start: Point, params: ArcParams) -> Optional[Segment]:
        """
        Segment for an arc command drawn from _start_.

        Returns:
            Optional[Segment]: None if the endpoints coincide, a Line if a radius
                is zero, an EllipticalArc otherwise
        """
        if start.is_close(params.end, GEOMETRY_EPSILON):
            return None
        if params.is_degenerate:
            return Line(start, params.end)
        return ArcConverter.endpoint_to_center(
            start, params.end, params.rx, params.ry, params.rotation_degrees, params.large_arc, params.sweep
        )


###############################################################################
# ArcFlattener
###############################################################################
class ArcFlattener:
    """Approximation of elliptical arcs by cubic Bezier segments."""

    @staticmethod
    def segment_count(sweep_angle: float, max_sweep: float = ARC_MAX_SWEEP) -> int:
        """Number of cubics needed so that none spans more than _max_sweep_ radians."""
        if abs(sweep_angle) < GEOMETRY_EPSILON:
            return 0
        return max(1, math.ceil(abs(sweep_angle) / max_sweep - ARC_SPLIT_EPSILON))

    @staticmethod
    def _to_absolute(arc: EllipticalArc, unit_points: NDArray[np.float64]) -> NDArray[np.float64]:
        """Map points of the unit circle frame onto the arc's ellipse (scale, rotate, translate)."""
        cos_phi = math.cos(arc.rotation)
        sin_phi = math.sin(arc.rotation)
        rotation = np.array([[cos_phi, -sin_phi], [sin_phi, cos_phi]], dtype=np.float64)
        scaled = unit_points * np.array([arc.rx, arc.ry], dtype=np.float64)
        return scaled @ rotation.T + np.array([arc.center.x, arc.center.y], dtype=np.float64)

    @staticmethod
    def to_cubics(arc: EllipticalArc, max_sweep: float = ARC_MAX_SWEEP) -> List[Cubic]:
        """
        Approximate _arc_ by cubic Bezier segments of equal angular span.

        Each piece spans at most _max_sweep_ radians (a quarter turn by default),
        which bounds the radial error to about 2.7e-4 of the radius.
        Consecutive cubics share their joint point.

        Args:
            arc (EllipticalArc): the arc in center parameterization
            max_sweep (float): largest angle covered by one cubic

        Returns:
            List[Cubic]: the cubics in drawing order; empty for a zero sweep
        """
        count = ArcFlattener.segment_count(arc.sweep_angle, max_sweep)
        if count == 0:
            return []

        delta = arc.sweep_angle / count
        k = 4.0 / 3.0 * math.tan(delta / 4.0)

        angles = arc.start_angle + delta * np.arange(count + 1, dtype=np.float64)
        cos_a = np.cos(angles)
        sin_a = np.sin(angles)

        ends = np.column_stack([cos_a, sin_a])
        controls1 = np.column_stack([cos_a[:-1] - k * sin_a[:-1], sin_a[:-1] + k * cos_a[:-1]])
        controls2 = np.column_stack([cos_a[1:] + k * sin_a[1:], sin_a[1:] - k * cos_a[1:]])

        ends = ArcFlattener._to_absolute(arc, ends)
        controls1 = ArcFlattener._to_absolute(arc, controls1)
        controls2 = ArcFlattener._to_absolute(arc, controls2)

        joints = [Point(float(x), float(y)) for x, y in ends]
        return [
            Cubic(
                joints[i],
                Point(float(controls1[i, 0]), float(controls1[i, 1])),
                Point(float(controls2[i, 0]), float(controls2[i, 1])),
                joints[i + 1],
            )
            for i in range(count)
        ]
