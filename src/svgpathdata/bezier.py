"""Bezier curve handling utilities for path data geometry."""

from __future__ import annotations

from typing import Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

BezierPoints = Union[Sequence[Tuple[float, float]], NDArray[np.float64]]


class BezierCurve:
    """Class to handle linear, quadratic and cubic Bezier curve operations.

    Control points are given as a sequence of (x, y) pairs (or an array of shape (n, 2)):
    2 points for a line, 3 for a quadratic and 4 for a cubic curve.
    """

    @classmethod
    def evaluate(cls, points: BezierPoints, t: float) -> Tuple[float, float]:
        """
        Evaluate the Bezier curve defined by _points_ at parameter _t_ (de Casteljau).

        Args:
            points: 2, 3 or 4 control points
            t: curve parameter in [0, 1]

        Returns:
            Tuple[float, float]: the point on the curve
        """
        points_array = cls._as_array(points)
        while points_array.shape[0] > 1:
            points_array = (1.0 - t) * points_array[:-1] + t * points_array[1:]
        return float(points_array[0, 0]), float(points_array[0, 1])

    @classmethod
    def polygonize_quadratic_curve(cls, points: BezierPoints, steps: int) -> NDArray[np.float64]:
        """
        Polygonize a quadratic Bezier curve into line segments.

        Args:
            points: Control points, exactly 3 points: start, control, end
            steps: Number of segments to divide the curve into

        Returns:
            NDArray[np.float64] of shape (steps+1, 2) containing the polygonized points
        """
        points_array = cls._as_array(points)
        if points_array.shape[0] != 3:
            raise ValueError(f"Quadratic curve needs 3 control points, got {points_array.shape[0]}")

        # B(t) = (1-t)^2*P0 + 2*(1-t)*t*P1 + t^2*P2
        t = cls._parameters(steps)
        omt = 1.0 - t
        return (
            np.outer(omt * omt, points_array[0])
            + np.outer(2.0 * omt * t, points_array[1])
            + np.outer(t * t, points_array[2])
        )

    @classmethod
    def polygonize_cubic_curve(cls, points: BezierPoints, steps: int) -> NDArray[np.float64]:
        """
        Polygonize a cubic Bezier curve into line segments.

        Args:
            points: Control points, exactly 4 points: start, control1, control2, end
            steps: Number of segments to divide the curve into

        Returns:
            NDArray[np.float64] of shape (steps+1, 2) containing the polygonized points
        """
        points_array = cls._as_array(points)
        if points_array.shape[0] != 4:
            raise ValueError(f"Cubic curve needs 4 control points, got {points_array.shape[0]}")

        # B(t) = (1-t)^3*P0 + 3*(1-t)^2*t*P1 + 3*(1-t)*t^2*P2 + t^3*P3
        t = cls._parameters(steps)
        omt = 1.0 - t
        omt2 = omt * omt
        t2 = t * t
        return (
            np.outer(omt2 * omt, points_array[0])
            + np.outer(3.0 * omt2 * t, points_array[1])
            + np.outer(3.0 * omt * t2, points_array[2])
            + np.outer(t2 * t, points_array[3])
        )

    @classmethod
    def polygonize_curve(cls, points: BezierPoints, steps: int) -> NDArray[np.float64]:
        """
        Polygonize a Bezier curve of degree 1, 2 or 3.
        Lines are never subdivided: the result is just their two end points.
        """
        points_array = cls._as_array(points)
        count = points_array.shape[0]
        if count == 2:
            return points_array.copy()
        if count == 3:
            return cls.polygonize_quadratic_curve(points_array, steps)
        if count == 4:
            return cls.polygonize_cubic_curve(points_array, steps)
        raise ValueError(f"Bezier curve needs 2, 3 or 4 control points, got {count}")

    @staticmethod
    def _parameters(steps: int) -> NDArray[np.float64]:
        if steps < 1:
            raise ValueError(f"steps must be at least 1, got {steps}")
        return np.linspace(0.0, 1.0, steps + 1, dtype=np.float64)

    @staticmethod
    def _as_array(points: BezierPoints) -> NDArray[np.float64]:
        points_array = np.asarray(points, dtype=np.float64)
        if points_array.ndim != 2 or points_array.shape[1] != 2:
            raise ValueError(f"points must have shape (n, 2), got {points_array.shape}")
        return points_array
