"""Handling geometries: points, rotations and bounding boxes"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

import numpy as np
from numpy.typing import NDArray

from svgpathdata.common import GEOMETRY_EPSILON


###############################################################################
# Point
###############################################################################
@dataclass(frozen=True)
class Point:
    """
    Immutable 2D coordinate.

    Supports ``+`` and ``-`` with other points (treated as displacement vectors),
    multiplication by a scalar and unpacking as ``x, y = point``.

    Attributes:
        x (float): The x-coordinate.
        y (float): The y-coordinate.
    """

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def reflect(self, about: Point) -> Point:
        """Mirror this point across _about_, i.e. ``about + (about - self)``."""
        return about + (about - self)

    def is_close(self, other: Point, tol: float = GEOMETRY_EPSILON) -> bool:
        """Return True if both coordinates differ by at most _tol_."""
        return abs(self.x - other.x) <= tol and abs(self.y - other.y) <= tol

    def as_tuple(self) -> Tuple[float, float]:
        """The point as (x, y) tuple."""
        return (self.x, self.y)


ORIGIN = Point(0.0, 0.0)


###############################################################################
# GeomMath
###############################################################################
class GeomMath:
    """Class to provide various static methods related to geometry handling."""

    @staticmethod
    def rotate(point: Point, angle: float) -> Point:
        """
        Rotate the given _point_ around the origin by _angle_ (radians, counter-clockwise
        in a y-up frame, i.e. clockwise on screen for SVG's y-down frame).

        Args:
            point (Point): the point to rotate
            angle (float): rotation angle in radians

        Returns:
            Point: the rotated point
        """
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Point(cos_a * point.x - sin_a * point.y, sin_a * point.x + cos_a * point.y)

    @staticmethod
    def midpoint(p0: Point, p1: Point) -> Point:
        """Midpoint between _p0_ and _p1_."""
        return Point((p0.x + p1.x) / 2.0, (p0.y + p1.y) / 2.0)


###############################################################################
# BoundingBox
###############################################################################
@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned box enclosing a geometry.

    Attributes:
        xmin (float): The minimum x-coordinate.
        ymin (float): The minimum y-coordinate.
        xmax (float): The maximum x-coordinate.
        ymax (float): The maximum y-coordinate.
    """

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    @property
    def extent(self) -> Tuple[float, float, float, float]:
        """The extent of the box as Tuple (xmin, ymin, xmax, ymax)."""
        return self.xmin, self.ymin, self.xmax, self.ymax

    @property
    def width(self) -> float:
        """float: The width of the box (difference between xmax and xmin)."""
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        """float: The height of the box (difference between ymax and ymin)."""
        return self.ymax - self.ymin

    @classmethod
    def from_points(cls, points: NDArray[np.float64]) -> BoundingBox:
        """
        Create the smallest box enclosing the given _points_.

        Args:
            points (NDArray[np.float64]): array of shape (n, 2) with n >= 1

        Raises:
            ValueError: if no points are given
        """
        if points.shape[0] == 0:
            raise ValueError("Cannot compute a bounding box of zero points")
        xmin, ymin = points.min(axis=0)
        xmax, ymax = points.max(axis=0)
        return cls(float(xmin), float(ymin), float(xmax), float(ymax))
