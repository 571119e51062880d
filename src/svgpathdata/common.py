"""Central module containing constants and definitions for SVG path data processing."""

from __future__ import annotations

import math
from typing import Literal

###############################################################################
# Types
###############################################################################


SvgPathCmds = Literal[  # Type-Definition for SvgPath-Commands; uppercase = absolute, lowercase = relative
    # MoveTo (2) - start a new subpath and move the current point to (x,y)
    "M",
    "m",
    # LineTo (2) - draw a straight line from the current point to (x,y)
    "L",
    "l",
    # Horizontal LineTo (1) - draw a horizontal line to the given x coordinate (y stays unchanged)
    "H",
    "h",
    # Vertical LineTo (1) - draw a vertical line to the given y coordinate (x stays unchanged)
    "V",
    "v",
    # Cubic Bezier To (6) - draw a cubic Bezier curve with two control points and an endpoint (x,y)
    "C",
    "c",
    # Smooth cubic Bezier To (4) - cubic curve to (x,y) using the reflection of the previous cubic control point
    "S",
    "s",
    # Quadratic Bezier To (4) - draw a quadratic Bezier curve with one control point and an endpoint (x,y)
    "Q",
    "q",
    # Smooth quadratic Bezier To (2) - quadratic curve to (x,y) using the reflection of the previous control point
    "T",
    "t",
    # Arc (7) - draw an elliptical arc with parameters (rx ry x-axis-rotation large-arc-flag sweep-flag x y)
    "A",
    "a",
    # ClosePath (0) - close subpath by drawing a line from the current point to start point
    "Z",
    "z",
]


###############################################################################
# Consts
###############################################################################

# Command letters:
SVG_CMDS: str = "MmLlHhVvCcSsQqTtAaZz"

# Characters acting as separators between numbers, flags and commands:
SVG_SEPARATORS: str = " \t\n\r,"

# Number of fraction digits used when rendering numbers into path data
DEFAULT_PRECISION: int = 6

# Largest angle (radians) covered by a single cubic when flattening arcs
ARC_MAX_SWEEP: float = math.pi / 2

# Tolerance used for degenerate-geometry decisions (coincident points, zero sweep)
GEOMETRY_EPSILON: float = 1.0e-12

# Tolerance absorbing float noise when counting arc sub-segments
ARC_SPLIT_EPSILON: float = 1.0e-9

# Number of steps to use when polygonizing curves if the caller does not specify any
POLYGONIZE_STEPS_DEFAULT: int = 16

# Largest deviation (radians) of an arc's sweep from a half turn for which its
# center is taken to lie on the chord (radii at their minimal, corrected size)
ARC_HALF_TURN_TOLERANCE: float = 1.0e-6
