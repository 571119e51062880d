"""Command parser for SVG path data.

Turns a path-data string into a list of absolute `PathCommand` values:
relative coordinates are resolved against the current point and the
reflected control points of the smooth curve commands (S, T) are computed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

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
from svgpathdata.common import SVG_CMDS, SvgPathCmds
from svgpathdata.errors import PathDataSyntaxError
from svgpathdata.geom import ORIGIN, Point
from svgpathdata.scanner import PathDataScanner

logger = logging.getLogger(__name__)


###############################################################################
# ParserState
###############################################################################


@dataclass
class ParserState:
    """Fold accumulator of one parse call.

    Attributes:
        current_point: absolute point the next command starts from
        subpath_start: absolute point of the last MoveTo (target of Z)
        last_control: control point available for reflection by S/T
        last_curve: "C" if _last_control_ came from a cubic, "Q" if from a quadratic,
            None after any non-curve command
        commands: the commands emitted so far
    """

    current_point: Point = ORIGIN
    subpath_start: Point = ORIGIN
    last_control: Optional[Point] = None
    last_curve: Optional[str] = None
    commands: List[PathCommand] = field(default_factory=list)

    def clear_reflection(self) -> None:
        """Forget the control point; the next S/T starts from the current point."""
        self.last_control = None
        self.last_curve = None

    def reflected_control(self, curve: str) -> Point:
        """The control point for a smooth command following a curve of family _curve_."""
        if self.last_curve == curve and self.last_control is not None:
            return self.last_control.reflect(self.current_point)
        return self.current_point


###############################################################################
# PathCommandParser
###############################################################################


class PathCommandParser:
    """
    Parser for SVG path data strings (the 'd' attribute).

    Supported commands (command : parameters per group):
        MoveTo:           Mm (x y), extra pairs are implicit LineTo
        LineTo:           Ll (x y)   Hh (x)   Vv (y)
        CubicBezier:      Cc (x1 y1 x2 y2 x y)   Ss (x2 y2 x y)
        QuadraticBezier:  Qq (x1 y1 x y)         Tt (x y)
        ArcCurve:         Aa (rx ry x-axis-rotation large-arc-flag sweep-flag x y)
        ClosePath:        Zz

    Parsing is lenient by default: at the first position that cannot be read
    the parser stops and returns the commands read so far. The position and a
    message are kept in `error_position` / `error_message`. With _strict_ set,
    a `PathDataSyntaxError` is raised instead.
    """

    def __init__(self, path_data: str, strict: bool = False):
        self._scanner = PathDataScanner(path_data)
        self._strict = strict
        self._state = ParserState()
        self.error_position: Optional[int] = None
        self.error_message: Optional[str] = None

    @classmethod
    def parse_commands(cls, path_data: str, strict: bool = False) -> List[PathCommand]:
        """Parse _path_data_ into a list of absolute commands."""
        return cls(path_data, strict).parse()

    def parse(self) -> List[PathCommand]:
        """
        Run the parser over the whole input.

        Returns:
            List[PathCommand]: the commands read (up to the first error in lenient mode)

        Raises:
            PathDataSyntaxError: in strict mode, if the input cannot be read completely
        """
        scanner = self._scanner
        handlers: Dict[SvgPathCmds, Callable[[bool], int]] = {
            "M": self._parse_move_to,
            "L": self._parse_line_to,
            "H": self._parse_horizontal_line_to,
            "V": self._parse_vertical_line_to,
            "C": self._parse_cubic,
            "S": self._parse_smooth_cubic,
            "Q": self._parse_quadratic,
            "T": self._parse_smooth_quadratic,
            "A": self._parse_arc,
        }

        while True:
            scanner.skip_separators()
            char = scanner.peek()
            if char is None:
                break
            if char not in SVG_CMDS:
                if char.isalpha():
                    self._fail(f"Unknown command letter '{char}'")
                else:
                    self._fail(f"Expected a command letter, found '{char}'")
                break
            scanner.advance()

            command = char.upper()
            if command == "Z":
                self._close_path()
                continue

            # A letter without parameter groups emits nothing; the next character
            # is judged by this loop again
            handlers[command](char.islower())

        return self._state.commands

    def _fail(self, message: str) -> None:
        position = self._scanner.position
        if self._strict:
            raise PathDataSyntaxError(message, position)
        self.error_position = position
        self.error_message = message
        logger.warning("Path data parsing stopped at position %d: %s", position, message)

    ###########################################################################
    # Primitive readers
    ###########################################################################

    def _number(self) -> Optional[float]:
        self._scanner.skip_separators()
        return self._scanner.next_number()

    def _flag(self) -> Optional[bool]:
        self._scanner.skip_separators()
        return self._scanner.next_flag()

    def _point(self, relative: bool) -> Optional[Point]:
        x = self._number()
        if x is None:
            return None
        y = self._number()
        if y is None:
            return None
        point = Point(x, y)
        return self._state.current_point + point if relative else point

    def _repeat(self, read_group: Callable[[], bool]) -> int:
        """
        Call _read_group_ until it fails; a failed group is rewound so the
        top-level loop sees its first character. Returns the number of groups read.
        """
        count = 0
        while True:
            start = self._scanner.position
            if not read_group():
                self._scanner.rewind(start)
                return count
            count += 1

    ###########################################################################
    # Command parsers
    ###########################################################################

    def _parse_move_to(self, relative: bool) -> int:
        state = self._state
        first = True

        def read_group() -> bool:
            nonlocal first
            point = self._point(relative)
            if point is None:
                return False
            if first:
                state.commands.append(MoveTo(point))
                state.subpath_start = point
                first = False
            else:
                # Subsequent coordinates are implicit lineto
                state.commands.append(LineTo(point))
            state.current_point = point
            state.clear_reflection()
            return True

        return self._repeat(read_group)

    def _parse_line_to(self, relative: bool) -> int:
        state = self._state

        def read_group() -> bool:
            point = self._point(relative)
            if point is None:
                return False
            state.commands.append(LineTo(point))
            state.current_point = point
            state.clear_reflection()
            return True

        return self._repeat(read_group)

    def _parse_horizontal_line_to(self, relative: bool) -> int:
        state = self._state

        def read_group() -> bool:
            x = self._number()
            if x is None:
                return False
            if relative:
                x += state.current_point.x
            state.commands.append(HorizontalLineTo(x))
            state.current_point = Point(x, state.current_point.y)
            state.clear_reflection()
            return True

        return self._repeat(read_group)

    def _parse_vertical_line_to(self, relative: bool) -> int:
        state = self._state

        def read_group() -> bool:
            y = self._number()
            if y is None:
                return False
            if relative:
                y += state.current_point.y
            state.commands.append(VerticalLineTo(y))
            state.current_point = Point(state.current_point.x, y)
            state.clear_reflection()
            return True

        return self._repeat(read_group)

    def _parse_cubic(self, relative: bool) -> int:
        state = self._state

        def read_group() -> bool:
            control1 = self._point(relative)
            control2 = self._point(relative) if control1 is not None else None
            end = self._point(relative) if control2 is not None else None
            if end is None:
                return False
            state.commands.append(CubicBezier(control1, control2, end))
            state.last_control = control2
            state.last_curve = "C"
            state.current_point = end
            return True

        return self._repeat(read_group)

    def _parse_smooth_cubic(self, relative: bool) -> int:
        state = self._state

        def read_group() -> bool:
            control2 = self._point(relative)
            end = self._point(relative) if control2 is not None else None
            if end is None:
                return False
            control1 = state.reflected_control("C")
            state.commands.append(SmoothCubic(control1, control2, end))
            state.last_control = control2
            state.last_curve = "C"
            state.current_point = end
            return True

        return self._repeat(read_group)

    def _parse_quadratic(self, relative: bool) -> int:
        state = self._state

        def read_group() -> bool:
            control = self._point(relative)
            end = self._point(relative) if control is not None else None
            if end is None:
                return False
            state.commands.append(QuadraticBezier(control, end))
            state.last_control = control
            state.last_curve = "Q"
            state.current_point = end
            return True

        return self._repeat(read_group)

    def _parse_smooth_quadratic(self, relative: bool) -> int:
        state = self._state

        def read_group() -> bool:
            end = self._point(relative)
            if end is None:
                return False
            control = state.reflected_control("Q")
            state.commands.append(SmoothQuadratic(control, end))
            state.last_control = control
            state.last_curve = "Q"
            state.current_point = end
            return True

        return self._repeat(read_group)

    def _parse_arc(self, relative: bool) -> int:
        state = self._state

        def read_group() -> bool:
            rx = self._number()
            ry = self._number() if rx is not None else None
            rotation = self._number() if ry is not None else None
            large_arc = self._flag() if rotation is not None else None
            sweep = self._flag() if large_arc is not None else None
            end = self._point(relative) if sweep is not None else None
            if end is None:
                return False
            # Negative radii are taken as their absolute value
            params = ArcParams(abs(rx), abs(ry), rotation, large_arc, sweep, end)
            state.commands.append(Arc(params))
            state.current_point = end
            state.clear_reflection()
            return True

        return self._repeat(read_group)

    def _close_path(self) -> None:
        state = self._state
        state.commands.append(ClosePath())
        state.current_point = state.subpath_start
        state.clear_reflection()
