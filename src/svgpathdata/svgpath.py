"""Handling Paths for SVG"""

from __future__ import annotations

from dataclasses import fields, is_dataclass, replace
from typing import Callable, List, Optional

from svgpathdata.arc import ArcConverter
from svgpathdata.builder import PathGeometryBuilder
from svgpathdata.commands import ArcParams, PathCommand
from svgpathdata.geom import Point
from svgpathdata.parser import PathCommandParser
from svgpathdata.segments import EllipticalArc, PathGeometry, Segment
from svgpathdata.serializer import PathSerializer, SerializerOptions


class SvgPathData:
    """
    This class provides a collection of static methods for reading and writing SVG path data.
    Path data is a string describing a sequence of drawing commands with their parameters.
    Commands (command : number of values : command-character):
        MoveTo:           2: Mm
        LineTo:           2: Ll   1: Hh(x)   1:Vv(y)
        CubicBezier:      6: Cc   4: Ss
        QuadraticBezier:  4: Qq   2: Tt
        ArcCurve:         7: Aa
        ClosePath:        0: Zz
    """

    @staticmethod
    def parse(path_data: str, strict: bool = False) -> PathGeometry:
        """
        Parse the given _path_data_ into subpaths of typed segments.

        Args:
            path_data (str): a SVG path string
            strict (bool, optional): raise PathDataSyntaxError on malformed input
                instead of returning the part read so far. Defaults to False.

        Returns:
            PathGeometry: the parsed geometry
        """
        commands = PathCommandParser.parse_commands(path_data, strict)
        return PathGeometryBuilder.from_commands(commands)

    @staticmethod
    def parse_commands(path_data: str, strict: bool = False) -> List[PathCommand]:
        """Parse the given _path_data_ into absolute commands (see `parse` for _strict_)."""
        return PathCommandParser.parse_commands(path_data, strict)

    @staticmethod
    def serialize(geometry: PathGeometry, options: Optional[SerializerOptions] = None) -> str:
        """
        Serialize _geometry_ to canonical path data (absolute commands, one per segment).

        Args:
            geometry (PathGeometry): the geometry to serialize
            options (Optional[SerializerOptions], optional): number precision and arc mode.
                Defaults to None (6 fraction digits, arcs written as A).

        Returns:
            str: the path data string
        """
        return PathSerializer(options).serialize(geometry)

    @staticmethod
    def convert_relative_to_absolute(path_string: str) -> str:
        """Take the given SVG _path_string_ and rewrite it with absolute coordinates only,
        i.e. lower case letter commands will be replaced by upper case letter commands.
        The representation (i.e. geometry) of the path is still the same.

        Args:
            path_string (str): SVG path string input

        Returns:
            str: path_string using absolute coordinates
        """
        return PathSerializer().serialize_commands(PathCommandParser.parse_commands(path_string))

    @staticmethod
    def beautify_commands(path_string: str, round_func: Optional[Callable[[float], float]] = None) -> str:
        """
        Takes the given _path_string_ and rounds (mathematical) each coordinate of the path
            by using the given _round_func_. Arc flags are kept as they are.
            If _round_func_ is None the numbers are only normalized.

        Args:
            path_string (str): a SVG path string
            round_func (Optional[Callable], optional):
                a function that takes a float and returns a float. Defaults to None.

        Returns:
            str: the beautified path_string (absolute commands, single spaces)
        """
        commands = PathCommandParser.parse_commands(path_string)
        if round_func is not None:
            commands = [_map_numbers(command, round_func) for command in commands]
        return PathSerializer().serialize_commands(commands)

    @staticmethod
    def arc_to_beziers(start: Point, params: ArcParams) -> List[Segment]:
        """
        Approximate the arc command _params_ drawn from _start_ by Bezier segments.

        Returns:
            List[Segment]: [] for coincident endpoints, a single Line for a zero radius,
                cubic Beziers otherwise
        """
        segment = ArcConverter.to_segment(start, params)
        if segment is None:
            return []
        if isinstance(segment, EllipticalArc):
            return list(segment.to_cubics())
        return [segment]


def _map_numbers(value, func: Callable[[float], float]):
    """Apply _func_ to every float inside a command (points, coordinates, radii)."""
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return float(func(value))
    if isinstance(value, Point):
        return Point(float(func(value.x)), float(func(value.y)))
    if is_dataclass(value):
        changes = {f.name: _map_numbers(getattr(value, f.name), func) for f in fields(value)}
        return replace(value, **changes)
    return value
