"""Test module for svgpathdata.serializer

The tests are run using pytest.
"""

import pytest

from svgpathdata.builder import PathGeometryBuilder
from svgpathdata.commands import Arc, ArcParams, ClosePath, HorizontalLineTo, SmoothCubic, SmoothQuadratic
from svgpathdata.geom import Point
from svgpathdata.parser import PathCommandParser
from svgpathdata.segments import Cubic, EllipticalArc, Line, PathGeometry, Quadratic, Subpath
from svgpathdata.serializer import ArcMode, PathSerializer, SerializerOptions


def build(path_data: str) -> PathGeometry:
    """Parse _path_data_ and build its geometry."""
    return PathGeometryBuilder.from_commands(PathCommandParser.parse_commands(path_data))


###############################################################################
# Numbers
###############################################################################


class TestFormatNumber:
    """Tests for PathSerializer.format_number."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1.0, "1"),
            (100.0, "100"),
            (0.1, "0.1"),
            (1 / 3, "0.333333"),
            (2 / 3, "0.666667"),
            (-2.5, "-2.5"),
            (1e-7, "0"),
            (-1e-7, "0"),
            (-0.0, "0"),
            (1e21, "1000000000000000000000"),
            (123456.7890123, "123456.789012"),
        ],
    )
    def test_default_precision(self, value, expected):
        """Fixed notation, at most six fraction digits, no trailing zeros."""
        assert PathSerializer.format_number(value) == expected

    def test_custom_precision(self):
        """The number of fraction digits can be chosen."""
        assert PathSerializer.format_number(3.14159, 2) == "3.14"
        assert PathSerializer.format_number(2.0, 2) == "2"


###############################################################################
# Geometry
###############################################################################


class TestSerialize:
    """Tests for PathSerializer.serialize and its segment helpers."""

    def test_single_cubic(self):
        """A cubic from (0,0) with controls (0,10), (10,10) to (10,0)."""
        cubic = Cubic(Point(0, 0), Point(0, 10), Point(10, 10), Point(10, 0))
        geometry = PathGeometry((Subpath(Point(0, 0), (cubic,)),))
        assert PathSerializer().serialize(geometry) == "M 0 0 C 0 10 10 10 10 0"

    def test_closed_polygon(self):
        """Lines become L, closed subpaths end with Z."""
        geometry = build("m100 100 h100 v100 z")
        assert PathSerializer().serialize(geometry) == "M 100 100 L 200 100 L 200 200 Z"

    def test_multiple_subpaths(self):
        """Every subpath gets its own M."""
        geometry = build("M0 0 Q5 5 10 0 M20 20 L30 30")
        assert PathSerializer().serialize(geometry) == "M 0 0 Q 5 5 10 0 M 20 20 L 30 30"

    def test_empty_geometry(self):
        """Nothing to draw, nothing written."""
        assert PathSerializer().serialize(PathGeometry()) == ""

    def test_closed_subpath_without_segments(self):
        """A lone M with Z is kept."""
        geometry = PathGeometry((Subpath(Point(5, 5), (), True),))
        assert PathSerializer().serialize(geometry) == "M 5 5 Z"

    def test_arc_mode_arc(self):
        """Arcs are written in endpoint parameterization by default."""
        geometry = build("M0,0A5,5 0 0,0 10,0")
        assert PathSerializer().serialize(geometry) == "M 0 0 A 5 5 0 0 0 10 0"

    def test_arc_mode_cubic(self):
        """In CUBIC mode a half circle is written as two cubics."""
        geometry = build("M0,0A5,5 0 0,0 10,0")
        serializer = PathSerializer(SerializerOptions(arc_mode=ArcMode.CUBIC))
        assert serializer.serialize(geometry) == "M 0 0 C 0 2.761424 2.238576 5 5 5 C 7.761424 5 10 2.761424 10 0"

    def test_half_turn_radii_rounded_down(self):
        """Radii of a half-turn arc are written rounded down, not to nearest."""
        # Radii 1 are scaled up to half the chord length, 7.0710678...
        text = PathSerializer().serialize(build("M0 0 A1 1 0 0 1 10 10"))
        assert text.startswith("M 0 0 A 7.071067 7.071067 0 ")
        assert text.endswith(" 1 10 10")

    def test_half_turn_radii_rounded_down_at_precision(self):
        """The rounding follows the configured precision."""
        serializer = PathSerializer(SerializerOptions(precision=2))
        assert serializer.serialize(build("M0 0 A1 1 0 0 0 10 10")).startswith("M 0 0 A 7.07 7.07 0 ")

    def test_arc_params_keeps_radii_of_other_arcs(self):
        """Arcs that are no half turn keep their radii."""
        geometry = build("M0 0 A5 5 0 0 1 5 5")
        assert PathSerializer().arc_params(geometry.subpaths[0].segments[0]).rx == pytest.approx(5.0)

    @pytest.mark.parametrize("arc_mode", [ArcMode.ARC, ArcMode.CUBIC])
    def test_arc_without_extent_written_as_line(self, arc_mode):
        """An arc with zero sweep is kept as a line to its end point."""
        arc = EllipticalArc(Point(0, 0), 5.0, 5.0, 0.0, 0.0, 0.0)
        geometry = PathGeometry((Subpath(Point(5, 0), (arc,)),))
        serializer = PathSerializer(SerializerOptions(arc_mode=arc_mode))
        assert serializer.serialize(geometry) == "M 5 0 L 5 0"

    def test_precision_option(self):
        """Coordinates are rounded to the configured precision."""
        geometry = build("M0.123456789 0 L1 1")
        serializer = PathSerializer(SerializerOptions(precision=3))
        assert serializer.serialize(geometry) == "M 0.123 0 L 1 1"

    @pytest.mark.parametrize(
        "segment, expected",
        [
            (Line(Point(0, 0), Point(1.5, 2)), "L 1.5 2"),
            (Quadratic(Point(0, 0), Point(1, 1), Point(2, 0)), "Q 1 1 2 0"),
            (Cubic(Point(0, 0), Point(1, 1), Point(2, 1), Point(3, 0)), "C 1 1 2 1 3 0"),
        ],
    )
    def test_format_segment(self, segment, expected):
        """Bezier segments use L, Q and C."""
        assert PathSerializer().format_segment(segment) == expected

    def test_format_bezier_rejects_other_degrees(self):
        """Only 2, 3 or 4 control points are supported."""
        with pytest.raises(ValueError):
            PathSerializer().format_bezier([Point(0, 0)] * 5)
        with pytest.raises(ValueError):
            PathSerializer().format_bezier([Point(0, 0)])


###############################################################################
# Commands
###############################################################################


class TestFormatCommand:
    """Tests for PathSerializer.format_command and serialize_commands."""

    @pytest.mark.parametrize(
        "command, expected",
        [
            (HorizontalLineTo(2.5), "H 2.5"),
            (SmoothCubic(Point(1, 2), Point(3, 4), Point(5, 6)), "S 3 4 5 6"),
            (SmoothQuadratic(Point(1, 2), Point(3, 4)), "T 3 4"),
            (Arc(ArcParams(5, 5, 0, True, False, Point(10, 0))), "A 5 5 0 1 0 10 0"),
            (ClosePath(), "Z"),
        ],
    )
    def test_format_command(self, command, expected):
        """Each command keeps its own letter; smooth commands keep their short form."""
        assert PathSerializer().format_command(command) == expected

    def test_serialize_commands(self):
        """Relative input is written with absolute commands."""
        commands = PathCommandParser.parse_commands("m10 20 l30 40 s5 5 10 0 z")
        assert PathSerializer().serialize_commands(commands) == "M 10 20 L 40 60 S 45 65 50 60 Z"

    def test_unknown_command_raises(self):
        """Anything that is not a path command is rejected."""
        with pytest.raises(TypeError):
            PathSerializer().format_command("M")


###############################################################################
# Options
###############################################################################


class TestSerializerOptions:
    """Tests for SerializerOptions."""

    def test_defaults(self):
        """Six fraction digits, arcs written as A."""
        options = SerializerOptions()
        assert options.precision == 6
        assert options.arc_mode is ArcMode.ARC

    def test_dict_round_trip(self):
        """to_dict and from_dict are inverse."""
        options = SerializerOptions(precision=3, arc_mode=ArcMode.CUBIC)
        assert options.to_dict() == {"precision": 3, "arc_mode": "cubic"}
        assert SerializerOptions.from_dict(options.to_dict()) == options

    def test_from_empty_dict(self):
        """Missing keys fall back to the defaults."""
        assert SerializerOptions.from_dict({}) == SerializerOptions()
