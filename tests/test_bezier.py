"""Test module for BezierCurve functions in svgpathdata.bezier

The tests are run using pytest.
"""

import numpy as np
import pytest

from svgpathdata.bezier import BezierCurve

###############################################################################
# Evaluation Tests
###############################################################################


class TestEvaluate:
    """Test evaluation of Bezier curves at a parameter."""

    def test_cubic_midpoint(self):
        """Test the cubic at t=0.5."""
        control_points = [(0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0)]

        assert BezierCurve.evaluate(control_points, 0.5) == pytest.approx((5.0, 7.5))

    def test_quadratic_midpoint(self):
        """Test the quadratic at t=0.5."""
        control_points = [(0.0, 0.0), (10.0, 10.0), (20.0, 0.0)]

        assert BezierCurve.evaluate(control_points, 0.5) == pytest.approx((10.0, 5.0))

    def test_end_points(self):
        """Test that t=0 and t=1 give the first and last control point."""
        control_points = np.array([[1.0, 2.0], [3.0, 9.0], [5.0, -4.0], [7.0, 8.0]], dtype=np.float64)

        assert BezierCurve.evaluate(control_points, 0.0) == (1.0, 2.0)
        assert BezierCurve.evaluate(control_points, 1.0) == (7.0, 8.0)

    def test_line(self):
        """Test that two control points give linear interpolation."""
        assert BezierCurve.evaluate([(0.0, 0.0), (10.0, 20.0)], 0.25) == pytest.approx((2.5, 5.0))


###############################################################################
# Polygonization Tests
###############################################################################


class TestPolygonize:
    """Test polygonization of Bezier curves."""

    def test_quadratic_shape_and_end_points(self):
        """Test the number of points and the end points of a quadratic."""
        control_points = np.array([[0.0, 0.0], [10.0, 10.0], [20.0, 0.0]], dtype=np.float64)
        steps = 8

        result = BezierCurve.polygonize_quadratic_curve(control_points, steps)

        assert result.shape == (steps + 1, 2)
        assert np.allclose(result[0], control_points[0])
        assert np.allclose(result[-1], control_points[2])
        assert np.allclose(result[steps // 2], [10.0, 5.0])

    def test_cubic_shape_and_end_points(self):
        """Test the number of points and the end points of a cubic."""
        control_points = np.array([[30.0, 10.0], [35.0, 15.0], [40.0, 15.0], [45.0, 10.0]], dtype=np.float64)
        steps = 10

        result = BezierCurve.polygonize_cubic_curve(control_points, steps)

        assert result.shape == (steps + 1, 2)
        assert np.allclose(result[0], control_points[0])
        assert np.allclose(result[-1], control_points[3])

    def test_cubic_points_match_evaluate(self):
        """Test that polygonized points are points of the curve."""
        control_points = [(0.0, 0.0), (5.0, 20.0), (15.0, -10.0), (20.0, 5.0)]
        steps = 4

        result = BezierCurve.polygonize_cubic_curve(control_points, steps)

        for i in range(steps + 1):
            assert np.allclose(result[i], BezierCurve.evaluate(control_points, i / steps))

    def test_polygonize_curve_dispatch(self):
        """Test that polygonize_curve handles lines, quadratics and cubics."""
        line = [(0.0, 0.0), (1.0, 1.0)]
        quadratic = [(0.0, 0.0), (1.0, 1.0), (2.0, 0.0)]
        cubic = [(0.0, 0.0), (1.0, 1.0), (2.0, 1.0), (3.0, 0.0)]

        assert BezierCurve.polygonize_curve(line, 5).shape == (2, 2)
        assert BezierCurve.polygonize_curve(quadratic, 5).shape == (6, 2)
        assert BezierCurve.polygonize_curve(cubic, 5).shape == (6, 2)

    @pytest.mark.parametrize("count", [1, 5])
    def test_polygonize_curve_wrong_point_count(self, count):
        """Test that unsupported degrees raise ValueError."""
        with pytest.raises(ValueError):
            BezierCurve.polygonize_curve([(0.0, 0.0)] * count, 5)

    def test_wrong_point_count_for_degree(self):
        """Test that the degree specific functions check the number of points."""
        with pytest.raises(ValueError):
            BezierCurve.polygonize_quadratic_curve([(0.0, 0.0)] * 4, 5)
        with pytest.raises(ValueError):
            BezierCurve.polygonize_cubic_curve([(0.0, 0.0)] * 3, 5)

    def test_invalid_steps(self):
        """Test that at least one step is required."""
        with pytest.raises(ValueError):
            BezierCurve.polygonize_cubic_curve([(0.0, 0.0)] * 4, 0)

    def test_invalid_shape(self):
        """Test that points must be given as (x, y) pairs."""
        with pytest.raises(ValueError):
            BezierCurve.polygonize_curve([(0.0, 0.0, 0.0), (1.0, 1.0, 1.0)], 5)
