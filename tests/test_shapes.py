"""
Tests for the shape model: construction, point clouds, update and
re-derivation from reflected points.
"""
import pytest

from errors import UnknownModeError
from raster import SimpleRasterization
from shapes import Circle, Ellipse, Line, make_shape


class TestPointClouds:

    def test_line_cloud_is_endpoints(self):
        line = Line(0, 0, 50, 20, "dda")
        assert line.points == [(0, 0), (50, 20)]

    def test_zero_radius_circle(self):
        assert Circle(10, 10, 0).points == [(10, 10)]

    def test_circle_cloud_is_full_raster(self):
        circle = Circle(4, -2, 6)
        assert circle.points == list(SimpleRasterization.midpoint_circle(4, -2, 6))
        assert circle.points[0] == (4, 4)
        assert circle.points[1] == (4, -8)

    def test_ellipse_cloud_is_full_raster(self):
        ellipse = Ellipse(0, 0, 4, 2)
        assert ellipse.points == list(SimpleRasterization.midpoint_ellipse(0, 0, 4, 2))
        assert ellipse.points[0] == (0, 2)

    def test_symmetric_cloud_centroid_is_center(self):
        assert Circle(10, 20, 7).centroid() == (10.0, 20.0)
        assert Ellipse(-3, 5, 9, 4).centroid() == (-3.0, 5.0)


class TestInvariants:

    def test_negative_sizes_are_stored_as_magnitudes(self):
        assert Circle(0, 0, -3).radius == 3
        ellipse = Ellipse(0, 0, -4, -2)
        assert (ellipse.rx, ellipse.ry) == (4, 2)

    def test_update_refreshes_points(self):
        circle = Circle(0, 0, 3)
        circle.update(cx=5)
        assert circle.points == list(SimpleRasterization.midpoint_circle(5, 0, 3))

    def test_update_keeps_sizes_non_negative(self):
        ellipse = Ellipse(0, 0, 4, 2)
        ellipse.update(rx=-6)
        assert ellipse.rx == 6

    def test_update_rejects_unknown_parameter(self):
        with pytest.raises(AttributeError):
            Circle(0, 0, 3).update(rx=2)

    def test_line_rejects_unknown_algorithm(self):
        with pytest.raises(ValueError):
            Line(0, 0, 1, 1, "wu")


class TestApplyPoints:

    def test_line_takes_first_two_points(self):
        line = Line(0, 0, 1, 1)
        line.apply_points([(3, 4), (5, 6)])
        assert (line.x1, line.y1, line.x2, line.y2) == (3, 4, 5, 6)
        assert line.points == [(3, 4), (5, 6)]

    def test_circle_center_and_radius(self):
        circle = Circle(0, 0, 2)
        circle.apply_points([(1, 2), (4, 6)])
        assert (circle.cx, circle.cy) == (1, 2)
        assert circle.radius == pytest.approx(5.0)
        assert circle.points == list(SimpleRasterization.midpoint_circle(1, 2, 5))

    def test_circle_single_point_collapses(self):
        circle = Circle(0, 0, 0)
        circle.apply_points([(7, 7)])
        assert circle.params() == {"cx": 7, "cy": 7, "radius": 0}

    def test_ellipse_axes_from_differences(self):
        ellipse = Ellipse(0, 0, 1, 1)
        ellipse.apply_points([(2, 2), (5, -2)])
        assert ellipse.params() == {"cx": 2, "cy": 2, "rx": 3, "ry": 4}


class TestMakeShape:

    @pytest.mark.parametrize("mode,algorithm", [("line-dda", "dda"), ("line-bresenham", "bresenham")])
    def test_lines(self, mode, algorithm):
        line = make_shape(mode, (1, 2), (8, 9))
        assert line.kind == "line"
        assert line.algorithm == algorithm
        assert line.points == [(1, 2), (8, 9)]

    def test_circle_radius_is_drag_distance(self):
        circle = make_shape("circle-midpoint", (0, 0), (3, 4))
        assert circle.kind == "circle"
        assert (circle.cx, circle.cy) == (0, 0)
        assert circle.radius == pytest.approx(5.0)

    def test_ellipse_axes_are_drag_extents(self):
        ellipse = make_shape("ellipse-midpoint", (10, 10), (4, 13))
        assert ellipse.params() == {"cx": 10, "cy": 10, "rx": 6, "ry": 3}

    @pytest.mark.parametrize("mode", ["", "polygon", None])
    def test_unknown_mode(self, mode):
        with pytest.raises(UnknownModeError):
            make_shape(mode, (0, 0), (1, 1))
