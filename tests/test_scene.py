"""
Tests for Scene orchestration: creation from drags, paint order, scene-wide
transforms followed by a full re-render, and clearing.
"""
import pytest

from raster import SimpleRasterization
from scene import Scene
from shapes import Circle, Line
from transform import TransformRequest


@pytest.fixture
def scene():
    return Scene(width=64, height=48)


class TestCreation:

    def test_drag_creates_bresenham_line(self, scene, surface):
        scene.set_mode("line-bresenham")
        scene.drag_start(0, 0)
        shape = scene.drag_end(5, 0)
        assert shape is not None and shape.kind == "line"
        assert list(scene) == [shape]

        scene.render(surface)
        assert surface.clears == [(64, 48)]
        assert surface.pixels == [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0), (5, 0)]

    def test_zero_radius_circle_renders_center(self, scene, surface):
        scene.set_mode("circle-midpoint")
        scene.drag_start(10, 10)
        circle = scene.drag_end(10, 10)
        assert circle.points == [(10, 10)]
        scene.render(surface)
        assert surface.pixels == [(10, 10)]

    def test_unknown_mode_creates_nothing(self, scene):
        scene.set_mode("spray")
        scene.drag_start(0, 0)
        assert scene.drag_end(3, 3) is None
        assert len(scene) == 0

    def test_no_mode_creates_nothing(self, scene):
        scene.drag_start(0, 0)
        assert scene.drag_end(3, 3) is None
        assert len(scene) == 0

    def test_drag_end_without_start(self, scene):
        scene.set_mode("line-dda")
        assert scene.drag_end(3, 3) is None

    def test_each_drag_consumes_its_start(self, scene):
        scene.set_mode("line-dda")
        scene.drag_start(0, 0)
        scene.drag_end(2, 2)
        assert scene.drag_end(4, 4) is None
        assert len(scene) == 1


class TestRendering:

    def test_paint_order_is_creation_order(self, scene, surface):
        line = Line(0, 0, 3, 0, "dda")
        circle = Circle(20, 20, 2)
        scene.add_shape(line)
        scene.add_shape(circle)
        scene.render(surface)
        expected = list(SimpleRasterization.dda_line(0, 0, 3, 0)) + list(SimpleRasterization.midpoint_circle(20, 20, 2))
        assert surface.pixels == expected

    def test_render_clears_first(self, scene, surface):
        scene.add_shape(Line(0, 0, 1, 0))
        scene.render(surface)
        scene.render(surface)
        assert surface.clears == [(64, 48), (64, 48)]
        assert surface.pixels == [(0, 0), (1, 0)]


class TestTransforms:

    def test_transform_rerenders_everything(self, scene, surface):
        scene.add_shape(Line(0, 0, 2, 0))
        scene.add_shape(Circle(10, 10, 1))
        assert scene.apply_transform(TransformRequest("translate", dx=1, dy=2), surface)
        assert surface.clears == [(64, 48)]
        assert surface.pixels[:3] == [(1, 2), (2, 2), (3, 2)]
        assert surface.pixels[3:] == list(SimpleRasterization.midpoint_circle(11, 12, 1))

    def test_transform_without_surface_only_mutates(self, scene):
        line = Line(0, 0, 1, 1)
        scene.add_shape(line)
        scene.apply_transform(TransformRequest("scale", sx=2, sy=2))
        assert (line.x2, line.y2) == (2, 2)

    def test_huge_scale_is_clamped_to_canvas_diagonal(self, scene, surface):
        circle = Circle(10, 10, 3)
        scene.add_shape(circle)
        assert scene.apply_transform(TransformRequest("scale", sx=1e9, sy=1), surface)
        assert circle.radius == 80
        assert surface.clears == [(64, 48)]

    def test_unknown_transform_is_noop(self, scene, surface):
        line = Line(0, 0, 1, 1)
        scene.add_shape(line)
        assert scene.apply_transform(TransformRequest("skew"), surface) is False
        assert line.params()["x2"] == 1
        assert surface.clears == []

    def test_reflect_mode_from_scene(self, surface):
        scene = Scene(reflect_mode="points")
        circle = Circle(0, 0, 5)
        scene.add_shape(circle)
        scene.apply_transform(TransformRequest("reflect", axis="x"), surface)
        assert circle.radius == pytest.approx(10)

    def test_invalid_reflect_mode(self):
        with pytest.raises(ValueError):
            Scene(reflect_mode="mirror")


class TestClear:

    def test_clear_drops_all_shapes_and_blanks_surface(self, scene, surface):
        scene.add_shape(Line(0, 0, 4, 4))
        scene.add_shape(Circle(5, 5, 2))
        scene.clear(surface)
        assert len(scene) == 0
        assert surface.clears == [(64, 48)]
        assert surface.pixels == []
