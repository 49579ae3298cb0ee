"""
Scene: the ordered list of shapes plus the drag/mode state that creates them.

Shapes are painted in creation order. Every transform request is applied to
all shapes and followed by a full re-render (clear + redraw).
"""
import logging
import math

from errors import UnknownModeError, UnknownTransformError
from raster import rasterize
from shapes import make_shape
from transform import REFLECT_MODES, apply_transform

log = logging.getLogger(__name__)


class Scene:
    def __init__(self, width=800, height=600, reflect_mode="parameters"):
        if reflect_mode not in REFLECT_MODES:
            raise ValueError(f"unknown reflect mode: {reflect_mode!r}")
        self.width = width
        self.height = height
        self.reflect_mode = reflect_mode
        # 缩放后的尺寸不超过画布对角线
        self.max_extent = math.hypot(width, height)
        self.shapes = []
        self.mode = ""
        self.drag_origin = None

    def __len__(self):
        return len(self.shapes)

    def __iter__(self):
        return iter(self.shapes)

    def set_mode(self, mode):
        self.mode = mode

    def drag_start(self, x, y):
        self.drag_origin = (x, y)

    def drag_end(self, x, y):
        """拖拽结束：按当前模式创建图形，未知模式时返回 None"""
        if self.drag_origin is None:
            return None
        start, self.drag_origin = self.drag_origin, None
        try:
            shape = make_shape(self.mode, start, (x, y))
        except UnknownModeError as e:
            log.debug("drag ignored: %s", e)
            return None
        self.add_shape(shape)
        return shape

    def add_shape(self, shape):
        self.shapes.append(shape)
        log.info("added %r (%d shape(s))", shape, len(self.shapes))

    def pixels(self):
        """按绘制顺序输出所有像素"""
        for shape in self.shapes:
            yield from rasterize(shape)

    def render(self, surface):
        surface.clear(self.width, self.height)
        for x, y in self.pixels():
            surface.set_pixel(x, y)

    def apply_transform(self, request, surface=None):
        """对全部图形应用变换；未知变换种类时不做任何事"""
        try:
            apply_transform(self.shapes, request, self.reflect_mode, self.max_extent)
        except UnknownTransformError as e:
            log.debug("transform ignored: %s", e)
            return False
        if surface is not None:
            self.render(surface)
        return True

    def clear(self, surface=None):
        self.shapes.clear()
        self.drag_origin = None
        log.info("scene cleared")
        if surface is not None:
            self.render(surface)
