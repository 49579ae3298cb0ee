# shapes.py
"""
Shape model: lines, circles and ellipses with their point clouds.

A shape's ``points`` list is always consistent with its parameters. The only
way to change parameters is ``update`` (or ``apply_points`` for reflection),
and both refresh the point cloud before returning.

- Line: the point cloud is exactly its two endpoints.
- Circle / Ellipse: the point cloud is the full midpoint raster, starting at
  (cx, cy + r) and then (cx, cy - r).
"""
import math
import logging

from errors import UnknownModeError
from raster import rasterize

log = logging.getLogger(__name__)

LINE_ALGORITHMS = ("dda", "bresenham")

# 创建模式 -> (图形种类, 直线算法)
CREATION_MODES = {
    "line-dda": ("line", "dda"),
    "line-bresenham": ("line", "bresenham"),
    "circle-midpoint": ("circle", None),
    "ellipse-midpoint": ("ellipse", None),
}


class Shape:
    kind = None
    fields = ()
    # 非负参数（半径、半轴）
    _non_negative = ()

    def __init__(self, **params):
        self.points = []
        for name in self.fields:
            setattr(self, name, params[name])
        self._normalize()
        self.refresh_points()

    def _normalize(self):
        for name in self._non_negative:
            setattr(self, name, abs(getattr(self, name)))

    def refresh_points(self):
        raise NotImplementedError

    def update(self, **params):
        """修改参数并立即重新生成点云"""
        for name, value in params.items():
            if name not in self.fields:
                raise AttributeError(f"{self.kind} has no parameter {name!r}")
            setattr(self, name, value)
        self._normalize()
        self.refresh_points()

    def apply_points(self, points):
        """由（已变换的）点云反推图形参数"""
        raise NotImplementedError

    def params(self):
        return {name: getattr(self, name) for name in self.fields}

    def centroid(self):
        if not self.points:
            return (0.0, 0.0)
        n = len(self.points)
        return (sum(p[0] for p in self.points) / n,
                sum(p[1] for p in self.points) / n)

    def __repr__(self):
        args = ", ".join(f"{k}={v!r}" for k, v in self.params().items())
        return f"{type(self).__name__}({args})"


class Line(Shape):
    kind = "line"
    fields = ("x1", "y1", "x2", "y2", "algorithm")

    def __init__(self, x1, y1, x2, y2, algorithm="bresenham"):
        if algorithm not in LINE_ALGORITHMS:
            raise ValueError(f"unknown line algorithm: {algorithm!r}")
        super().__init__(x1=x1, y1=y1, x2=x2, y2=y2, algorithm=algorithm)

    def refresh_points(self):
        self.points = [(self.x1, self.y1), (self.x2, self.y2)]

    def apply_points(self, points):
        a = points[0]
        b = points[1] if len(points) > 1 else points[0]
        self.update(x1=a[0], y1=a[1], x2=b[0], y2=b[1])


class _RoundShape(Shape):
    """圆与椭圆共用：点云即完整光栅结果"""

    def refresh_points(self):
        self.points = list(rasterize(self))


class Circle(_RoundShape):
    kind = "circle"
    fields = ("cx", "cy", "radius")
    _non_negative = ("radius",)

    def __init__(self, cx, cy, radius):
        super().__init__(cx=cx, cy=cy, radius=radius)

    def apply_points(self, points):
        center = points[0]
        radius = math.dist(center, points[1]) if len(points) > 1 else 0
        self.update(cx=center[0], cy=center[1], radius=radius)


class Ellipse(_RoundShape):
    kind = "ellipse"
    fields = ("cx", "cy", "rx", "ry")
    _non_negative = ("rx", "ry")

    def __init__(self, cx, cy, rx, ry):
        super().__init__(cx=cx, cy=cy, rx=rx, ry=ry)

    def apply_points(self, points):
        center = points[0]
        edge = points[1] if len(points) > 1 else center
        self.update(cx=center[0], cy=center[1],
                    rx=abs(edge[0] - center[0]), ry=abs(edge[1] - center[1]))


def make_shape(mode, start, end):
    """根据拖拽起点/终点和当前创建模式构造图形"""
    if mode not in CREATION_MODES:
        raise UnknownModeError(f"unknown creation mode: {mode!r}")
    kind, algorithm = CREATION_MODES[mode]
    (sx, sy), (ex, ey) = start, end

    if kind == "line":
        shape = Line(sx, sy, ex, ey, algorithm)
    elif kind == "circle":
        shape = Circle(sx, sy, math.hypot(ex - sx, ey - sy))
    else:
        shape = Ellipse(sx, sy, abs(ex - sx), abs(ey - sy))

    log.debug("created %r from mode %s", shape, mode)
    return shape
