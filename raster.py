"""
Scan-conversion algorithms used to turn shape parameters into pixels.

Every algorithm is a generator: calling it again restarts the sequence and the
inputs are never modified. Real-valued inputs are rounded at entry so the
emitted coordinates are always integers. Halves round up (towards +inf).
"""
import math
from typing import Iterator, Tuple


def _round(value) -> int:
    return math.floor(value + 0.5)


def _symmetric_points(xc: int, yc: int, pairs) -> Iterator[Tuple[int, int]]:
    """按顺序输出对称点，同一组内重合的点只输出一次"""
    seen = set()
    for dx, dy in pairs:
        pt = (xc + dx, yc + dy)
        if pt not in seen:
            seen.add(pt)
            yield pt


def _circle_octants(xc, yc, x, y):
    return _symmetric_points(xc, yc, (
        (x, y), (-x, y), (x, -y), (-x, -y),
        (y, x), (-y, x), (y, -x), (-y, -x),
    ))


def _ellipse_quadrants(xc, yc, x, y):
    return _symmetric_points(xc, yc, ((x, y), (-x, y), (x, -y), (-x, -y)))


class SimpleRasterization:
    """光栅化算法实现（直线、圆、椭圆）"""

    @staticmethod
    def dda_line(x0: float, y0: float, x1: float, y1: float) -> Iterator[Tuple[int, int]]:
        """DDA直线算法 - 数字微分分析法"""
        x0, y0, x1, y1 = _round(x0), _round(y0), _round(x1), _round(y1)
        dx = x1 - x0
        dy = y1 - y0
        steps = max(abs(dx), abs(dy))

        if steps == 0:
            yield (x0, y0)
            return

        x_inc = dx / steps
        y_inc = dy / steps

        x = float(x0)
        y = float(y0)

        for _ in range(steps + 1):
            yield (_round(x), _round(y))
            x += x_inc
            y += y_inc

    @staticmethod
    def bresenham_line(x0: float, y0: float, x1: float, y1: float) -> Iterator[Tuple[int, int]]:
        """Bresenham直线算法 - 整数误差项，8连通，包含终点"""
        x, y = _round(x0), _round(y0)
        x1, y1 = _round(x1), _round(y1)
        dx = abs(x1 - x)
        dy = abs(y1 - y)
        sx = 1 if x < x1 else -1
        sy = 1 if y < y1 else -1
        err = dx - dy

        while True:
            yield (x, y)
            if x == x1 and y == y1:
                return
            e2 = 2 * err
            if e2 > -dy:
                err -= dy
                x += sx
            if e2 < dx:
                err += dx
                y += sy

    @staticmethod
    def midpoint_circle(xc: float, yc: float, r: float) -> Iterator[Tuple[int, int]]:
        """Midpoint圆形算法 - 8对称性，整数决策变量"""
        xc, yc, r = _round(xc), _round(yc), _round(abs(r))

        x = 0
        y = r
        p = 1 - r
        yield from _circle_octants(xc, yc, x, y)

        while x < y:
            x += 1
            if p < 0:
                p += 2 * x + 1
            else:
                y -= 1
                p += 2 * (x - y) + 1
            yield from _circle_octants(xc, yc, x, y)

    @staticmethod
    def midpoint_ellipse(xc: float, yc: float, rx: float, ry: float) -> Iterator[Tuple[int, int]]:
        """Midpoint椭圆算法 - 两区域，4对称性"""
        xc, yc = _round(xc), _round(yc)
        rx, ry = _round(abs(rx)), _round(abs(ry))

        # 退化情形：两区域循环在半轴为0时不会终止，直接沿另一条轴输出
        if rx == 0 or ry == 0:
            if ry == 0:
                for x in range(rx, -1, -1):
                    yield from _ellipse_quadrants(xc, yc, x, 0)
            else:
                for y in range(ry, -1, -1):
                    yield from _ellipse_quadrants(xc, yc, 0, y)
            return

        rx_sq = rx * rx
        ry_sq = ry * ry

        # Region 1
        x = 0
        y = ry
        p1 = ry_sq - rx_sq * ry + 0.25 * rx_sq
        while 2 * ry_sq * x <= 2 * rx_sq * y:
            yield from _ellipse_quadrants(xc, yc, x, y)
            x += 1
            if p1 < 0:
                p1 += 2 * ry_sq * x + ry_sq
            else:
                y -= 1
                p1 += 2 * ry_sq * x - 2 * rx_sq * y + ry_sq

        # Region 2
        p2 = ry_sq * (x + 0.5) ** 2 + rx_sq * (y - 1) ** 2 - rx_sq * ry_sq
        while y >= 0:
            yield from _ellipse_quadrants(xc, yc, x, y)
            y -= 1
            if p2 > 0:
                p2 += rx_sq - 2 * rx_sq * y
            else:
                x += 1
                p2 += 2 * ry_sq * x - 2 * rx_sq * y + rx_sq


_LINE_ALGORITHMS = {
    "dda": SimpleRasterization.dda_line,
    "bresenham": SimpleRasterization.bresenham_line,
}


def _rasterize_line(shape):
    return _LINE_ALGORITHMS[shape.algorithm](shape.x1, shape.y1, shape.x2, shape.y2)


def _rasterize_circle(shape):
    return SimpleRasterization.midpoint_circle(shape.cx, shape.cy, shape.radius)


def _rasterize_ellipse(shape):
    return SimpleRasterization.midpoint_ellipse(shape.cx, shape.cy, shape.rx, shape.ry)


RASTERIZERS = {
    "line": _rasterize_line,
    "circle": _rasterize_circle,
    "ellipse": _rasterize_ellipse,
}


def rasterize(shape):
    """返回图形的像素生成器（按 kind 分派）"""
    return RASTERIZERS[shape.kind](shape)
