# transform.py

"""
Transform operations (translate, rotate, scale, reflect) applied to shapes.

Each operation is dispatched on ``shape.kind`` and goes through
``Shape.update`` / ``Shape.apply_points`` so the point cloud is refreshed as
part of the same call.
"""
import math
import logging
import re

from errors import UnknownTransformError

log = logging.getLogger(__name__)

TRANSFORM_KINDS = ("translate", "rotate", "scale", "reflect")
REFLECT_MODES = ("parameters", "points")


def rotate_point(x, y, angle_rad, center_x, center_y):
    """绕 (center_x, center_y) 旋转点"""
    cos_a = math.cos(angle_rad)
    sin_a = math.sin(angle_rad)
    new_x = center_x + (x - center_x) * cos_a - (y - center_y) * sin_a
    new_y = center_y + (x - center_x) * sin_a + (y - center_y) * cos_a
    return new_x, new_y


def reflect_point(x, y, axis, center_x, center_y):
    """关于中心翻转：axis="x" 翻转 y 坐标，其余翻转 x 坐标"""
    if axis == "x":
        return x, 2 * center_y - y
    return 2 * center_x - x, y


# --- 平移 ---

def _translate_line(shape, dx, dy):
    shape.update(x1=shape.x1 + dx, y1=shape.y1 + dy,
                 x2=shape.x2 + dx, y2=shape.y2 + dy)


def _translate_center(shape, dx, dy):
    shape.update(cx=shape.cx + dx, cy=shape.cy + dy)


# --- 旋转（半径/半轴不变，椭圆轴方向不跟踪） ---

def _rotate_line(shape, angle_rad, px, py):
    x1, y1 = rotate_point(shape.x1, shape.y1, angle_rad, px, py)
    x2, y2 = rotate_point(shape.x2, shape.y2, angle_rad, px, py)
    shape.update(x1=x1, y1=y1, x2=x2, y2=y2)


def _rotate_center(shape, angle_rad, px, py):
    cx, cy = rotate_point(shape.cx, shape.cy, angle_rad, px, py)
    shape.update(cx=cx, cy=cy)


# --- 缩放 ---

def _clamp_extent(value, max_extent):
    """把长度限制在 max_extent 以内（None 表示不限制）"""
    value = abs(value)
    if max_extent is not None and value > max_extent:
        log.warning("scaled extent %g clamped to %g", value, max_extent)
        return max_extent
    return value


def _scale_line(shape, sx, sy, max_extent=None):
    # 以端点 A 为锚点
    vx = (shape.x2 - shape.x1) * sx
    vy = (shape.y2 - shape.y1) * sy
    length = math.hypot(vx, vy)
    clamped = _clamp_extent(length, max_extent)
    if clamped != length:
        vx, vy = vx * clamped / length, vy * clamped / length
    shape.update(x2=shape.x1 + vx, y2=shape.y1 + vy)


def _scale_circle(shape, sx, sy, max_extent=None):
    # 圆只支持等比缩放，sy 被忽略
    shape.update(radius=_clamp_extent(shape.radius * sx, max_extent))


def _scale_ellipse(shape, sx, sy, max_extent=None):
    shape.update(rx=_clamp_extent(shape.rx * sx, max_extent),
                 ry=_clamp_extent(shape.ry * sy, max_extent))


# --- 参数翻转 ---

def _reflect_line(shape, axis, cx, cy):
    x1, y1 = reflect_point(shape.x1, shape.y1, axis, cx, cy)
    x2, y2 = reflect_point(shape.x2, shape.y2, axis, cx, cy)
    shape.update(x1=x1, y1=y1, x2=x2, y2=y2)


def _reflect_center(shape, axis, cx, cy):
    new_cx, new_cy = reflect_point(shape.cx, shape.cy, axis, cx, cy)
    shape.update(cx=new_cx, cy=new_cy)


_TRANSLATORS = {"line": _translate_line, "circle": _translate_center, "ellipse": _translate_center}
_ROTATORS = {"line": _rotate_line, "circle": _rotate_center, "ellipse": _rotate_center}
_SCALERS = {"line": _scale_line, "circle": _scale_circle, "ellipse": _scale_ellipse}
_REFLECTORS = {"line": _reflect_line, "circle": _reflect_center, "ellipse": _reflect_center}


def translate(shape, dx, dy):
    _TRANSLATORS[shape.kind](shape, dx, dy)


def rotate(shape, angle_degrees, pivot_x=0, pivot_y=0):
    _ROTATORS[shape.kind](shape, math.radians(angle_degrees), pivot_x, pivot_y)


def scale(shape, sx, sy, max_extent=None):
    """max_extent 限制缩放后的半径、半轴和线段长度"""
    _SCALERS[shape.kind](shape, sx, sy, max_extent)


def reflect(shape, axis, mode="parameters"):
    """
    关于图形自身点云质心翻转。

    mode="points": 翻转整个点云，再由 points[0]/points[1] 反推参数
    mode="parameters": 直接翻转端点/圆心，半径与半轴保持不变
    """
    if not shape.points:
        return
    cx, cy = shape.centroid()
    if mode == "points":
        shape.apply_points([reflect_point(x, y, axis, cx, cy) for x, y in shape.points])
    else:
        _REFLECTORS[shape.kind](shape, axis, cx, cy)


class TransformRequest:
    """一次变换请求：种类 + 数值参数（缺省值为恒等变换）"""

    def __init__(self, kind, dx=0, dy=0, angle=0, pivot_x=0, pivot_y=0,
                 sx=1.0, sy=1.0, axis="x"):
        self.kind = kind
        self.dx = dx
        self.dy = dy
        self.angle = angle
        self.pivot_x = pivot_x
        self.pivot_y = pivot_y
        self.sx = sx
        self.sy = sy
        self.axis = axis

    def __repr__(self):
        if self.kind == "translate":
            detail = f"dx={self.dx}, dy={self.dy}"
        elif self.kind == "rotate":
            detail = f"angle={self.angle}, pivot=({self.pivot_x}, {self.pivot_y})"
        elif self.kind == "scale":
            detail = f"sx={self.sx}, sy={self.sy}"
        else:
            detail = f"axis={self.axis!r}"
        return f"TransformRequest({self.kind!r}, {detail})"


_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_int(value, default=0):
    """按 parseInt 的方式取前导整数，失败时返回 default"""
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return int(value) if math.isfinite(value) else default
    match = _INT_PREFIX.match(str(value or ""))
    return int(match.group(1)) if match else default


def parse_scale(value, default=1.0):
    """按 parseFloat(...) || 1 的方式解析缩放因子（0 也视为缺省）"""
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _FLOAT_PREFIX.match(str(value or ""))
        number = float(match.group(1)) if match else default
    if not math.isfinite(number) or number == 0:
        return default
    return number


def parse_transform_request(kind, fields):
    """
    将对话框中的文本字段转换为 TransformRequest。

    fields 可包含: dx, dy, angle, pivot_x, pivot_y, sx, sy, axis
    """
    fields = fields or {}
    axis = str(fields.get("axis") or "x").strip().lower()
    return TransformRequest(
        kind,
        dx=parse_int(fields.get("dx")),
        dy=parse_int(fields.get("dy")),
        angle=parse_int(fields.get("angle")),
        pivot_x=parse_int(fields.get("pivot_x")),
        pivot_y=parse_int(fields.get("pivot_y")),
        sx=parse_scale(fields.get("sx")),
        sy=parse_scale(fields.get("sy")),
        axis=axis,
    )


def apply_transform(shapes, request, reflect_mode="parameters", max_extent=None):
    """把同一个变换应用到所有图形"""
    if request.kind not in TRANSFORM_KINDS:
        raise UnknownTransformError(f"unknown transform: {request.kind!r}")

    for shape in shapes:
        if request.kind == "translate":
            translate(shape, request.dx, request.dy)
        elif request.kind == "rotate":
            rotate(shape, request.angle, request.pivot_x, request.pivot_y)
        elif request.kind == "scale":
            scale(shape, request.sx, request.sy, max_extent)
        else:
            reflect(shape, request.axis, reflect_mode)
    log.info("applied %r to %d shape(s)", request, len(shapes))
