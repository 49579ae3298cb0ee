# event_handlers.py

"""
Event handlers connecting canvas and dialog input to the Scene.
"""
import logging

from transform import parse_transform_request

log = logging.getLogger(__name__)


def on_drag_start(app, event):
    app.scene.drag_start(event.x, event.y)


def on_drag_end(app, event):
    """松开鼠标：按当前模式创建图形并重绘"""
    shape = app.scene.drag_end(event.x, event.y)
    if shape is None:
        return None
    app.redraw()
    app.set_status(f"{shape.kind}: {_format_params(shape)}")
    return shape


def apply_transform_fields(app, kind, fields):
    """解析变换对话框的字段并应用到所有图形"""
    request = parse_transform_request(kind, fields)
    if not app.scene.apply_transform(request, app.pixel_buffer):
        return False
    app.refresh_canvas()
    app.set_status(f"{request!r} -> {len(app.scene)} 个图形")
    return True


def clear_scene(app):
    app.scene.clear(app.pixel_buffer)
    app.refresh_canvas()
    app.set_status("画布已清空")


def _format_params(shape):
    parts = []
    for name, value in shape.params().items():
        if isinstance(value, float):
            value = round(value, 2)
        parts.append(f"{name}={value}")
    return ", ".join(parts)
