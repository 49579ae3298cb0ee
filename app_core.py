import argparse
import logging

import customtkinter as ctk
from tkinter import filedialog, messagebox
from PIL import ImageTk

from errors import SettingsError
from log_setup import setup_logging
from pixel_buffer import PixelBuffer
from scene import Scene
from settings import load_settings
from tools import TransformDialog
from ui_setup import setup_ui

log = logging.getLogger(__name__)

MODE_NAMES = {
    "line-dda": "DDA直线",
    "line-bresenham": "Bresenham直线",
    "circle-midpoint": "中点圆",
    "ellipse-midpoint": "中点椭圆",
}


class DrawingApp(ctk.CTk):
    def __init__(self, settings=None):
        super().__init__()
        settings = settings or load_settings()

        # --- 基本窗口设置 ---
        self.title("Raster Paintbrush")
        ctk.set_appearance_mode("Dark")
        ctk.set_default_color_theme("blue")

        # --- 状态变量 ---
        width, height = settings["canvas_width"], settings["canvas_height"]
        self.geometry(f"{width + 220}x{height + 60}")
        self.viewport_bg_color = "#202020"
        self.scene = Scene(width, height, settings["reflect_mode"])
        self.pixel_buffer = PixelBuffer(width, height, settings["canvas_bg_color"], settings["pixel_color"])
        self._image_ref = None

        setup_ui(self)

        self.bind("<Control-t>", lambda event: self.show_transform_dialog())
        self.bind("<Control-s>", lambda event: self.export_as_image())

        self.after(100, self.redraw)

    # --- 模式选择 ---
    def select_mode(self, mode):
        self.scene.set_mode(mode)
        for name, button in self.mode_buttons.items():
            if name == mode:
                button.configure(fg_color=self.active_fg_color, hover_color=self.active_hover_color)
            else:
                button.configure(fg_color="transparent", hover_color=("gray70", "gray30"))
        self.set_status(f"当前模式：{MODE_NAMES.get(mode, mode)}")

    # --- 鼠标事件 ---
    def start_drawing(self, event):
        from event_handlers import on_drag_start
        return on_drag_start(self, event)

    def stop_drawing(self, event):
        from event_handlers import on_drag_end
        return on_drag_end(self, event)

    # --- 变换 ---
    def show_transform_dialog(self):
        dialog = TransformDialog(self, title="变换")
        if getattr(dialog, 'result', None):
            kind, fields = dialog.result
            from event_handlers import apply_transform_fields
            apply_transform_fields(self, kind, fields)

    def clear_canvas(self):
        from event_handlers import clear_scene
        clear_scene(self)

    def export_as_image(self):
        file_path = filedialog.asksaveasfilename(
            defaultextension=".png",
            filetypes=[("PNG 文件", "*.png"), ("JPEG 文件", "*.jpg")],
            title="导出为图片"
        )
        if not file_path: return
        try:
            self.pixel_buffer.save(file_path)
            log.info("exported canvas to %s", file_path)
        except (OSError, ValueError) as e:
            log.exception("export failed")
            messagebox.showerror("导出失败", f"导出图片时发生错误: \n{e}")

    # --- 绘制 ---
    def redraw(self):
        """清空并重新光栅化全部图形"""
        self.scene.render(self.pixel_buffer)
        self.refresh_canvas()

    def refresh_canvas(self):
        """把像素缓冲一次性绘回 Canvas（保持引用避免 GC）"""
        tk_img = ImageTk.PhotoImage(self.pixel_buffer.image)
        self.canvas.delete("pixelbuffer_image")
        self.canvas.create_image(0, 0, image=tk_img, anchor='nw', tags=("pixelbuffer_image",))
        self._image_ref = tk_img

    def set_status(self, text):
        self.status_label.configure(text=text)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Interactive raster drawing tool")
    parser.add_argument("--settings", help="path to a JSON settings file")
    parser.add_argument("--log-level", help="override the configured log level")
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.settings)
    except SettingsError as e:
        setup_logging(args.log_level or "INFO")
        log.error("%s", e)
        messagebox.showerror("设置错误", str(e))
        return 1

    setup_logging(args.log_level or settings["log_level"])
    app = DrawingApp(settings)
    app.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
