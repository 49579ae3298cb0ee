import customtkinter as ctk
from tkinter import Canvas, BOTH, YES


# 创建模式按钮：(模式, 按钮文字)
MODE_BUTTONS = (
    ("line-dda", "📏 DDA直线"),
    ("line-bresenham", "📐 Bresenham直线"),
    ("circle-midpoint", "⚪ 中点圆"),
    ("ellipse-midpoint", "⬭ 中点椭圆"),
)


def setup_ui(app):
    """创建工具栏、画布和状态栏，并把部件绑定到传入的 `app` 实例上。"""
    app.grid_rowconfigure(0, weight=1)
    app.grid_columnconfigure(1, weight=1)

    # --- 左侧工具栏 ---
    app.toolbar = ctk.CTkFrame(app, width=180, corner_radius=0)
    app.toolbar.grid(row=0, column=0, sticky="ns")

    ui_font = ("Microsoft YaHei", 15)
    button_kwargs = { "font": ui_font, "anchor": "w", "fg_color": "transparent", "hover_color": ("gray70", "gray30"), "height": 40, "corner_radius": 8 }

    ctk.CTkLabel(app.toolbar, text="绘图模式", font=(ui_font[0], 12, "bold"), text_color="#00BFFF").pack(pady=(20, 5))
    app.mode_buttons = {}
    for mode, text in MODE_BUTTONS:
        button = ctk.CTkButton(app.toolbar, text=text, command=lambda m=mode: app.select_mode(m), **button_kwargs)
        button.pack(pady=5, padx=10, fill="x")
        app.mode_buttons[mode] = button
    app.active_fg_color = ("#3B8ED0", "#1F6AA5")
    app.active_hover_color = ("#36719F", "#144870")

    ctk.CTkFrame(app.toolbar, height=2, fg_color="gray40").pack(pady=10, padx=15, fill="x")

    app.transform_button = ctk.CTkButton(app.toolbar, text="变换...", command=app.show_transform_dialog, font=ui_font)
    app.transform_button.pack(pady=10, fill="x", padx=10)
    app.clear_button = ctk.CTkButton(app.toolbar, text="清空画布", command=app.clear_canvas, font=ui_font, fg_color="#C0392B", hover_color="#E74C3C")
    app.clear_button.pack(pady=10, fill="x", padx=10)
    app.export_button = ctk.CTkButton(app.toolbar, text="导出为图片", command=app.export_as_image, font=ui_font)
    app.export_button.pack(pady=10, fill="x", padx=10)

    # --- 中间画布 ---
    app.canvas_frame = ctk.CTkFrame(app, corner_radius=0)
    app.canvas_frame.grid(row=0, column=1, sticky="nsew")

    # --- 状态栏（先于画布 pack，保证窗口缩小时仍可见） ---
    app.status_label = ctk.CTkLabel(app.canvas_frame, text="请选择绘图模式", anchor="w",
                                    text_color="gray70", font=(ui_font[0], 11))
    app.status_label.pack(side="bottom", fill="x", padx=10, pady=5)

    app.canvas_border_frame = ctk.CTkFrame(app.canvas_frame, fg_color="#0a0a0a", corner_radius=0)
    app.canvas_border_frame.pack(fill=BOTH, expand=YES, padx=2, pady=2)

    width, height = app.pixel_buffer.size
    app.canvas = Canvas(app.canvas_border_frame, width=width, height=height,
                        bg=app.viewport_bg_color, highlightthickness=0, cursor="crosshair")
    app.canvas.pack(fill=BOTH, expand=YES)

    app.canvas.bind("<ButtonPress-1>", app.start_drawing)
    app.canvas.bind("<ButtonRelease-1>", app.stop_drawing)
