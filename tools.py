from tkinter import simpledialog
import customtkinter as ctk

from transform import TRANSFORM_KINDS

# 每种变换需要显示的字段
TRANSFORM_FIELDS = {
    "translate": ("dx", "dy"),
    "rotate": ("angle", "pivot_x", "pivot_y"),
    "scale": ("sx", "sy"),
    "reflect": ("axis",),
}

FIELD_LABELS = {
    "dx": "X 平移:", "dy": "Y 平移:",
    "angle": "角度 (度):", "pivot_x": "旋转中心 X:", "pivot_y": "旋转中心 Y:",
    "sx": "X 缩放:", "sy": "Y 缩放:",
    "axis": "翻转轴:",
}

FIELD_DEFAULTS = {"dx": "0", "dy": "0", "angle": "0", "pivot_x": "0", "pivot_y": "0", "sx": "1", "sy": "1"}


class TransformDialog(simpledialog.Dialog):
    """变换对话框：result 为 (kind, {字段名: 原始文本})，数值解析交给 transform 模块"""

    def body(self, master):
        self.title("变换")

        ctk.CTkLabel(master, text="变换类型:").grid(row=0, column=0, sticky="w", padx=5, pady=5)
        self.kind_var = ctk.StringVar(value=TRANSFORM_KINDS[0])
        self.kind_menu = ctk.CTkOptionMenu(master, variable=self.kind_var, values=list(TRANSFORM_KINDS),
                                           command=self._show_fields)
        self.kind_menu.grid(row=0, column=1, padx=5, pady=5, sticky="ew")

        self.field_vars = {}
        self.field_widgets = {}
        for row, name in enumerate(FIELD_LABELS, start=1):
            label = ctk.CTkLabel(master, text=FIELD_LABELS[name])
            if name == "axis":
                var = ctk.StringVar(value="x")
                widget = ctk.CTkSegmentedButton(master, values=["x", "y"], variable=var)
            else:
                var = ctk.StringVar(value=FIELD_DEFAULTS[name])
                widget = ctk.CTkEntry(master, textvariable=var, width=120)
            label.grid(row=row, column=0, sticky="w", padx=5, pady=5)
            widget.grid(row=row, column=1, padx=5, pady=5, sticky="w")
            self.field_vars[name] = var
            self.field_widgets[name] = (label, widget)

        self._show_fields(self.kind_var.get())
        return self.kind_menu

    def _show_fields(self, kind):
        visible = TRANSFORM_FIELDS.get(kind, ())
        for name, (label, widget) in self.field_widgets.items():
            if name in visible:
                label.grid()
                widget.grid()
            else:
                label.grid_remove()
                widget.grid_remove()

    def apply(self):
        kind = self.kind_var.get()
        fields = {name: self.field_vars[name].get() for name in TRANSFORM_FIELDS.get(kind, ())}
        self.result = (kind, fields)
