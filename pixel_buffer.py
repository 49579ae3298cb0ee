from PIL import Image


class PixelBuffer:
    """基于 PIL 的像素绘制表面。

    用法：在 DrawingApp 中创建：
        self.pixel_buffer = PixelBuffer(800, 600, "#1a1a1a", "#FFFFFF")

    然后使用：
        self.pixel_buffer.clear(width, height)
        self.pixel_buffer.set_pixel(x, y)
        self.pixel_buffer.save("canvas.png")
    """
    def __init__(self, width=800, height=600, canvas_bg_color="#1a1a1a", pixel_color="#FFFFFF"):
        self.canvas_bg_color = canvas_bg_color
        self.pixel_color = pixel_color
        self.image = None
        self.clear(width, height)

    @staticmethod
    def hex_to_rgba(hex_color):
        if not hex_color or hex_color == "transparent":
            return (0, 0, 0, 0)
        hex_color = hex_color.lstrip('#')
        if len(hex_color) == 6:
            r, g, b = tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))
            return (r, g, b, 255)
        elif len(hex_color) == 8:
            r, g, b, a = tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4, 6))
            return (r, g, b, a)
        else:
            return (0, 0, 0, 255)

    @property
    def size(self):
        return self.image.size

    def clear(self, width, height):
        width = max(1, int(width))
        height = max(1, int(height))
        self.image = Image.new("RGBA", (width, height), self.hex_to_rgba(self.canvas_bg_color))
        self._rgba = self.hex_to_rgba(self.pixel_color)

    def set_pixel(self, x, y):
        # 画布外的像素直接忽略
        x, y = int(x), int(y)
        width, height = self.image.size
        if 0 <= x < width and 0 <= y < height:
            self.image.putpixel((x, y), self._rgba)

    def save(self, file_path):
        """导出为图片；JPEG 不支持透明通道，先转为 RGB"""
        img = self.image
        if str(file_path).lower().endswith((".jpg", ".jpeg")):
            img = img.convert("RGB")
        img.save(file_path)
