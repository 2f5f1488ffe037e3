"""
Reusable GUI Components
"""
import customtkinter as ctk
from PIL import Image


class PreviewImage(ctk.CTkFrame):
    """Scaled-down preview of a rendered wallpaper"""

    def __init__(self, parent, max_size=(360, 640), **kwargs):
        super().__init__(parent, **kwargs)

        self.max_size = max_size
        self.ctk_image = None

        self.configure(
            fg_color=("gray85", "gray20"),
            corner_radius=10
        )

        self.image_label = ctk.CTkLabel(
            self,
            text="Rendering preview...",
            font=ctk.CTkFont(size=13),
            text_color=("gray50", "gray60")
        )
        self.image_label.pack(padx=10, pady=10, expand=True)

    def fit_size(self, size):
        """Largest size with the same aspect ratio that fits max_size"""
        width, height = size
        max_w, max_h = self.max_size
        if not width or not height:
            return (0, 0)
        ratio = min(max_w / width, max_h / height)
        return (max(1, int(width * ratio)), max(1, int(height * ratio)))

    def show(self, img: Image.Image):
        size = self.fit_size(img.size)
        if not size[0] or not size[1]:
            self.show_message("Nothing to preview")
            return

        thumb = img.resize(size, Image.Resampling.LANCZOS)
        self.ctk_image = ctk.CTkImage(light_image=thumb, dark_image=thumb, size=size)
        self.image_label.configure(image=self.ctk_image, text="")

    def show_message(self, text: str):
        self.ctk_image = None
        self.image_label.configure(image=None, text=text)
