"""
Main Application GUI - one-button screen that renders the year progress
wallpaper and hands it to the desktop
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import customtkinter as ctk
from PIL import Image

sys.path.insert(0, str(Path(__file__).parent.parent))

from config import OUTPUT_DIR, WALLPAPER_CONFIG, apply_signature, load_settings, output_size
from gui.components import PreviewImage
from wallpaper_service import ImageFileSurface, WallpaperEngine, WallpaperSurface
from wallpaper_setter import set_wallpaper

logger = logging.getLogger(__name__)

ctk.set_appearance_mode("dark")
ctk.set_default_color_theme("blue")


class PreviewSurface(WallpaperSurface):
    """Surface presented into the preview widget instead of a file"""

    def __init__(self, preview: PreviewImage, size: Tuple[int, int]):
        self.preview = preview
        self._size = size

    def lock_canvas(self) -> Optional[Image.Image]:
        if not self.preview.winfo_exists():
            return None
        return Image.new('RGB', self._size)

    def unlock_canvas_and_post(self, canvas: Image.Image):
        self.preview.show(canvas)


class YearProgressApp(ctk.CTk):
    """Main Application Window"""

    PREVIEW_SIZE = (540, 960)

    def __init__(self):
        super().__init__()

        self.title("Year Progress Wallpaper")
        self.geometry("420x780")
        self.minsize(380, 700)

        self.settings = load_settings()

        self._create_widgets()

        self.preview_engine = WallpaperEngine(
            PreviewSurface(self.preview, self.PREVIEW_SIZE),
            signature=self.settings["signature"]
        )

        self.bind("<Map>", self._on_map)
        self.bind("<Unmap>", self._on_unmap)

    def _create_widgets(self):
        ctk.CTkLabel(self, text="Year Progress",
                     font=ctk.CTkFont(size=22, weight="bold")).pack(pady=(20, 10))

        self.preview = PreviewImage(self, max_size=(300, 540))
        self.preview.pack(padx=20, pady=10)

        self.signature_entry = ctk.CTkEntry(self, placeholder_text="Signature...", height=32)
        self.signature_entry.pack(fill="x", padx=40, pady=(10, 5))
        if self.settings["signature"]:
            self.signature_entry.insert(0, self.settings["signature"])
        self.signature_entry.bind("<Return>", self._on_signature_commit)

        ctk.CTkButton(self, text="Set Wallpaper", height=45,
                      fg_color=("#27AE60", "#1E8449"), hover_color=("#2ECC71", "#27AE60"),
                      command=self._apply_wallpaper).pack(fill="x", padx=40, pady=10)

        self.status_label = ctk.CTkLabel(self, text="", font=ctk.CTkFont(size=11),
                                         text_color=("gray50", "gray60"), wraplength=360)
        self.status_label.pack(side="bottom", pady=10)

    # Map/Unmap also fire for every child widget; only the window counts
    def _on_map(self, event):
        if event.widget is self:
            self.preview_engine.on_visibility_changed(True)

    def _on_unmap(self, event):
        if event.widget is self:
            self.preview_engine.on_visibility_changed(False)

    def _on_signature_commit(self, event=None):
        if not apply_signature(self.settings, self.signature_entry.get()):
            return
        self.preview_engine.signature = self.settings["signature"]
        self.preview_engine.redraw()
        self._update_status("Signature saved")

    def _wallpaper_size(self) -> Tuple[int, int]:
        return output_size(self.settings) or (self.winfo_screenwidth(), self.winfo_screenheight())

    def _apply_wallpaper(self):
        self._on_signature_commit()
        self._update_status("Generating...")
        self.update()

        output = OUTPUT_DIR / WALLPAPER_CONFIG["output_filename"]
        engine = WallpaperEngine(ImageFileSurface(output, self._wallpaper_size()),
                                 signature=self.settings["signature"])

        if not engine.on_surface_created():
            self._update_status("Failed to render wallpaper")
            return

        if set_wallpaper(str(output)):
            self._update_status("Applied!")
        else:
            self._update_status(f"Could not set wallpaper, saved to {output}")

    def _update_status(self, msg):
        self.status_label.configure(text=msg)


def run_app():
    app = YearProgressApp()
    app.mainloop()


if __name__ == "__main__":
    run_app()
