"""
Wallpaper Service - host surface and redraw triggers

The host owns the drawing surface and decides when it must be redrawn
(surface created, visibility regained). Each trigger repaints from scratch
with the current time; the engine keeps no render state of its own.
"""
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Tuple

from PIL import Image

from config import DEFAULT_SETTINGS, PALETTE
from wallpaper_generator import paint

logger = logging.getLogger(__name__)


class WallpaperSurface:
    """A drawing surface owned by the host."""

    def lock_canvas(self) -> Optional[Image.Image]:
        """Return a canvas to draw on, or None if the surface is unavailable"""
        raise NotImplementedError

    def unlock_canvas_and_post(self, canvas: Image.Image):
        raise NotImplementedError


class ImageFileSurface(WallpaperSurface):
    """Surface whose canvas is presented by writing it to a PNG file."""

    def __init__(self, path: Path, size: Tuple[int, int]):
        self.path = Path(path)
        self._size = (int(size[0]), int(size[1]))
        self.locked = False

    def lock_canvas(self) -> Optional[Image.Image]:
        if self.locked:
            return None
        self.locked = True
        return Image.new('RGB', self._size, PALETTE["bg_top"])

    def unlock_canvas_and_post(self, canvas: Image.Image):
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            canvas.save(self.path, "PNG")
            logger.debug("Posted %dx%d canvas to %s", *canvas.size, self.path)
        finally:
            self.locked = False


def draw_wallpaper(surface: WallpaperSurface, now: datetime,
                   signature: str = DEFAULT_SETTINGS["signature"]) -> bool:
    """
    Acquire the surface, paint, then release and present.

    Returns False when the host has no canvas to give; that draw is skipped.
    The canvas is always released, even if painting raises.
    """
    canvas = surface.lock_canvas()
    if canvas is None:
        return False

    try:
        paint(canvas, now, signature)
    finally:
        surface.unlock_canvas_and_post(canvas)
    return True


class WallpaperEngine:
    """Redraws the surface whenever the host asks for it."""

    def __init__(self, surface: WallpaperSurface,
                 clock: Callable[[], datetime] = datetime.now,
                 signature: str = DEFAULT_SETTINGS["signature"]):
        self.surface = surface
        self.clock = clock
        self.signature = signature

    def on_surface_created(self) -> bool:
        return self.redraw()

    def on_visibility_changed(self, visible: bool) -> bool:
        if not visible:
            return False
        return self.redraw()

    def redraw(self) -> bool:
        try:
            return draw_wallpaper(self.surface, self.clock(), self.signature)
        except Exception:
            logger.exception("Error drawing wallpaper")
            return False
