"""
Wallpaper Generator - Year Progress Edition
Draws the dot grid, progress bar and labels for a given date onto a canvas
of any size. Every call starts from scratch; nothing is cached between calls.
"""
import math
from dataclasses import dataclass
from datetime import date
from typing import Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFilter, ImageFont

from config import DEFAULT_SETTINGS, FONT_CANDIDATES, LAYOUT, PALETTE, TEXT_STYLES, TextStyle
from year_progress import YearMeta

# Blur radius to Gaussian sigma, as mask-filter blurs convert it
BLUR_SIGMA_SCALE = 0.57735
DOT_SUPERSAMPLE = 4


# ============================================================================
# LAYOUT
# ============================================================================

@dataclass(frozen=True)
class GridLayout:
    """Geometry of the dot grid for one canvas size"""
    cols: int
    rows: int
    cell_size: float
    spacing: float
    dot_radius: float
    start_x: float
    start_y: float

    @property
    def bottom(self) -> float:
        return self.start_y + self.rows * self.spacing

    @property
    def capacity(self) -> int:
        return self.cols * self.rows

    def cell_center(self, index: int) -> Tuple[float, float]:
        """Center of the 1-based cell `index`, filled row by row"""
        row, col = divmod(index - 1, self.cols)
        cx = self.start_x + col * self.spacing + self.spacing / 2
        cy = self.start_y + row * self.spacing + self.spacing / 2
        return cx, cy


def block_center_y(height: float) -> float:
    return height * LAYOUT["block_center_y"]


def compute_grid_layout(width: float, height: float) -> GridLayout:
    cols, rows = LAYOUT["cols"], LAYOUT["rows"]
    grid_width = width * LAYOUT["grid_width"]
    grid_height = height * LAYOUT["grid_height"]

    cell_size = min(grid_width / cols, grid_height / rows)
    spacing = cell_size * LAYOUT["spacing_factor"]

    return GridLayout(
        cols=cols,
        rows=rows,
        cell_size=cell_size,
        spacing=spacing,
        dot_radius=cell_size * LAYOUT["dot_radius"],
        start_x=width / 2 - (cols * spacing) / 2,
        start_y=block_center_y(height) - (rows * spacing) / 2,
    )


def dot_color(index: int, day: int, is_month_start: bool) -> Tuple[int, int, int]:
    """Month starts win over the elapsed/future split"""
    if is_month_start:
        return PALETTE["month_start"]
    if index <= day:
        return PALETTE["elapsed"]
    return PALETTE["future"]


def progress_fill_width(track_width: float, percent: float) -> float:
    return track_width * percent / 100


def format_percent(percent: float) -> str:
    return f"{percent:.1f}%"


# ============================================================================
# FONT UTILITIES
# ============================================================================

def get_font(size: float, face: str = "sans") -> ImageFont.FreeTypeFont:
    """Get system font with fallback to Pillow's bundled font."""
    size = max(1, int(size))
    for name in FONT_CANDIDATES.get(face, FONT_CANDIDATES["sans"]):
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default(size)


def draw_centered_text(draw: ImageDraw.ImageDraw, x: float, baseline: float,
                       text: str, style: TextStyle, canvas_height: int):
    """Draw text horizontally centered on x, sitting on the baseline."""
    font = get_font(style.size * canvas_height, style.face)
    draw.text((x, baseline), text, font=font, fill=style.color, anchor="ms")


# ============================================================================
# PRIMITIVES
# ============================================================================

def draw_gradient_background(canvas: Image.Image,
                             top: Tuple[int, int, int],
                             bottom: Tuple[int, int, int]):
    """Fill the canvas with a top-to-bottom linear gradient."""
    width, height = canvas.size
    if not width or not height:
        return

    t = np.linspace(0.0, 1.0, height)[:, None]
    top_arr = np.array(top, dtype=np.float64)
    bottom_arr = np.array(bottom, dtype=np.float64)
    rows = top_arr + (bottom_arr - top_arr) * t

    pixels = np.repeat(rows[:, None, :], width, axis=1)
    gradient = Image.fromarray(np.rint(pixels).astype(np.uint8))
    canvas.paste(gradient, (0, 0))


def blur_sigma(blur_radius: float) -> float:
    """Gaussian standard deviation for a mask-filter style blur radius"""
    return blur_radius * BLUR_SIGMA_SCALE + 0.5


def draw_glow(canvas: Image.Image, center: Tuple[float, float],
              radius: float, blur: float, color: Tuple[int, int, int]):
    """
    Paste a soft halo around center. Only a patch around the dot is blurred,
    not the whole canvas.
    """
    if radius <= 0:
        return

    sigma = blur_sigma(blur)
    pad = int(math.ceil(radius + sigma * 3))
    size = pad * 2 + 1
    halo = Image.new('RGBA', (size, size), (*color, 0))
    ImageDraw.Draw(halo).ellipse(
        [pad - radius, pad - radius, pad + radius, pad + radius],
        fill=(*color, 255)
    )
    halo = halo.filter(ImageFilter.GaussianBlur(radius=sigma))

    cx, cy = center
    canvas.paste(halo, (int(round(cx)) - pad, int(round(cy)) - pad), halo)


def draw_dot(canvas: Image.Image, center: Tuple[float, float],
             radius: float, color: Tuple[int, int, int]):
    """Anti-aliased filled circle, drawn through a supersampled mask."""
    if radius <= 0:
        return

    cx, cy = center
    left = int(math.floor(cx - radius))
    top = int(math.floor(cy - radius))
    width = int(math.ceil(cx + radius)) - left + 1
    height = int(math.ceil(cy + radius)) - top + 1

    scale = DOT_SUPERSAMPLE
    mask = Image.new('L', (width * scale, height * scale), 0)
    ImageDraw.Draw(mask).ellipse(
        [(cx - radius - left) * scale, (cy - radius - top) * scale,
         (cx + radius - left) * scale, (cy + radius - top) * scale],
        fill=255
    )
    mask = mask.resize((width, height), Image.Resampling.BOX)

    canvas.paste(color, (left, top, left + width, top + height), mask)


# ============================================================================
# MAIN RENDERER
# ============================================================================

def paint(canvas: Image.Image, now: date,
          signature: str = DEFAULT_SETTINGS["signature"]) -> Image.Image:
    """
    Draw the full year progress picture for `now` onto an existing canvas.

    Z-order: background, header text, dot grid (glow under today's dot),
    progress bar, percent label, signature.
    """
    width, height = canvas.size

    draw_gradient_background(canvas, PALETTE["bg_top"], PALETTE["bg_bottom"])

    meta = YearMeta.from_date(now)
    layout = compute_grid_layout(width, height)

    if not width or not height:
        return canvas

    draw = ImageDraw.Draw(canvas)
    center_x = width / 2
    anchor_y = block_center_y(height)

    # Header
    draw_centered_text(draw, center_x, anchor_y - height * LAYOUT["year_offset_y"],
                       str(meta.year), TEXT_STYLES["year"], height)
    draw_centered_text(draw, center_x, anchor_y - height * LAYOUT["caption_offset_y"],
                       f"{meta.day_of_year} Day started", TEXT_STYLES["caption"], height)

    # Dot grid
    radius = layout.dot_radius
    for index in range(1, min(meta.total_days, layout.capacity) + 1):
        center = layout.cell_center(index)

        if index == meta.day_of_year:
            draw_glow(canvas, center,
                      radius=radius * LAYOUT["glow_radius"],
                      blur=radius * LAYOUT["glow_blur"],
                      color=PALETTE["glow"])

        color = dot_color(index, meta.day_of_year, meta.is_month_start(index))
        draw_dot(canvas, center, radius, color)

    # Progress bar
    bar_top = layout.bottom + height * LAYOUT["bar_gap_y"]
    bar_width = width * LAYOUT["bar_width"]
    bar_height = height * LAYOUT["bar_height"]
    bar_left = (width - bar_width) / 2
    corner = LAYOUT["bar_corner_radius"]

    draw.rounded_rectangle([bar_left, bar_top, bar_left + bar_width, bar_top + bar_height],
                           radius=corner, fill=PALETTE["bar_track"])
    fill_width = progress_fill_width(bar_width, meta.percent)
    draw.rounded_rectangle([bar_left, bar_top, bar_left + fill_width, bar_top + bar_height],
                           radius=corner, fill=PALETTE["bar_fill"])

    # Percent label
    draw_centered_text(draw, center_x, bar_top - height * LAYOUT["percent_gap_y"],
                       format_percent(meta.percent), TEXT_STYLES["percent"], height)

    # Signature
    if signature:
        draw_centered_text(draw, center_x, height * LAYOUT["signature_y"],
                           signature, TEXT_STYLES["signature"], height)

    return canvas


def render(now: date, width: int, height: int,
           signature: str = DEFAULT_SETTINGS["signature"]) -> Image.Image:
    """Render the wallpaper for `now` onto a fresh RGB image."""
    canvas = Image.new('RGB', (int(width), int(height)), PALETTE["bg_top"])
    return paint(canvas, now, signature)
