"""
Configuration settings for the Year Progress Wallpaper
Colors, layout fractions and text styles are compiled-in; the signature
and output size can be overridden in data/settings.json
"""
import json
import logging
from pathlib import Path
from typing import NamedTuple, Optional, Tuple

logger = logging.getLogger(__name__)

# Base paths
APP_DIR = Path(__file__).parent.absolute()
DATA_DIR = APP_DIR / "data"
OUTPUT_DIR = APP_DIR / "output"

# Data files
SETTINGS_FILE = DATA_DIR / "settings.json"


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    """Convert '#RRGGBB' into an (r, g, b) tuple"""
    value = value.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected #RRGGBB color, got {value!r}")
    return tuple(int(value[i:i + 2], 16) for i in (0, 2, 4))


# Colors
PALETTE = {
    "bg_top": hex_to_rgb("#0E0820"),
    "bg_bottom": hex_to_rgb("#1E1038"),
    "text": (255, 255, 255),
    "caption": hex_to_rgb("#D6CFFF"),
    "percent": hex_to_rgb("#EAE6FF"),
    "signature": hex_to_rgb("#B8A9D9"),
    "month_start": hex_to_rgb("#FF9F1C"),
    "elapsed": (255, 255, 255),
    "future": hex_to_rgb("#4A3B75"),
    "glow": (255, 255, 255),
    "bar_track": hex_to_rgb("#4A3B75"),
    "bar_fill": (255, 255, 255),
}

# Geometry, as fractions of the canvas unless noted
LAYOUT = {
    "cols": 22,
    "rows": 17,
    "grid_width": 0.78,
    "grid_height": 0.42,
    "spacing_factor": 1.12,
    "dot_radius": 0.38,  # of the unspaced cell size
    "block_center_y": 0.60,
    "year_offset_y": 0.30,  # above the block center
    "caption_offset_y": 0.24,
    "glow_radius": 1.8,  # of the dot radius
    "glow_blur": 2.5,
    "bar_gap_y": 0.035,  # below the grid
    "bar_width": 0.65,
    "bar_height": 0.004,
    "bar_corner_radius": 50,  # pixels
    "percent_gap_y": 0.012,  # above the bar
    "signature_y": 0.95,
}


class TextStyle(NamedTuple):
    """Appearance of one text primitive; size is a fraction of canvas height"""
    size: float
    color: Tuple[int, int, int]
    face: str = "sans"


TEXT_STYLES = {
    "year": TextStyle(0.038, PALETTE["text"]),
    "caption": TextStyle(0.024, PALETTE["caption"]),
    "percent": TextStyle(0.020, PALETTE["percent"]),
    "signature": TextStyle(0.015, PALETTE["signature"], "serif_italic"),
}

# Font files tried in order; Pillow searches the system font folders
FONT_CANDIDATES = {
    "sans": ["DejaVuSans.ttf", "segoeui.ttf", "arial.ttf", "Helvetica.ttc"],
    "serif_italic": ["DejaVuSerif-Italic.ttf", "georgiai.ttf", "timesi.ttf",
                     "Times New Roman Italic.ttf"],
}

# Default user settings
DEFAULT_SETTINGS = {
    "signature": "developed by Sanika",
    "output_width": 0,  # 0 = use the screen size
    "output_height": 0,
}

# Wallpaper settings
WALLPAPER_CONFIG = {
    "output_filename": "year_progress_wallpaper.png",
}


def load_settings(path: Path = None) -> dict:
    """Load user settings from file"""
    path = path or SETTINGS_FILE
    settings = DEFAULT_SETTINGS.copy()
    if not path.exists():
        return settings

    try:
        with open(path, 'r', encoding='utf-8') as f:
            saved = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not read settings from %s: %s", path, e)
        return settings

    if isinstance(saved, dict):
        settings.update(saved)
    return settings


def save_settings(settings: dict, path: Path = None) -> bool:
    """Save user settings to file"""
    path = path or SETTINGS_FILE
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        return True
    except OSError as e:
        logger.error("Could not save settings to %s: %s", path, e)
        return False


def output_size(settings: dict) -> Optional[Tuple[int, int]]:
    """Wallpaper size override from settings, or None to use the screen size"""
    try:
        width = int(settings.get("output_width") or 0)
        height = int(settings.get("output_height") or 0)
    except (TypeError, ValueError) as e:
        logger.warning("Ignoring invalid output size in settings: %s", e)
        return None

    if width > 0 and height > 0:
        return width, height
    return None


def apply_signature(settings: dict, text: str, path: Path = None) -> bool:
    """Store a new signature; returns False when it is unchanged"""
    text = text.strip()
    if text == settings.get("signature"):
        return False

    settings["signature"] = text
    save_settings(settings, path)
    return True
