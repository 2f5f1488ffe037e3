"""
Desktop Wallpaper Setter - applies a rendered image using the Windows API
"""
import ctypes
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


# Windows API constants
SPI_SETDESKWALLPAPER = 0x0014
SPIF_UPDATEINIFILE = 0x01
SPIF_SENDCHANGE = 0x02


def set_wallpaper(image_path: str) -> bool:
    """
    Set the desktop wallpaper

    Args:
        image_path: Path to the image file

    Returns:
        True if successful, False otherwise
    """
    abs_path = Path(image_path).absolute()

    if not abs_path.exists():
        logger.error("Wallpaper file not found: %s", abs_path)
        return False

    if sys.platform != "win32":
        logger.warning("Setting the wallpaper is not supported on %s; image saved to %s",
                       sys.platform, abs_path)
        return False

    try:
        result = ctypes.windll.user32.SystemParametersInfoW(
            SPI_SETDESKWALLPAPER,
            0,
            str(abs_path),
            SPIF_UPDATEINIFILE | SPIF_SENDCHANGE
        )
    except OSError as e:
        logger.error("Error setting wallpaper: %s", e)
        return False

    return bool(result)
