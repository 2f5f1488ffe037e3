"""Unit tests for applying the wallpaper to the desktop."""

import sys
from unittest.mock import MagicMock

import wallpaper_setter
from wallpaper_setter import SPI_SETDESKWALLPAPER, set_wallpaper


class TestSetWallpaper:
    """Test set_wallpaper()."""

    def test_missing_file(self, tmp_path):
        assert set_wallpaper(str(tmp_path / "missing.png")) is False

    def test_unsupported_platform(self, tmp_path, monkeypatch):
        image = tmp_path / "wallpaper.png"
        image.write_bytes(b"png")
        monkeypatch.setattr(sys, "platform", "linux")

        assert set_wallpaper(str(image)) is False

    def test_windows_api_called(self, tmp_path, monkeypatch):
        image = tmp_path / "wallpaper.png"
        image.write_bytes(b"png")
        windll = MagicMock()
        windll.user32.SystemParametersInfoW.return_value = 1
        monkeypatch.setattr(sys, "platform", "win32")
        monkeypatch.setattr(wallpaper_setter.ctypes, "windll", windll, raising=False)

        assert set_wallpaper(str(image)) is True

        args = windll.user32.SystemParametersInfoW.call_args.args
        assert args[0] == SPI_SETDESKWALLPAPER
        assert args[2] == str(image.absolute())
