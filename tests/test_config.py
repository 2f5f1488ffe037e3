"""Unit tests for configuration and settings persistence."""

import json
import logging

import pytest

from config import (
    DEFAULT_SETTINGS,
    PALETTE,
    TEXT_STYLES,
    WALLPAPER_CONFIG,
    apply_signature,
    hex_to_rgb,
    load_settings,
    output_size,
    save_settings,
)


class TestHexToRgb:
    """Test hex_to_rgb()."""

    def test_converts_palette_colors(self):
        assert hex_to_rgb("#0E0820") == (14, 8, 32)
        assert hex_to_rgb("FF9F1C") == (255, 159, 28)

    def test_rejects_short_values(self):
        with pytest.raises(ValueError):
            hex_to_rgb("#FFF")

    def test_palette_matches_text_styles(self):
        assert TEXT_STYLES["caption"].color == PALETTE["caption"]
        assert TEXT_STYLES["signature"].face == "serif_italic"

    def test_wallpaper_config_only_names_output(self):
        assert WALLPAPER_CONFIG == {"output_filename": "year_progress_wallpaper.png"}


class TestSettings:
    """Test load_settings() and save_settings()."""

    def test_missing_file_gives_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "settings.json")

        assert settings == DEFAULT_SETTINGS
        assert settings is not DEFAULT_SETTINGS

    def test_saved_values_override_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"signature": "me"}), encoding="utf-8")

        settings = load_settings(path)

        assert settings["signature"] == "me"
        assert settings["output_width"] == DEFAULT_SETTINGS["output_width"]

    def test_corrupt_file_gives_defaults(self, tmp_path, caplog):
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="config"):
            settings = load_settings(path)

        assert settings == DEFAULT_SETTINGS
        assert "Could not read settings" in caplog.text

    def test_save_round_trip_creates_folder(self, tmp_path):
        path = tmp_path / "data" / "settings.json"
        settings = dict(DEFAULT_SETTINGS, output_width=1920, output_height=1080)

        assert save_settings(settings, path) is True
        assert load_settings(path) == settings

    def test_save_failure_returns_false(self, tmp_path):
        blocker = tmp_path / "data"
        blocker.write_text("not a folder", encoding="utf-8")

        assert save_settings(DEFAULT_SETTINGS, blocker / "settings.json") is False


class TestOutputSize:
    """Test output_size()."""

    def test_defaults_mean_screen_size(self):
        assert output_size(DEFAULT_SETTINGS) is None

    def test_override(self):
        assert output_size({"output_width": 1920, "output_height": "1080"}) == (1920, 1080)

    def test_partial_override_is_ignored(self):
        assert output_size({"output_width": 1920, "output_height": 0}) is None

    def test_invalid_values_fall_back(self, caplog):
        with caplog.at_level(logging.WARNING, logger="config"):
            assert output_size({"output_width": "abc", "output_height": 1080}) is None

        assert "Ignoring invalid output size" in caplog.text


class TestApplySignature:
    """Test apply_signature()."""

    def test_unchanged_signature_is_not_saved(self, tmp_path):
        path = tmp_path / "settings.json"
        settings = DEFAULT_SETTINGS.copy()

        assert apply_signature(settings, f"  {settings['signature']} ", path) is False
        assert not path.exists()

    def test_new_signature_is_saved(self, tmp_path):
        path = tmp_path / "settings.json"
        settings = DEFAULT_SETTINGS.copy()

        assert apply_signature(settings, " me ", path) is True
        assert settings["signature"] == "me"
        assert load_settings(path)["signature"] == "me"
