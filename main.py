"""
Year Progress Wallpaper - Main Entry Point

A desktop application that renders how much of the year has passed as a
dot grid with a progress bar and sets it as your desktop background.

Usage:
    python main.py
"""
import sys
from pathlib import Path

# Ensure we're in the right directory for imports
sys.path.insert(0, str(Path(__file__).parent))

from logging_config import setup_logging
from gui.app import run_app


if __name__ == "__main__":
    setup_logging()
    run_app()
