"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths scattered throughout the code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (icon, background image) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    ICON_PATH (str): Window icon.
    BACKGROUND_PATH (str): Background image drawn behind the keypad.
    LOG_LEVEL (int): Logging level from DESKTOPCALC_LOG_LEVEL (default INFO).
    LOG_FILE (str | None): Optional log file from DESKTOPCALC_LOG_FILE.
"""
import logging
import sys
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

ENV_LOG_LEVEL = "DESKTOPCALC_LOG_LEVEL"
ENV_LOG_FILE = "DESKTOPCALC_LOG_FILE"


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/desktopcalc/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


def parse_log_level(value: Optional[str]) -> int:
    """Translate a level name ('DEBUG', 'info', ...) or number to a logging level."""
    if not value:
        return logging.INFO
    if value.isdigit():
        return int(value)

    level = logging.getLevelName(value.strip().upper())
    if isinstance(level, int):
        return level

    logger.warning(f"Unknown log level '{value}' in {ENV_LOG_LEVEL}, using INFO")
    return logging.INFO


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
ICON_PATH: str = os.path.join(ASSETS_PATH, "calculator.svg")
BACKGROUND_PATH: str = os.path.join(ASSETS_PATH, "background.svg")

LOG_LEVEL: int = parse_log_level(os.environ.get(ENV_LOG_LEVEL))
LOG_FILE: Optional[str] = os.environ.get(ENV_LOG_FILE) or None

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")
