"""
Configuration settings for quarktui.
All constants and configuration variables are defined here.

A few layout knobs can be overridden from the environment; invalid values
fall back to the defaults below.
"""
import os
from pathlib import Path


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# Terminal Settings
TERMINAL_FALLBACK_WIDTH = 80
TERMINAL_FALLBACK_HEIGHT = 24

# Frame Layout
DEFAULT_PADDING_X = max(0, _int_env("QUARKTUI_PADDING_X", 2))
DEFAULT_PADDING_Y = max(0, _int_env("QUARKTUI_PADDING_Y", 1))
DEFAULT_INTERNAL_PADDING = 2
DEFAULT_MAX_FRAME_WIDTH = _int_env("QUARKTUI_MAX_FRAME_WIDTH", 100)
DEFAULT_FRAME_WIDTH_PERCENT = _float_env("QUARKTUI_FRAME_WIDTH_PERCENT", 0.8)
MIN_FRAME_WIDTH = 20

# Window shell: header (4) + footer with divider (4) + borders (2)
WINDOW_HEADER_LINES = 4
WINDOW_FOOTER_LINES = 4
WINDOW_BORDER_LINES = 2

# Event Loop
RESIZE_POLL_INTERVAL = 0.1
ESCAPE_KEY_TIMEOUT = 0.05

# Dialog Settings
SELECT_MAX_VISIBLE_OPTIONS = 12
NUMBER_KEY_OPTION_LIMIT = 9
HELP_PAGE_SCROLL = 10
SPINNER_INTERVAL = 0.08
SPINNER_FRAME_MAX_WIDTH = 50
SPINNER_FRAME_WIDTH_PERCENT = 0.6
THREAD_SHUTDOWN_TIMEOUT = 1.0

# Text Settings
DEFAULT_ELLIPSIS = "..."
CELL_ELLIPSIS = "…"

# Pickers
PICKER_MAX_PATH_LENGTH = 45

# Theme
DEFAULT_THEME_ID = os.environ.get("QUARKTUI_THEME", "default").strip().lower() or "default"

# Logging
LOG_DIR = Path(os.environ.get("QUARKTUI_LOG_DIR", Path.home() / ".quarktui" / "logs"))
LOG_FILE_NAME = "quarktui.log"
