# ============================================================
# ===================== USER SETTINGS ========================
# ============================================================

import json
import logging
import os
import sys

log = logging.getLogger(__name__)

WINDOW_WIDTH   = 1100
WINDOW_HEIGHT  = 680
PANEL_HEIGHT   = 96
FPS            = 120

DEFAULT_SIZE        = 50
DEFAULT_INTERVAL_MS = 100

# Exclusive ceilings for the two host-supplied numbers.
MAX_ELEMENTS    = 1000
MAX_INTERVAL_MS = 10000

# Slider ranges in the control panel (inside the limits above).
SLIDER_MAX_ELEMENTS = MAX_ELEMENTS - 1
SLIDER_MAX_INTERVAL = 1000

# ============================================================
# ========================= UI THEME =========================
# ============================================================

UI_BG         = (8,   8,  14)
UI_PANEL      = (14, 14,  22)
UI_PANEL2     = (22, 22,  36)
UI_ACCENT     = (255, 55,  55)
UI_TEXT       = (215, 215, 228)
UI_SUBTEXT    = (105, 105, 130)
UI_BORDER     = (38,  38,  58)
UI_GREEN      = (0,  255,   0)
UI_RED        = (255,  0,   0)
LABEL_BG      = (85,  85,  85)

# ============================================================
# =================== AUTOLOAD JSON ==========================
# ============================================================

# JSON file in the user's config dir: custom sorters + last used numbers.
# Only the window remembers these; the sorting core keeps no state on disk.
# SORTRACE_SETTINGS (or --settings) overrides the location.
if sys.platform == "win32":
    APPDATA = os.getenv("APPDATA") or os.path.expanduser("~\\AppData\\Roaming")
    SETTINGS_DIR = os.path.join(APPDATA, "SortRace")
else:
    SETTINGS_DIR = os.path.expanduser("~/.sortrace")

AUTOLOAD_JSON = os.getenv("SORTRACE_SETTINGS") or os.path.join(SETTINGS_DIR, "settings.json")


def default_settings() -> dict:
    return {
        "size": DEFAULT_SIZE,
        "interval_ms": DEFAULT_INTERVAL_MS,
        "custom_sorters": [],
    }


def read_settings(path=AUTOLOAD_JSON) -> dict:
    """Read the JSON settings; a missing or broken file yields the defaults."""
    settings = default_settings()
    if not os.path.exists(path):
        return settings
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        log.warning("Ignoring unreadable settings file %s: %s", path, e)
        return settings
    if not isinstance(data, dict):
        log.warning("Ignoring settings file %s: not a JSON object", path)
        return settings
    for key in settings:
        if key in data: settings[key] = data[key]
    if not isinstance(settings["custom_sorters"], list):
        settings["custom_sorters"] = []
    return settings


def save_settings(settings: dict, path=AUTOLOAD_JSON):
    try:
        parent = os.path.dirname(path)
        if parent: os.makedirs(parent, exist_ok=True)
        with open(path, "w") as f:
            json.dump(settings, f, indent=2)
    except OSError as e:
        log.warning("Could not save settings to %s: %s", path, e)
