"""Application settings with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/PomoClock/settings.json

Interval lengths are fixed (see ``timer.engine.DURATIONS``); only window
and presentation preferences live here.

Usage::

    settings = load_settings()
    settings.theme = "light"
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

log = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "PomoClock"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"

THEMES = ("dark", "light")


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    tick_interval_ms: int = 10

    # ── appearance ────────────────────────────────────────────────────
    theme: str = "dark"
    always_on_top: bool = False

    # ── window ────────────────────────────────────────────────────────
    window_width: int = 640
    window_height: int = 360
    resizable: bool = False

    # ── diagnostics ───────────────────────────────────────────────────
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults.

    Values whose type differs from the field's default are dropped, so a
    hand-edited file can never hand the window a string for a size.
    """
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
        items = data.items()
    except (OSError, ValueError, AttributeError) as exc:
        log.warning("Ignoring unreadable settings file %s: %s", SETTINGS_PATH, exc)
        return Settings()

    defaults = Settings()
    valid_keys = {f.name for f in fields(Settings)}
    filtered = {}
    for key, value in items:
        if key not in valid_keys:
            continue
        # exact match: JSON true must not pass for an int field
        if type(value) is not type(getattr(defaults, key)):
            log.warning("Ignoring setting %s=%r (wrong type)", key, value)
            continue
        filtered[key] = value
    settings = Settings(**filtered)

    if settings.theme not in THEMES:
        log.warning("Unknown theme %r, using dark", settings.theme)
        settings.theme = "dark"
    return settings


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
