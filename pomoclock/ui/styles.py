"""QSS stylesheets and palettes for PomoClock."""

from __future__ import annotations

from ..timer.engine import RunState

# ── palettes ─────────────────────────────────────────────────────────────

PALETTES: dict[str, dict[str, str]] = {
    "dark": {
        "bg":           "#202225",
        "bg_secondary": "#2F3136",
        "surface":      "#36393F",
        "accent":       "#5865F2",
        "accent2":      "#7289DA",
        "text":         "#E6E6E6",
        "text_muted":   "#8E9297",
        "danger":       "#ED4245",
        "border":       "#40444B",
    },
    "light": {
        "bg":           "#F5F5F7",
        "bg_secondary": "#FFFFFF",
        "surface":      "#E8E8ED",
        "accent":       "#3478F6",
        "accent2":      "#5E97F6",
        "text":         "#1D1D1F",
        "text_muted":   "#6E6E73",
        "danger":       "#D70015",
        "border":       "#D2D2D7",
    },
}

DEFAULT_THEME = "dark"

# Clock digit colour per run state (palette key).
CLOCK_COLORS: dict[RunState, str] = {
    RunState.IDLE:    "text",
    RunState.PAUSED:  "text_muted",
    RunState.RUNNING: "accent2",
}


def get_palette(theme_key: str) -> dict[str, str]:
    """Return a copy of the palette for *theme_key* (dark if unknown)."""
    return dict(PALETTES.get(theme_key, PALETTES[DEFAULT_THEME]))


def next_theme(theme_key: str) -> str:
    keys = list(PALETTES)
    try:
        idx = keys.index(theme_key)
    except ValueError:
        idx = -1
    return keys[(idx + 1) % len(keys)]


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str]) -> str:
    p = palette
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-size: 14px;
    }}

    QMainWindow {{
        background-color: {p['bg']};
    }}

    /* ── buttons ─────────────────────────────────── */
    QPushButton {{
        background-color: {p['bg_secondary']};
        color: {p['text']};
        border: 1px solid {p['border']};
        border-radius: 6px;
        padding: 10px 24px;
        font-size: 15px;
        font-weight: 600;
    }}

    QPushButton:hover {{
        background-color: {p['surface']};
        border-color: {p['accent']};
    }}

    QPushButton:pressed {{
        background-color: {p['accent']};
        color: {p['bg']};
    }}

    QPushButton#modeButton:checked {{
        background-color: {p['accent']};
        color: {p['bg_secondary']};
        border-color: {p['accent']};
    }}

    QPushButton#primaryButton {{
        background-color: {p['accent']};
        color: {p['bg_secondary']};
        border: none;
        font-size: 17px;
        font-weight: 700;
    }}

    QPushButton#primaryButton:hover {{
        background-color: {p['accent2']};
    }}

    QPushButton#dangerButton {{
        color: {p['danger']};
    }}

    QPushButton#dangerButton:hover {{
        background-color: {p['danger']};
        color: {p['bg']};
        border-color: {p['danger']};
    }}

    /* ── clock ───────────────────────────────────── */
    QLabel#clockLabel {{
        background-color: transparent;
        font-size: 120px;
        font-weight: 300;
    }}

    /* ── menu bar ────────────────────────────────── */
    QMenuBar {{
        background-color: {p['bg']};
        color: {p['text_muted']};
    }}

    QMenuBar::item:selected, QMenu::item:selected {{
        background-color: {p['surface']};
        color: {p['text']};
    }}
    """
