"""Main application window for PomoClock."""

from __future__ import annotations

import logging
import time
from typing import Callable

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout

from .timer.driver import TimerDriver
from .timer.engine import Mode, RunState, format_clock
from .ui.timer_widget import TimerWidget, MODE_LABELS
from .ui.styles import build_stylesheet, get_palette, next_theme
from .settings import Settings, load_settings, save_settings

log = logging.getLogger(__name__)

APP_NAME = "PomoClock"

_MODE_SHORTCUTS: dict[Mode, str] = {
    Mode.WORK:        "Ctrl+1",
    Mode.SHORT_BREAK: "Ctrl+2",
    Mode.LONG_BREAK:  "Ctrl+3",
}


class PomodoroWindow(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__()
        self._settings: Settings = settings if settings is not None else load_settings()

        self.setWindowTitle(APP_NAME)
        w, h = self._settings.window_width, self._settings.window_height
        if self._settings.resizable:
            self.resize(w, h)
        else:
            self.setFixedSize(w, h)

        self._driver = TimerDriver(
            self, tick_interval_ms=self._settings.tick_interval_ms, clock=clock,
        )

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        self._timer_widget = TimerWidget(self._driver, central)
        layout.addWidget(self._timer_widget)
        self.setCentralWidget(central)

        self._build_menu_bar()

        self._driver.remaining_changed.connect(self._refresh_title)
        self._driver.state_changed.connect(self._refresh_title)
        self._driver.expired.connect(self._on_expired)

        self._apply_theme(self._settings.theme)
        self._apply_always_on_top(self._settings.always_on_top)

    # ── accessors ─────────────────────────────────────────────────────────

    @property
    def driver(self) -> TimerDriver:
        return self._driver

    @property
    def timer_widget(self) -> TimerWidget:
        return self._timer_widget

    @property
    def settings(self) -> Settings:
        return self._settings

    # ══════════════════════════════════════════════════════════════════
    #  MENU BAR
    # ══════════════════════════════════════════════════════════════════

    def _build_menu_bar(self) -> None:
        menu_bar = self.menuBar()

        app_menu = menu_bar.addMenu(APP_NAME)
        quit_action = QAction(f"Quit {APP_NAME}", self)
        quit_action.setMenuRole(QAction.MenuRole.QuitRole)
        quit_action.setShortcut(QKeySequence("Ctrl+Q"))
        quit_action.triggered.connect(self.close)
        app_menu.addAction(quit_action)

        timer_menu = menu_bar.addMenu("Timer")
        self._toggle_action = QAction("Start / Pause", self)
        self._toggle_action.triggered.connect(self._on_space)
        timer_menu.addAction(self._toggle_action)

        self._reset_action = QAction("Reset", self)
        self._reset_action.triggered.connect(self._driver.reset)
        timer_menu.addAction(self._reset_action)

        timer_menu.addSeparator()
        self._mode_actions: dict[Mode, QAction] = {}
        for mode, text in MODE_LABELS.items():
            action = QAction(text, self)
            action.setShortcut(QKeySequence(_MODE_SHORTCUTS[mode]))
            action.triggered.connect(
                lambda _checked=False, m=mode: self._driver.switch_mode(m)
            )
            self._mode_actions[mode] = action
            timer_menu.addAction(action)

        view_menu = menu_bar.addMenu("View")
        theme_action = QAction("Toggle Theme", self)
        theme_action.setShortcut(QKeySequence("Ctrl+T"))
        theme_action.triggered.connect(self._cycle_theme)
        view_menu.addAction(theme_action)

        self._aot_action = QAction("Always on Top", self)
        self._aot_action.setCheckable(True)
        self._aot_action.setChecked(self._settings.always_on_top)
        self._aot_action.triggered.connect(self._toggle_always_on_top)
        view_menu.addAction(self._aot_action)

    # ══════════════════════════════════════════════════════════════════
    #  SLOTS
    # ══════════════════════════════════════════════════════════════════

    def _refresh_title(self, *_args) -> None:
        if self._driver.state == RunState.RUNNING:
            title = f"{format_clock(self._driver.remaining)} - {APP_NAME}"
        else:
            title = APP_NAME
        if title != self.windowTitle():
            self.setWindowTitle(title)

    def _on_expired(self, mode: Mode) -> None:
        log.info("%s finished", MODE_LABELS[mode])
        self.raise_()
        self.activateWindow()

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD SHORTCUTS
    # ══════════════════════════════════════════════════════════════════

    def _on_space(self) -> None:
        """Start, pause, or resume the timer."""
        self._driver.toggle()

    def _on_escape(self) -> None:
        """Reset the timer (no-op when idle)."""
        if self._driver.state != RunState.IDLE:
            self._driver.reset()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Handle Space (start/pause/resume) and Escape (reset) globally."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self._on_space()
            event.accept()
            return
        if key == Qt.Key.Key_Escape:
            self._on_escape()
            event.accept()
            return
        super().keyPressEvent(event)

    # ══════════════════════════════════════════════════════════════════
    #  APPEARANCE
    # ══════════════════════════════════════════════════════════════════

    def _apply_theme(self, theme_key: str) -> None:
        palette = get_palette(theme_key)
        self.setStyleSheet(build_stylesheet(palette))
        self._timer_widget.apply_palette(palette)

    def _cycle_theme(self) -> None:
        self._settings.theme = next_theme(self._settings.theme)
        log.debug("Theme -> %s", self._settings.theme)
        self._apply_theme(self._settings.theme)
        save_settings(self._settings)

    def _toggle_always_on_top(self) -> None:
        self._settings.always_on_top = not self._settings.always_on_top
        self._aot_action.setChecked(self._settings.always_on_top)
        self._apply_always_on_top(self._settings.always_on_top)
        save_settings(self._settings)

    def _apply_always_on_top(self, on_top: bool) -> None:
        self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, on_top)
        # setWindowFlag hides a visible window
        if self.isVisible():
            self.show()
