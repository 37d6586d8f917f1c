"""Main timer display widget.

Layout (top → bottom):
    - Mode row: Work / Short break / Long break (active one checked)
    - Large centred MM:SS clock
    - Action row: Start/Resume/Pause + Reset
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QButtonGroup, QSizePolicy,
)

from ..timer.driver import TimerDriver
from ..timer.engine import Mode, RunState, format_clock, primary_action
from .styles import CLOCK_COLORS


MODE_LABELS: dict[Mode, str] = {
    Mode.WORK:        "Work",
    Mode.SHORT_BREAK: "Short break",
    Mode.LONG_BREAK:  "Long break",
}


class TimerWidget(QWidget):
    """Mode buttons, clock and controls for one ``TimerDriver``."""

    def __init__(self, driver: TimerDriver, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._driver = driver
        self._palette: dict[str, str] = {}
        self._build_ui()
        self._connect_signals()
        self._on_mode_changed(driver.mode)
        self._on_state_changed(driver.state)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(2)

        # ── mode buttons ─────────────────────────────────────────────
        mode_row = QHBoxLayout()
        mode_row.setSpacing(2)
        self._mode_group = QButtonGroup(self)
        self._mode_group.setExclusive(True)
        self._mode_buttons: dict[Mode, QPushButton] = {}
        for mode, text in MODE_LABELS.items():
            btn = QPushButton(text, self)
            btn.setObjectName("modeButton")
            btn.setCheckable(True)
            btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            btn.setSizePolicy(
                QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding,
            )
            self._mode_group.addButton(btn)
            self._mode_buttons[mode] = btn
            mode_row.addWidget(btn)
        root.addLayout(mode_row, 1)

        # ── clock ────────────────────────────────────────────────────
        self._clock_label = QLabel(format_clock(self._driver.remaining), self)
        self._clock_label.setObjectName("clockLabel")
        self._clock_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._clock_label, 3)

        # ── controls ─────────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(2)

        self._primary_btn = QPushButton("Start", self)
        self._primary_btn.setObjectName("primaryButton")

        self._reset_btn = QPushButton("Reset", self)
        self._reset_btn.setObjectName("dangerButton")

        for btn in (self._primary_btn, self._reset_btn):
            btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            btn.setSizePolicy(
                QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding,
            )
            btn_row.addWidget(btn)
        root.addLayout(btn_row, 1)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._primary_btn.clicked.connect(self._driver.toggle)
        self._reset_btn.clicked.connect(self._driver.reset)
        for mode, btn in self._mode_buttons.items():
            btn.clicked.connect(
                lambda _checked=False, m=mode: self._driver.switch_mode(m)
            )

        self._driver.remaining_changed.connect(self._refresh_display)
        self._driver.state_changed.connect(self._on_state_changed)
        self._driver.mode_changed.connect(self._on_mode_changed)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_state_changed(self, state: RunState) -> None:
        label, _event = primary_action(state)
        self._primary_btn.setText(label)
        self._apply_clock_color(state)
        self._refresh_display(self._driver.remaining)

    def _on_mode_changed(self, mode: Mode) -> None:
        self._mode_buttons[mode].setChecked(True)
        self._refresh_display(self._driver.remaining)

    def _refresh_display(self, remaining: float) -> None:
        self._clock_label.setText(format_clock(remaining))

    def _apply_clock_color(self, state: RunState) -> None:
        if not self._palette:
            return
        colour = self._palette.get(CLOCK_COLORS[state], self._palette["text"])
        self._clock_label.setStyleSheet(f"color: {colour};")

    # ── read-only accessors ───────────────────────────────────────────────

    @property
    def clock_text(self) -> str:
        return self._clock_label.text()

    @property
    def primary_label(self) -> str:
        return self._primary_btn.text()

    def checked_mode(self) -> Mode | None:
        for mode, btn in self._mode_buttons.items():
            if btn.isChecked():
                return mode
        return None

    # ── theming ───────────────────────────────────────────────────────────

    def apply_palette(self, palette: dict[str, str]) -> None:
        self._palette = palette
        self._apply_clock_color(self._driver.state)
