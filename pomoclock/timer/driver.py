"""Qt event-loop side of the timer.

``TimerDriver`` owns the headless ``TimerController`` and the ``QTimer``
that feeds it ``Tick`` events.  The QTimer only runs while the
controller is RUNNING; a stray tick outside that state is a no-op in the
controller anyway.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from .engine import (
    TimerController, Mode, RunState, Event,
    Start, Pause, Resume, SwitchMode, Reset, Tick,
    primary_action,
)

log = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL_MS = 10


class TimerDriver(QObject):
    """Feeds a ``TimerController`` from user actions and a periodic tick.

    Signals
    -------
    remaining_changed(remaining_seconds: float)
        Emitted whenever the remaining time changes (ticks included).
    state_changed(new_state: RunState)
        Emitted on every run-state transition.
    mode_changed(new_mode: Mode)
        Emitted when the selected mode changes.
    expired(mode: Mode)
        Emitted when a tick runs the countdown down to zero.
    """

    remaining_changed = pyqtSignal(float)
    state_changed = pyqtSignal(object)
    mode_changed = pyqtSignal(object)
    expired = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(parent)
        self._controller = TimerController(clock)

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(max(1, tick_interval_ms))
        self._qt_timer.timeout.connect(self._on_tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def controller(self) -> TimerController:
        return self._controller

    @property
    def mode(self) -> Mode:
        return self._controller.mode

    @property
    def state(self) -> RunState:
        return self._controller.run_state

    @property
    def remaining(self) -> float:
        return self._controller.remaining()

    @property
    def is_running(self) -> bool:
        return self._controller.is_running

    @property
    def is_ticking(self) -> bool:
        """True while the periodic tick source is live."""
        return self._qt_timer.isActive()

    @property
    def tick_interval_ms(self) -> int:
        return self._qt_timer.interval()

    @tick_interval_ms.setter
    def tick_interval_ms(self, value: int) -> None:
        self._qt_timer.setInterval(max(1, value))

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        self.apply(Start())

    def pause(self) -> None:
        self.apply(Pause())

    def resume(self) -> None:
        self.apply(Resume())

    def reset(self) -> None:
        self.apply(Reset())

    def switch_mode(self, mode: Mode) -> None:
        self.apply(SwitchMode(mode))

    def toggle(self) -> None:
        """Start, pause or resume depending on the current run state."""
        _label, event = primary_action(self.state)
        self.apply(event)

    def apply(self, event: Event) -> None:
        """Forward *event* to the controller and publish what changed."""
        before_state = self._controller.run_state
        before_mode = self._controller.mode
        before_remaining = self._controller.remaining()

        self._controller.apply(event)

        after_state = self._controller.run_state
        after_mode = self._controller.mode
        after_remaining = self._controller.remaining()

        if after_state == RunState.RUNNING:
            if not self._qt_timer.isActive():
                self._qt_timer.start()
        else:
            self._qt_timer.stop()

        if after_mode != before_mode:
            log.info("Mode switched: %s -> %s", before_mode.value, after_mode.value)
            self.mode_changed.emit(after_mode)
        if after_remaining != before_remaining:
            self.remaining_changed.emit(after_remaining)
        if after_state != before_state:
            log.debug(
                "Run state %s -> %s on %s",
                before_state.value, after_state.value, type(event).__name__,
            )
            self.state_changed.emit(after_state)
            if isinstance(event, Tick):
                log.info("%s interval finished", after_mode.value)
                self.expired.emit(after_mode)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        self.apply(Tick())
