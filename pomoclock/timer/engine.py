"""Timer state machine for PomoClock.

Run states
----------
IDLE      Not counting down — holds a reset or expired value.
PAUSED    Countdown interrupted; remaining time is kept.
RUNNING   Counting down against the last-tick timestamp.

Transitions
-----------
IDLE → RUNNING                     (start)
RUNNING → PAUSED                   (pause)
PAUSED → RUNNING                   (resume)
Any → IDLE                         (reset / switch mode)
RUNNING → IDLE                     (tick that reaches zero)
RUNNING → RUNNING                  (tick, time left)

The mode (work / short break / long break) is an independent axis that
only ``SwitchMode`` changes.  Nothing here touches Qt so the controller
can be driven headlessly; see ``driver.py`` for the event-loop side.

Expiry happens when the remaining time reaches exactly zero.  The clock
shows whole seconds, so the last sub-second reads ``00:00`` while the
timer is still RUNNING.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Union


# ── enums ─────────────────────────────────────────────────────────────────


class Mode(Enum):
    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"


class RunState(Enum):
    IDLE = "idle"
    PAUSED = "paused"
    RUNNING = "running"


# ── constants ─────────────────────────────────────────────────────────────

DURATIONS: Mapping[Mode, float] = MappingProxyType({
    Mode.WORK: 25 * 60,
    Mode.SHORT_BREAK: 5 * 60,
    Mode.LONG_BREAK: 15 * 60,
})

MAX_DURATION: float = max(DURATIONS.values())

_HOUR = 60 * 60
_MINUTE = 60


# ── events ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Start:
    """Begin a fresh interval from the full duration of the current mode."""


@dataclass(frozen=True)
class Pause:
    """Hold a running countdown; ignored when nothing is running."""


@dataclass(frozen=True)
class Resume:
    """Continue a paused interval from where it stopped."""


@dataclass(frozen=True)
class SwitchMode:
    mode: Mode


@dataclass(frozen=True)
class Reset:
    """Stop and refill the current mode's interval."""


@dataclass(frozen=True)
class Tick:
    """Advance a running countdown by the time since the last tick."""


Event = Union[Start, Pause, Resume, SwitchMode, Reset, Tick]


# ── presentation helpers ──────────────────────────────────────────────────


def format_clock(seconds: float) -> str:
    """Render a duration as ``MM:SS`` (whole seconds, truncated)."""
    total = int(max(0.0, seconds))
    return f"{(total % _HOUR) // _MINUTE:02d}:{total % _MINUTE:02d}"


_PRIMARY_ACTIONS: dict[RunState, tuple[str, Event]] = {
    RunState.IDLE: ("Start", Start()),
    RunState.PAUSED: ("Resume", Resume()),
    RunState.RUNNING: ("Pause", Pause()),
}


def primary_action(run_state: RunState) -> tuple[str, Event]:
    """Label and event for the start/resume/pause button in *run_state*."""
    return _PRIMARY_ACTIONS[run_state]


# ── controller ────────────────────────────────────────────────────────────


class TimerController:
    """Countdown for one Pomodoro interval.

    ``apply`` is total: every event is accepted in every state.  Time is
    read from *clock* (seconds, monotonic) on ``Start``, ``Resume`` and
    ``Tick`` only.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._mode: Mode = Mode.WORK
        self._run_state: RunState = RunState.IDLE
        self._remaining: float = DURATIONS[Mode.WORK]
        self._last_tick: float = clock()

    def __repr__(self) -> str:
        return (
            f"TimerController(mode={self._mode.value}, "
            f"run_state={self._run_state.value}, "
            f"remaining={self._remaining:.3f})"
        )

    # ── queries ───────────────────────────────────────────────────────

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def run_state(self) -> RunState:
        return self._run_state

    @property
    def is_running(self) -> bool:
        return self._run_state == RunState.RUNNING

    def remaining(self) -> float:
        """Seconds left on the clock, never negative."""
        return self._remaining

    def duration(self) -> float:
        """Full length of the current mode's interval."""
        return DURATIONS[self._mode]

    # ── transitions ───────────────────────────────────────────────────

    def apply(self, event: Event) -> None:
        if isinstance(event, Tick):
            self._tick()
        elif isinstance(event, Start):
            self._remaining = DURATIONS[self._mode]
            self._enter_running()
        elif isinstance(event, Resume):
            self._enter_running()
        elif isinstance(event, Pause):
            # an idle timer has nothing to hold
            if self._run_state == RunState.RUNNING:
                self._run_state = RunState.PAUSED
        elif isinstance(event, SwitchMode):
            self._mode = event.mode
            self._remaining = DURATIONS[event.mode]
            self._run_state = RunState.IDLE
        elif isinstance(event, Reset):
            self._remaining = DURATIONS[self._mode]
            self._run_state = RunState.IDLE
        else:
            raise TypeError(f"not a timer event: {event!r}")

    def _enter_running(self) -> None:
        self._last_tick = self._clock()
        self._run_state = RunState.RUNNING

    def _tick(self) -> None:
        if self._run_state != RunState.RUNNING:
            return
        now = self._clock()
        delta = max(0.0, now - self._last_tick)
        self._last_tick = now
        self._remaining = max(0.0, self._remaining - delta)
        if self._remaining <= 0:
            self._run_state = RunState.IDLE
