"""Timer package."""

from .engine import (
    TimerController,
    Mode,
    RunState,
    Event,
    Start,
    Pause,
    Resume,
    SwitchMode,
    Reset,
    Tick,
    DURATIONS,
    MAX_DURATION,
    format_clock,
    primary_action,
)
from .driver import TimerDriver, DEFAULT_TICK_INTERVAL_MS

__all__ = [
    "TimerController",
    "Mode",
    "RunState",
    "Event",
    "Start",
    "Pause",
    "Resume",
    "SwitchMode",
    "Reset",
    "Tick",
    "DURATIONS",
    "MAX_DURATION",
    "format_clock",
    "primary_action",
    "TimerDriver",
    "DEFAULT_TICK_INTERVAL_MS",
]
