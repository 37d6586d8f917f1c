"""Tests for the Qt timer driver: tick subscription lifetime and signals."""

import pytest

from pomoclock.timer.driver import TimerDriver, DEFAULT_TICK_INTERVAL_MS
from pomoclock.timer.engine import Mode, RunState, Tick

from helpers import SignalCollector


# ═══════════════════════════════════════════════════════════════════════════
#  TICK SUBSCRIPTION
# ═══════════════════════════════════════════════════════════════════════════


class TestTickSubscription:

    def test_default_interval(self, driver):
        assert driver.tick_interval_ms == DEFAULT_TICK_INTERVAL_MS == 10

    def test_custom_interval_is_clamped(self, qapp, clock):
        d = TimerDriver(tick_interval_ms=0, clock=clock)
        assert d.tick_interval_ms == 1
        d.tick_interval_ms = 200
        assert d.tick_interval_ms == 200

    def test_not_ticking_when_idle(self, driver):
        assert driver.state == RunState.IDLE
        assert not driver.is_ticking

    def test_start_begins_ticking(self, driver):
        driver.start()
        assert driver.is_ticking

    def test_pause_stops_ticking(self, driver):
        driver.start()
        driver.pause()
        assert driver.state == RunState.PAUSED
        assert not driver.is_ticking

    def test_resume_restarts_ticking(self, driver):
        driver.start()
        driver.pause()
        driver.resume()
        assert driver.is_ticking

    @pytest.mark.parametrize("action", ["reset", "switch"])
    def test_reset_and_switch_stop_ticking(self, driver, action):
        driver.start()
        if action == "reset":
            driver.reset()
        else:
            driver.switch_mode(Mode.LONG_BREAK)
        assert driver.state == RunState.IDLE
        assert not driver.is_ticking

    def test_expiry_stops_ticking(self, driver, clock):
        driver.start()
        clock.advance(1500)
        driver._on_tick()
        assert driver.state == RunState.IDLE
        assert driver.remaining == 0
        assert not driver.is_ticking


# ═══════════════════════════════════════════════════════════════════════════
#  CONTROLS
# ═══════════════════════════════════════════════════════════════════════════


class TestToggle:

    def test_toggle_cycles_start_pause_resume(self, driver, clock):
        driver.toggle()
        assert driver.state == RunState.RUNNING

        clock.advance(4)
        driver._on_tick()
        driver.toggle()
        assert driver.state == RunState.PAUSED
        assert driver.remaining == pytest.approx(1496)

        driver.toggle()
        assert driver.state == RunState.RUNNING
        assert driver.remaining == pytest.approx(1496)

    def test_toggle_after_expiry_starts_fresh(self, driver, clock):
        driver.switch_mode(Mode.SHORT_BREAK)
        driver.start()
        clock.advance(400)
        driver._on_tick()
        assert driver.remaining == 0

        driver.toggle()
        assert driver.state == RunState.RUNNING
        assert driver.remaining == 300


# ═══════════════════════════════════════════════════════════════════════════
#  SIGNALS
# ═══════════════════════════════════════════════════════════════════════════


class TestSignals:

    def test_state_changed_fires_on_transitions(self, driver):
        c = SignalCollector()
        driver.state_changed.connect(c)

        driver.start()
        driver.pause()
        driver.resume()
        driver.reset()
        assert c.items == [
            RunState.RUNNING, RunState.PAUSED, RunState.RUNNING, RunState.IDLE,
        ]

    def test_state_changed_silent_without_transition(self, driver):
        c = SignalCollector()
        driver.state_changed.connect(c)
        driver.pause()  # idle stays idle
        driver.reset()
        assert len(c) == 0

    def test_remaining_changed_on_tick(self, driver, clock):
        c = SignalCollector()
        driver.remaining_changed.connect(c)

        driver.start()
        assert len(c) == 0  # already at full duration
        clock.advance(1.5)
        driver._on_tick()
        assert c.last == pytest.approx(1498.5)

    def test_remaining_changed_on_switch(self, driver):
        c = SignalCollector()
        driver.remaining_changed.connect(c)
        driver.switch_mode(Mode.LONG_BREAK)
        assert c.last == 900

    def test_mode_changed(self, driver):
        c = SignalCollector()
        driver.mode_changed.connect(c)

        driver.switch_mode(Mode.SHORT_BREAK)
        driver.switch_mode(Mode.SHORT_BREAK)  # same mode, no signal
        driver.switch_mode(Mode.WORK)
        assert c.items == [Mode.SHORT_BREAK, Mode.WORK]

    def test_expired_fires_once_with_mode(self, driver, clock):
        c = SignalCollector()
        driver.expired.connect(c)

        driver.switch_mode(Mode.SHORT_BREAK)
        driver.start()
        clock.advance(299)
        driver._on_tick()
        assert len(c) == 0
        clock.advance(5)
        driver._on_tick()
        driver._on_tick()  # stray tick after expiry
        assert c.items == [Mode.SHORT_BREAK]

    def test_reset_does_not_count_as_expiry(self, driver):
        c = SignalCollector()
        driver.expired.connect(c)
        driver.start()
        driver.reset()
        assert len(c) == 0

    def test_generic_apply(self, driver, clock):
        driver.start()
        clock.advance(10)
        driver.apply(Tick())
        assert driver.controller.remaining() == pytest.approx(1490)
