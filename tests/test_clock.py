"""
Tests for the game clock.
"""

import pytest

from snake_arcade.game.clock import SimulatedClock


class TestSimulatedClock:

    def test_fires_at_fixed_rate(self):
        clock = SimulatedClock()
        ticks = []

        clock.start(100, lambda: ticks.append(clock.now_ms))
        fired = clock.advance(350)

        assert fired == 3
        assert ticks == [100, 200, 300]
        assert clock.now_ms == 350

    def test_partial_advances_accumulate(self):
        clock = SimulatedClock()
        ticks = []

        clock.start(100, lambda: ticks.append(clock.now_ms))
        clock.advance(60)
        clock.advance(60)

        assert ticks == [100]

    def test_not_running_until_started(self):
        clock = SimulatedClock()

        assert clock.is_running is False
        assert clock.interval_ms is None
        assert clock.advance(1000) == 0

    def test_stop(self):
        clock = SimulatedClock()
        ticks = []

        clock.start(100, lambda: ticks.append(1))
        clock.advance(100)
        clock.stop()
        clock.advance(1000)

        assert ticks == [1]
        assert clock.is_running is False

    def test_stop_from_inside_tick(self):
        clock = SimulatedClock()
        ticks = []

        def on_tick():
            ticks.append(clock.now_ms)
            clock.stop()

        clock.start(100, on_tick)
        clock.advance(1000)

        assert ticks == [100]

    def test_restart_from_inside_tick_keeps_one_chain(self):
        clock = SimulatedClock()
        ticks = []

        def on_tick():
            ticks.append(clock.now_ms)
            if len(ticks) == 1:
                clock.restart(50, on_tick)

        clock.start(100, on_tick)
        clock.advance(250)

        assert ticks == [100, 150, 200, 250]
        assert clock.interval_ms == 50

    def test_start_replaces_running_chain(self):
        clock = SimulatedClock()
        first, second = [], []

        old_token = clock.start(100, lambda: first.append(1))
        new_token = clock.start(40, lambda: second.append(1))
        clock.advance(200)

        assert first == []
        assert second == [1] * 5
        assert old_token.cancelled is True
        assert new_token.generation == old_token.generation + 1

    def test_stale_token_does_not_fire(self):
        clock = SimulatedClock()
        ticks = []

        old_token = clock.start(100, lambda: ticks.append("old"))
        clock.restart(100, lambda: ticks.append("new"))

        assert clock._fire(old_token) is False
        assert ticks == []

    @pytest.mark.parametrize("interval", [0, -5])
    def test_rejects_non_positive_interval(self, interval):
        clock = SimulatedClock()

        with pytest.raises(ValueError):
            clock.start(interval, lambda: None)

    def test_stop_when_stopped_is_harmless(self):
        clock = SimulatedClock()

        clock.stop()

        assert clock.token is None
