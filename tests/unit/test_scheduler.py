"""
Tests for the Tick Scheduler

Time is driven explicitly through a fake clock; nothing sleeps for real.
"""

import pytest

from src.engine.scheduler import SchedulerConfig, TickScheduler


class FakeClock:
    """Monotonic clock advanced by sleep()."""

    def __init__(self, start: float = 0.0):
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def config():
    return SchedulerConfig(tick_interval_ms=250, autosave_interval_ms=1000, max_catch_up_ticks=8)


@pytest.fixture
def counters():
    return {"ticks": 0, "saves": 0}


@pytest.fixture
def scheduler(clock, config, counters):
    def on_tick():
        counters["ticks"] += 1

    def on_autosave():
        counters["saves"] += 1

    return TickScheduler(
        on_tick=on_tick,
        on_autosave=on_autosave,
        config=config,
        clock=clock,
        sleep=clock.sleep,
    )


# =============================================================================
# CONFIG
# =============================================================================


class TestSchedulerConfig:
    def test_defaults(self):
        config = SchedulerConfig()
        assert config.tick_interval_ms == 16
        assert config.autosave_interval_ms == 10_000
        assert config.max_catch_up_ticks == 250

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"tick_interval_ms": 0},
            {"tick_interval_ms": -16},
            {"autosave_interval_ms": 0},
            {"max_catch_up_ticks": 0},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            SchedulerConfig(**kwargs)


# =============================================================================
# ADVANCE
# =============================================================================


class TestAdvance:
    def test_first_call_only_starts_timing(self, scheduler, counters):
        assert scheduler.advance(5.0) == 0
        assert counters["ticks"] == 0

    def test_one_tick_per_interval(self, scheduler, counters):
        scheduler.advance(0.0)

        assert scheduler.advance(1.0) == 4
        assert counters["ticks"] == 4
        assert scheduler.ticks_run == 4

    def test_partial_interval_carries_over(self, scheduler, counters):
        scheduler.advance(0.0)
        assert scheduler.advance(0.125) == 0
        assert scheduler.advance(0.25) == 1
        assert scheduler.advance(0.375) == 0
        assert scheduler.advance(0.5) == 1
        assert counters["ticks"] == 2

    def test_catch_up_capped(self, scheduler, counters):
        scheduler.advance(0.0)

        assert scheduler.advance(10.0) == 8
        assert counters["ticks"] == 8
        assert scheduler.ticks_dropped == 32

        # backlog was discarded, not deferred
        assert scheduler.advance(10.25) == 1

    def test_clock_going_backwards_is_ignored(self, scheduler, counters):
        scheduler.advance(5.0)
        assert scheduler.advance(4.0) == 0
        assert scheduler.advance(4.25) == 1

    def test_autosave_interval(self, scheduler, counters):
        scheduler.advance(0.0)
        scheduler.advance(0.5)
        assert counters["saves"] == 0

        scheduler.advance(1.0)
        assert counters["saves"] == 1

        scheduler.advance(1.5)
        assert counters["saves"] == 1

        scheduler.advance(2.0)
        assert counters["saves"] == 2
        assert scheduler.saves_run == 2

    def test_autosave_once_per_advance(self, scheduler, counters):
        scheduler.advance(0.0)
        scheduler.advance(3.5)

        assert counters["saves"] == 1
        scheduler.advance(4.0)
        assert counters["saves"] == 2

    def test_no_autosave_callback(self, clock, config, counters):
        scheduler = TickScheduler(on_tick=lambda: None, config=config, clock=clock)
        scheduler.advance(0.0)
        scheduler.advance(2.0)

        assert scheduler.saves_run == 0

    def test_default_cadence(self, counters):
        scheduler = TickScheduler(
            on_tick=lambda: counters.__setitem__("ticks", counters["ticks"] + 1),
            on_autosave=lambda: counters.__setitem__("saves", counters["saves"] + 1),
        )
        scheduler.advance(100.0)
        scheduler.advance(110.0)

        # 625 ticks due, 250 run
        assert counters["ticks"] == 250
        assert scheduler.ticks_dropped == 375
        assert counters["saves"] == 1


# =============================================================================
# RUN / STOP
# =============================================================================


class TestRun:
    def test_run_for_duration(self, scheduler, clock, counters):
        ticks = scheduler.run(duration=1.0)

        assert ticks == 4
        assert counters["ticks"] == 4
        assert counters["saves"] == 1
        assert not scheduler.running
        assert all(s == pytest.approx(0.25) for s in clock.sleeps)

    def test_stop_from_callback(self, clock, config):
        calls = []

        def on_tick():
            calls.append(clock.now)
            if len(calls) == 3:
                scheduler.stop()

        scheduler = TickScheduler(on_tick=on_tick, config=config, clock=clock, sleep=clock.sleep)

        assert scheduler.run() == 3
        assert not scheduler.running

    def test_running_flag_during_run(self, clock, config):
        seen = []

        def on_tick():
            seen.append(scheduler.running)
            scheduler.stop()

        scheduler = TickScheduler(on_tick=on_tick, config=config, clock=clock, sleep=clock.sleep)
        scheduler.run()

        assert seen == [True]

    def test_callback_error_propagates_and_stops(self, clock, config):
        def on_tick():
            raise RuntimeError("boom")

        scheduler = TickScheduler(on_tick=on_tick, config=config, clock=clock, sleep=clock.sleep)

        with pytest.raises(RuntimeError, match="boom"):
            scheduler.run()
        assert not scheduler.running
