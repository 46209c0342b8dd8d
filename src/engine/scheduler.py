"""
Tick scheduler — fixed-cadence loop driving the tick engine and autosave

Single-threaded and run-to-completion: every tick callback and every autosave
finishes before the next one starts, so the autosave always observes a settled
state and no locking is needed.

Timing:
- wall-clock time is read from a monotonic clock and accumulated
- one tick runs per full tick interval (16 ms by default)
- if more than max_catch_up_ticks are overdue in one iteration, the excess is
  dropped (logged) so a long stall cannot trigger an unbounded burst
- autosave fires once every autosave interval (10 s by default), between ticks

Clock and sleep are injectable so tests can drive time explicitly.
"""

import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Optional

from src.core.math.numerical_safeguards import validate_positive
from src.economy.constants import AUTOSAVE_INTERVAL_MS, TICK_INTERVAL_MS

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchedulerConfig:
    """
    Scheduler timing configuration.

    max_catch_up_ticks bounds the ticks run per loop iteration after a stall
    (250 ticks = 4 s of simulated time at the default interval).
    """

    tick_interval_ms: float = TICK_INTERVAL_MS
    autosave_interval_ms: float = AUTOSAVE_INTERVAL_MS
    max_catch_up_ticks: int = 250

    def __post_init__(self) -> None:
        validate_positive(self.tick_interval_ms, "tick_interval_ms")
        validate_positive(self.autosave_interval_ms, "autosave_interval_ms")
        if self.max_catch_up_ticks < 1:
            raise ValueError(
                f"max_catch_up_ticks must be >= 1, got {self.max_catch_up_ticks}"
            )


class TickScheduler:
    """Invokes on_tick at a fixed cadence and on_autosave at a coarser one."""

    def __init__(
        self,
        on_tick: Callable[[], object],
        on_autosave: Optional[Callable[[], object]] = None,
        config: Optional[SchedulerConfig] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Args:
            on_tick: called once per tick interval
            on_autosave: called once per autosave interval (optional)
            config: timing configuration
            clock: monotonic clock in seconds
            sleep: blocking sleep in seconds
        """
        self.on_tick = on_tick
        self.on_autosave = on_autosave
        self.config = config or SchedulerConfig()
        self._clock = clock
        self._sleep = sleep

        self._last_time: Optional[float] = None
        self._tick_backlog_ms = 0.0
        self._since_save_ms = 0.0
        self._running = False

        self.ticks_run = 0
        self.ticks_dropped = 0
        self.saves_run = 0

    @property
    def running(self) -> bool:
        return self._running

    def reset(self, now: Optional[float] = None) -> None:
        """Restart timing from `now` (default: current clock reading)."""
        self._last_time = self._clock() if now is None else now
        self._tick_backlog_ms = 0.0
        self._since_save_ms = 0.0

    def advance(self, now: Optional[float] = None) -> int:
        """
        Run every tick (and autosave) that came due since the last call.

        Args:
            now: clock reading in seconds (default: current clock reading)

        Returns:
            Number of ticks run
        """
        if now is None:
            now = self._clock()
        if self._last_time is None:
            self.reset(now)
            return 0

        elapsed_ms = max(0.0, (now - self._last_time) * 1000)
        self._last_time = now
        self._tick_backlog_ms += elapsed_ms
        self._since_save_ms += elapsed_ms

        interval = self.config.tick_interval_ms
        due = math.floor(self._tick_backlog_ms / interval)
        if due > self.config.max_catch_up_ticks:
            dropped = due - self.config.max_catch_up_ticks
            log.warning("dropping %d overdue ticks", dropped)
            self.ticks_dropped += dropped
            self._tick_backlog_ms -= dropped * interval
            due = self.config.max_catch_up_ticks

        for _ in range(due):
            self.on_tick()
            self._tick_backlog_ms -= interval
        self.ticks_run += due

        if self._since_save_ms >= self.config.autosave_interval_ms:
            self._since_save_ms %= self.config.autosave_interval_ms
            if self.on_autosave is not None:
                self.on_autosave()
                self.saves_run += 1

        return due

    def run(self, duration: Optional[float] = None) -> int:
        """
        Loop until stop() is called or `duration` seconds have elapsed.

        Returns:
            Number of ticks run by this call
        """
        start_ticks = self.ticks_run
        self.reset()
        started_at = self._last_time
        self._running = True
        log.info(
            "scheduler started (tick=%sms, autosave=%sms)",
            self.config.tick_interval_ms,
            self.config.autosave_interval_ms,
        )

        try:
            while self._running:
                now = self._clock()
                self.advance(now)
                if duration is not None and now - started_at >= duration:
                    break
                wait_ms = max(0.0, self.config.tick_interval_ms - self._tick_backlog_ms)
                self._sleep(wait_ms / 1000)
        finally:
            self._running = False
            log.info("scheduler stopped after %d ticks", self.ticks_run - start_ticks)

        return self.ticks_run - start_ticks

    def stop(self) -> None:
        """Stop the loop after the current iteration; nothing needs cancelling."""
        self._running = False
