"""Infrastructure: monotonic time source and real sleeper."""

from __future__ import annotations

import time

from warpclock.application.ports import Sleeper as SleeperPort
from warpclock.application.ports import TimeSource as TimeSourcePort
from warpclock.domain.value_objects import Instant


class MonotonicTimeSource(TimeSourcePort):
    """Real monotonic time (``time.monotonic_ns``)."""

    def now(self) -> Instant:
        return Instant(ns=time.monotonic_ns())


class ThreadSleeper(SleeperPort):
    """Blocks the calling thread with ``time.sleep``."""

    def sleep(self, seconds: float) -> None:
        time.sleep(max(0.0, seconds))
