"""Application ports – abstract interfaces that infrastructure must implement.

The adjustable clock and the use cases depend only on these abstractions, never
on a concrete time source, so tests can drive time by hand.
"""

from __future__ import annotations

import abc
from typing import Any

from warpclock.domain.value_objects import Instant


# ---------------------------------------------------------------------------
# Real-time source
# ---------------------------------------------------------------------------
class TimeSource(abc.ABC):
    """Port: monotonic real-time source.

    Readings never decrease within a process and are unaffected by changes to
    the system wall clock.
    """

    @abc.abstractmethod
    def now(self) -> Instant:
        ...


# ---------------------------------------------------------------------------
# Sleeper
# ---------------------------------------------------------------------------
class Sleeper(abc.ABC):
    """Port: block for a span of real time."""

    @abc.abstractmethod
    def sleep(self, seconds: float) -> None:
        ...


# ---------------------------------------------------------------------------
# Logger
# ---------------------------------------------------------------------------
class Logger(abc.ABC):
    """Port: structured logging."""

    @abc.abstractmethod
    def info(self, msg: str, **kw: Any) -> None:
        ...

    @abc.abstractmethod
    def warn(self, msg: str, **kw: Any) -> None:
        ...

    @abc.abstractmethod
    def error(self, msg: str, **kw: Any) -> None:
        ...

    @abc.abstractmethod
    def debug(self, msg: str, **kw: Any) -> None:
        ...
