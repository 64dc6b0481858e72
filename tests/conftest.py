"""Shared test fixtures and test doubles for warpclock tests."""

from __future__ import annotations

from typing import Any

import pytest

from warpclock.application.ports import Logger, Sleeper, TimeSource
from warpclock.domain.value_objects import NANOS_PER_SECOND, Instant

# Arbitrary non-zero start so epoch-relative mistakes show up.
T0_NS = 1_000 * NANOS_PER_SECOND


class FakeTimeSource(TimeSource):
    """Manually driven monotonic source (time only moves on advance())."""

    def __init__(self, start_ns: int = T0_NS) -> None:
        self._ns = start_ns
        self.reads = 0

    def now(self) -> Instant:
        self.reads += 1
        return Instant(ns=self._ns)

    def advance(self, seconds: float) -> None:
        assert seconds >= 0, "monotonic source cannot go backward"
        self._ns += round(seconds * NANOS_PER_SECOND)

    def advance_ns(self, ns: int) -> None:
        assert ns >= 0, "monotonic source cannot go backward"
        self._ns += ns


class FakeSleeper(Sleeper):
    """Sleeper that advances a FakeTimeSource instead of blocking."""

    def __init__(self, source: FakeTimeSource) -> None:
        self._source = source
        self.calls: list[float] = []

    def sleep(self, seconds: float) -> None:
        self.calls.append(seconds)
        self._source.advance(seconds)


class RecordingLogger(Logger):
    """Logger that keeps (level, msg, extras) tuples."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict[str, Any]]] = []

    def info(self, msg: str, **kw: Any) -> None:
        self.records.append(("info", msg, kw))

    def warn(self, msg: str, **kw: Any) -> None:
        self.records.append(("warn", msg, kw))

    def error(self, msg: str, **kw: Any) -> None:
        self.records.append(("error", msg, kw))

    def debug(self, msg: str, **kw: Any) -> None:
        self.records.append(("debug", msg, kw))

    def levels(self) -> list[str]:
        return [r[0] for r in self.records]


@pytest.fixture
def source():
    return FakeTimeSource()


@pytest.fixture
def sleeper(source):
    return FakeSleeper(source)


@pytest.fixture
def logger():
    return RecordingLogger()
