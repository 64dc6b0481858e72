"""Domain value objects – instants and durations on the real and virtual timelines.

Durations are integral nanosecond tick counts held in a ``Decimal``. Arithmetic
runs in a context with every trap disabled so NaN / Infinity produced by a
non-finite rate flow through instead of raising.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_DOWN, Context, Decimal

NANOS_PER_SECOND = 1_000_000_000

# Wide enough for any tick count times the exact expansion of a float rate.
_ARITH = Context(prec=80, traps=[])


def check_rate(rate: float, *, strict: bool = False) -> float:
    """Return *rate* as a float; in strict mode reject NaN and infinities."""
    value = float(rate)
    if strict and not math.isfinite(value):
        raise ValueError(f"Invalid rate: {rate!r} (must be finite)")
    return value


@dataclass(frozen=True, order=True)
class Duration:
    """Signed elapsed time in nanosecond ticks."""

    ticks: Decimal

    @classmethod
    def of_nanoseconds(cls, ns: int) -> "Duration":
        return cls(ticks=Decimal(ns))

    @classmethod
    def of_seconds(cls, seconds: float | int | str) -> "Duration":
        exact = _ARITH.multiply(Decimal(seconds), Decimal(NANOS_PER_SECOND))
        return cls(ticks=_truncate(exact))

    @classmethod
    def zero(cls) -> "Duration":
        return cls(ticks=Decimal(0))

    def scaled(self, rate: float) -> "Duration":
        """Multiply by *rate* exactly, then truncate toward zero to whole ticks."""
        return Duration(ticks=_truncate(_ARITH.multiply(self.ticks, Decimal(rate))))

    def is_finite(self) -> bool:
        return self.ticks.is_finite()

    @property
    def nanoseconds(self) -> int:
        if not self.ticks.is_finite():
            raise ValueError(f"Duration is not finite: {self.ticks}")
        return int(self.ticks)

    @property
    def seconds(self) -> float:
        return float(_ARITH.divide(self.ticks, Decimal(NANOS_PER_SECOND)))

    def __add__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(ticks=_ARITH.add(self.ticks, other.ticks))

    def __sub__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(ticks=_ARITH.subtract(self.ticks, other.ticks))

    def __neg__(self) -> "Duration":
        return Duration(ticks=_ARITH.minus(self.ticks))

    def __str__(self) -> str:
        return f"{self.seconds:.9f}s"


@dataclass(frozen=True, order=True)
class Instant:
    """A reading of the monotonic real-time source, in nanoseconds since its epoch."""

    ns: int

    def since_epoch(self) -> Duration:
        return Duration.of_nanoseconds(self.ns)

    def __sub__(self, other: "Instant") -> Duration:
        if not isinstance(other, Instant):
            return NotImplemented
        return Duration.of_nanoseconds(self.ns - other.ns)


@dataclass(frozen=True, order=True)
class VirtualInstant:
    """A point on an adjustable clock's timeline.

    Shares its epoch with the real-time source but is not monotonic: a clock
    running at a zero or negative rate repeats or walks back its readings, and
    may report instants before the epoch.
    """

    since_epoch: Duration

    @classmethod
    def from_real(cls, instant: Instant) -> "VirtualInstant":
        return cls(since_epoch=instant.since_epoch())

    @property
    def seconds(self) -> float:
        return self.since_epoch.seconds

    def __add__(self, other: Duration) -> "VirtualInstant":
        if not isinstance(other, Duration):
            return NotImplemented
        return VirtualInstant(since_epoch=self.since_epoch + other)

    def __sub__(self, other):
        if isinstance(other, VirtualInstant):
            return self.since_epoch - other.since_epoch
        if isinstance(other, Duration):
            return VirtualInstant(since_epoch=self.since_epoch - other)
        return NotImplemented

    def __str__(self) -> str:
        return str(self.since_epoch)


@dataclass(frozen=True)
class SyncAnchor:
    """Real and virtual instants recorded together at the last rate change."""

    real: Instant
    virtual: VirtualInstant


def _truncate(value: Decimal) -> Decimal:
    return value.to_integral_value(rounding=ROUND_DOWN, context=_ARITH)
