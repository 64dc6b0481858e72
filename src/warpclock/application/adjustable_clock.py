"""AdjustableClock – a clock whose rate relative to real time can change.

The clock keeps a sync anchor: a real-time reading paired with the virtual
instant that corresponded to it. Every read scales the real time elapsed since
the anchor by the current rate. Changing the rate first re-anchors at the
current moment, so the history of past rates folds into the anchor's virtual
value and readings stay continuous across the change. Subtracting two readings
of the same clock therefore gives the rate-weighted real time between them, no
matter how many rate changes happened in between.

Unlike :class:`~warpclock.infrastructure.time_source.MonotonicTimeSource`, the
clock is not a regular clock: ``now()`` needs an instance, readings may repeat
(rate 0) or decrease (rate < 0), and nothing here can drive sleep/wait helpers
that expect a stateless time source.

Not thread-safe. Callers sharing one clock across threads must serialize every
call to it.
"""

from __future__ import annotations

import math

from warpclock.application.ports import Logger, TimeSource
from warpclock.domain.value_objects import SyncAnchor, VirtualInstant, check_rate


class AdjustableClock:
    """Virtual clock running at an adjustable rate.

    A rate of 1 tracks real time, 0 freezes the clock, negative rates run it
    backward. Non-finite rates are accepted and poison later readings with
    NaN / infinite durations unless *strict* is set, in which case they raise
    ``ValueError``.

    Negative rates can carry the clock to instants before its epoch; making
    sure the timeline has room for that is up to the caller.
    """

    is_steady = False

    def __init__(
        self,
        rate: float = 1.0,
        *,
        source: TimeSource | None = None,
        strict: bool = False,
        logger: Logger | None = None,
    ) -> None:
        if source is None:
            from warpclock.infrastructure.time_source import MonotonicTimeSource

            source = MonotonicTimeSource()
        self._source = source
        self._strict = strict
        self._log = logger
        self._rate = self._accept(rate)

        real_now = self._source.now()
        self._anchor = SyncAnchor(real=real_now, virtual=VirtualInstant.from_real(real_now))

    @property
    def rate(self) -> float:
        return self._rate

    @property
    def anchor(self) -> SyncAnchor:
        return self._anchor

    @property
    def strict(self) -> bool:
        return self._strict

    def get_rate(self) -> float:
        return self._rate

    def now(self) -> VirtualInstant:
        """Current virtual instant. Reads the source once and mutates nothing."""
        return self._sync().virtual

    def set_rate(self, rate: float) -> None:
        """Re-anchor at the current moment, then switch to *rate*."""
        rate = self._accept(rate)
        self._anchor = self._sync()
        if self._log is not None:
            self._log.debug(
                "Clock rate changed",
                old=self._rate,
                new=rate,
                at=self._anchor.virtual,
            )
        self._rate = rate

    def _sync(self) -> SyncAnchor:
        real_now = self._source.now()
        elapsed = real_now - self._anchor.real
        return SyncAnchor(real=real_now, virtual=self._anchor.virtual + elapsed.scaled(self._rate))

    def _accept(self, rate: float) -> float:
        value = check_rate(rate, strict=self._strict)
        if not math.isfinite(value) and self._log is not None:
            self._log.warn("Non-finite clock rate; readings will not be finite", rate=value)
        return value

    def __repr__(self) -> str:
        return f"AdjustableClock(rate={self._rate!r}, anchor={self._anchor!r})"
