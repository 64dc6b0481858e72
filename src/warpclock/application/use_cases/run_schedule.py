"""Use-case: RunSchedule – drive an adjustable clock through a list of rates.

For each segment the clock's rate is set, then it is read ``steps`` times with
``interval`` real seconds between reads. The start and finish readings bracket
the whole run, so ``finish - start`` shows the rate-weighted elapsed time.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from warpclock.application.adjustable_clock import AdjustableClock
from warpclock.application.ports import Logger, Sleeper, TimeSource
from warpclock.domain.value_objects import Duration, VirtualInstant


@dataclass(frozen=True)
class ScheduleSegment:
    rate: float
    steps: int

    def __post_init__(self) -> None:
        if self.steps < 0:
            raise ValueError(f"Segment steps must be >= 0, got {self.steps}")


DEFAULT_SCHEDULE: tuple[ScheduleSegment, ...] = (
    ScheduleSegment(rate=-1.0, steps=5),
    ScheduleSegment(rate=2.5, steps=5),
    ScheduleSegment(rate=0.0, steps=5),
)


@dataclass
class ScheduleRequest:
    segments: list[ScheduleSegment] = field(default_factory=lambda: list(DEFAULT_SCHEDULE))
    interval: float = 1.0
    initial_rate: float = 1.0
    strict: bool = False


@dataclass(frozen=True)
class Reading:
    segment: int
    rate: float
    instant: VirtualInstant


@dataclass
class ScheduleResponse:
    readings: list[Reading]
    start: VirtualInstant
    finish: VirtualInstant

    @property
    def elapsed(self) -> Duration:
        return self.finish - self.start


class RunSchedule:
    """Run a rate schedule against a fresh clock and collect its readings."""

    def __init__(self, source: TimeSource, sleeper: Sleeper, logger: Logger) -> None:
        self._source = source
        self._sleeper = sleeper
        self._log = logger

    def execute(self, req: ScheduleRequest) -> ScheduleResponse:
        if req.interval < 0:
            raise ValueError(f"Interval must be >= 0, got {req.interval}")

        clock = AdjustableClock(
            req.initial_rate,
            source=self._source,
            strict=req.strict,
            logger=self._log,
        )
        start = clock.now()
        readings: list[Reading] = []

        for index, segment in enumerate(req.segments):
            clock.set_rate(segment.rate)
            self._log.info(f"Segment {index + 1}/{len(req.segments)}: {segment.rate}x real time")
            for _ in range(segment.steps):
                readings.append(Reading(segment=index, rate=segment.rate, instant=clock.now()))
                self._sleeper.sleep(req.interval)

        finish = clock.now()
        self._log.debug("Schedule finished", readings=len(readings), elapsed=finish - start)
        return ScheduleResponse(readings=readings, start=start, finish=finish)
