"""Use-case: DoctorChecks – validate the real-time source and the configuration."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field

from warpclock.application.ports import Logger, TimeSource


@dataclass
class CheckResult:
    name: str
    passed: bool
    message: str


@dataclass
class DoctorResponse:
    checks: list[CheckResult] = field(default_factory=list)

    @property
    def all_passed(self) -> bool:
        return all(c.passed for c in self.checks)


class DoctorChecks:
    """Run diagnostic checks on the clock environment."""

    def __init__(
        self,
        source: TimeSource,
        default_rate: float,
        strict: bool,
        logger: Logger,
    ) -> None:
        self._source = source
        self._rate = default_rate
        self._strict = strict
        self._log = logger

    def execute(self) -> DoctorResponse:
        checks: list[CheckResult] = []

        # 1. Platform monotonic clock
        checks.append(self._check_monotonic_info())

        # 2. Source readings never go backward
        checks.append(self._check_source_order())

        # 3. Configured default rate
        checks.append(self._check_rate())

        failed = [c.name for c in checks if not c.passed]
        if failed:
            self._log.warn(f"Doctor: {len(failed)} check(s) failed", failed=",".join(failed))
        return DoctorResponse(checks=checks)

    def _check_monotonic_info(self) -> CheckResult:
        info = time.get_clock_info("monotonic")
        details = f"{info.implementation}, resolution {info.resolution:g}s"
        if not info.monotonic or info.adjustable:
            return CheckResult("Monotonic source", False, f"Platform clock is not steady ({details})")
        return CheckResult("Monotonic source", True, details)

    def _check_source_order(self) -> CheckResult:
        first = self._source.now()
        second = self._source.now()
        if second < first:
            return CheckResult("Source order", False, f"Reading went backward: {first.ns} -> {second.ns}")
        return CheckResult("Source order", True, f"{second.ns - first.ns} ns between consecutive reads")

    def _check_rate(self) -> CheckResult:
        if math.isfinite(self._rate):
            return CheckResult("Default rate", True, f"{self._rate}x real time")
        if self._strict:
            return CheckResult("Default rate", False, f"{self._rate} is rejected in strict mode")
        return CheckResult("Default rate", False, f"{self._rate} is not finite; readings will be unusable")
