"""Presenters – format use-case responses for terminal or JSON output."""

from __future__ import annotations

import json
import math
from typing import Any

from rich.console import Console
from rich.table import Table

from warpclock.application.use_cases.doctor_checks import DoctorResponse
from warpclock.application.use_cases.run_schedule import ScheduleResponse

console = Console()


def _json_out(data: Any) -> None:
    print(json.dumps(data, indent=2, default=str, allow_nan=False))


def _json_number(value: float) -> float | None:
    """NaN and infinities (from non-finite rates) become null."""
    return value if math.isfinite(value) else None


# ---------------------------------------------------------------------------
# Doctor
# ---------------------------------------------------------------------------
def present_doctor(resp: DoctorResponse, *, as_json: bool = False) -> None:
    if as_json:
        _json_out({
            "checks": [{"name": c.name, "passed": c.passed, "message": c.message} for c in resp.checks],
            "all_passed": resp.all_passed,
        })
        return

    table = Table(title="Doctor Checks", show_lines=True)
    table.add_column("Check", style="bold")
    table.add_column("Status")
    table.add_column("Details")
    for c in resp.checks:
        status = "[green]PASS[/green]" if c.passed else "[red]FAIL[/red]"
        table.add_row(c.name, status, c.message)
    console.print(table)
    if resp.all_passed:
        console.print("\n[bold green]All checks passed![/bold green]")
    else:
        console.print("\n[bold red]Some checks failed. See above.[/bold red]")


# ---------------------------------------------------------------------------
# Demo
# ---------------------------------------------------------------------------
def present_schedule(resp: ScheduleResponse, *, as_json: bool = False) -> None:
    if as_json:
        _json_out({
            "start": _json_number(resp.start.seconds),
            "finish": _json_number(resp.finish.seconds),
            "elapsed": _json_number(resp.elapsed.seconds),
            "readings": [
                {
                    "segment": r.segment,
                    "rate": _json_number(r.rate),
                    "seconds": _json_number(r.instant.seconds),
                }
                for r in resp.readings
            ],
        })
        return

    table = Table(show_lines=False)
    table.add_column("#", style="dim", width=4)
    table.add_column("Rate", justify="right")
    table.add_column("Since epoch", justify="right", style="cyan")
    table.add_column("Since start", justify="right")
    for i, r in enumerate(resp.readings, 1):
        table.add_row(
            str(i),
            f"{r.rate:g}x",
            f"{r.instant.seconds:.2f} s",
            f"{(r.instant - resp.start).seconds:+.2f} s",
        )
    console.print(table)
    console.print(f"\n[bold]From start to finish:[/bold] {resp.elapsed.seconds:.2f} seconds")
