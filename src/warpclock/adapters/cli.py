"""CLI adapter – parses arguments, dispatches to use cases, formats output."""

from __future__ import annotations

import argparse
import json
import sys
import textwrap
from typing import TYPE_CHECKING

from warpclock.adapters.command_spec import COMMAND_SPEC
from warpclock.adapters import presenters

if TYPE_CHECKING:
    from warpclock.application.use_cases.run_schedule import ScheduleSegment


# ---------------------------------------------------------------------------
# Help text
# ---------------------------------------------------------------------------
HELP_TEXT = textwrap.dedent("""\
    warpclock – a virtual clock that runs at an adjustable rate.
    The rate can be changed at any moment; elapsed times measured on the
    clock stay consistent across changes, even when it is frozen or reversed.

    Usage:
      warpclock <command> [options]

    Commands:
      help [cmd]      Show help (or help for a specific command)
      spec            Output machine-readable command spec (JSON)
      doctor          Check the time source and configuration
      demo            Run a clock through a rate schedule

    Examples:
      warpclock doctor
      warpclock demo
      warpclock demo --schedule=-1:5,2.5:5,0:5 --interval 0.5
      warpclock demo --schedule=10:3 --json

    Configuration (.env or environment):
      WARPCLOCK_RATE      initial rate for the demo clock (default 1.0)
      WARPCLOCK_INTERVAL  real seconds between demo readings (default 1.0)
      WARPCLOCK_STRICT    1 to reject NaN / infinite rates (default 0)
      WARPCLOCK_VERBOSE   1 to print debug log lines (default 0)

    For detailed help:  warpclock help <command>
""")

COMMAND_HELP: dict[str, str] = {
    "help": "Usage: warpclock help [<command>]\n\nShow general help or help for a specific command.",
    "spec": "Usage: warpclock spec\n\nOutputs the full machine-readable command spec as JSON.",
    "doctor": (
        "Usage: warpclock doctor [--json]\n\n"
        "Runs diagnostic checks:\n"
        "  - Platform monotonic clock (implementation, resolution, steadiness)\n"
        "  - Consecutive source readings never go backward\n"
        "  - Configured default rate is finite\n"
        "  --json   Output as JSON"
    ),
    "demo": (
        "Usage: warpclock demo [--schedule=RATE:STEPS,...] [--interval SECONDS] "
        "[--rate RATE] [--strict] [--json]\n\n"
        "Create a clock, then for each RATE:STEPS segment set the rate and take\n"
        "STEPS readings, INTERVAL real seconds apart. Prints every reading and\n"
        "the virtual time elapsed from start to finish.\n"
        "  --schedule  Segments, e.g. --schedule=-1:5,2.5:5,0:5 (the default).\n"
        "              Use the '=' form when the first rate is negative.\n"
        "  --interval  Real seconds between readings (default: WARPCLOCK_INTERVAL)\n"
        "  --rate      Rate before the first segment (default: WARPCLOCK_RATE)\n"
        "  --strict    Reject NaN / infinite rates\n"
        "  --json      Output as JSON (NaN / infinite values are written as null)"
    ),
}


# ---------------------------------------------------------------------------
# Parse schedule string like "-1:5,2.5:5" -> segments
# ---------------------------------------------------------------------------
def _parse_schedule(value: str | None) -> list[ScheduleSegment]:
    from warpclock.application.use_cases.run_schedule import DEFAULT_SCHEDULE, ScheduleSegment

    if value is None:
        return list(DEFAULT_SCHEDULE)
    segments: list[ScheduleSegment] = []
    for part in value.split(","):
        part = part.strip()
        if not part:
            continue
        rate, sep, steps = part.partition(":")
        if not sep:
            raise ValueError(f"Invalid schedule segment {part!r} (expected RATE:STEPS)")
        try:
            segments.append(ScheduleSegment(rate=float(rate), steps=int(steps)))
        except ValueError as exc:
            raise ValueError(f"Invalid schedule segment {part!r}: {exc}") from None
    if not segments:
        raise ValueError("Schedule is empty")
    return segments


# ---------------------------------------------------------------------------
# Build container
# ---------------------------------------------------------------------------
def _build_container() -> dict:
    """Build the dependency container from config."""
    from warpclock.infrastructure.config import config_flag, config_float, load_config
    from warpclock.infrastructure.logger import ConsoleLogger
    from warpclock.infrastructure.time_source import MonotonicTimeSource, ThreadSleeper

    config = load_config()
    return {
        "config": config,
        "rate": config_float(config, "WARPCLOCK_RATE"),
        "interval": config_float(config, "WARPCLOCK_INTERVAL"),
        "strict": config_flag(config, "WARPCLOCK_STRICT"),
        "logger": ConsoleLogger(verbose=config_flag(config, "WARPCLOCK_VERBOSE")),
        "source": MonotonicTimeSource(),
        "sleeper": ThreadSleeper(),
    }


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------
def cmd_help(args: argparse.Namespace) -> None:
    if args.command:
        text = COMMAND_HELP.get(args.command)
        if text:
            print(text)
        else:
            print(f"Unknown command: {args.command}")
            print(HELP_TEXT)
    else:
        print(HELP_TEXT)


def cmd_spec(_args: argparse.Namespace) -> None:
    print(json.dumps(COMMAND_SPEC, indent=2))


def cmd_doctor(args: argparse.Namespace) -> None:
    c = _build_container()
    from warpclock.application.use_cases.doctor_checks import DoctorChecks

    uc = DoctorChecks(
        source=c["source"],
        default_rate=c["rate"],
        strict=c["strict"],
        logger=c["logger"],
    )
    resp = uc.execute()
    presenters.present_doctor(resp, as_json=getattr(args, "json", False))


def cmd_demo(args: argparse.Namespace) -> None:
    c = _build_container()
    from warpclock.application.use_cases.run_schedule import RunSchedule, ScheduleRequest

    uc = RunSchedule(source=c["source"], sleeper=c["sleeper"], logger=c["logger"])
    req = ScheduleRequest(
        segments=_parse_schedule(args.schedule),
        interval=args.interval if args.interval is not None else c["interval"],
        initial_rate=args.rate if args.rate is not None else c["rate"],
        strict=args.strict or c["strict"],
    )
    resp = uc.execute(req)
    presenters.present_schedule(resp, as_json=args.json)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="warpclock",
        description="Adjustable-rate virtual clock",
        add_help=False,
    )
    sub = parser.add_subparsers(dest="command")

    # help
    p_help = sub.add_parser("help", add_help=False)
    p_help.add_argument("command", nargs="?", default=None)
    p_help.set_defaults(func=cmd_help)

    # spec
    p_spec = sub.add_parser("spec", add_help=False)
    p_spec.set_defaults(func=cmd_spec)

    # doctor
    p_doctor = sub.add_parser("doctor", add_help=False)
    p_doctor.add_argument("--json", action="store_true", default=False)
    p_doctor.set_defaults(func=cmd_doctor)

    # demo
    p_demo = sub.add_parser("demo", add_help=False)
    p_demo.add_argument("--schedule", type=str, default=None)
    p_demo.add_argument("--interval", type=float, default=None)
    p_demo.add_argument("--rate", type=float, default=None)
    p_demo.add_argument("--strict", action="store_true", default=False)
    p_demo.add_argument("--json", action="store_true", default=False)
    p_demo.set_defaults(func=cmd_demo)

    return parser


def run_cli(argv: list[str] | None = None) -> None:
    """Parse args and dispatch to the appropriate command handler."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        print(HELP_TEXT)
        return

    if hasattr(args, "func"):
        try:
            args.func(args)
        except Exception as exc:
            print(f"ERROR: {exc}", file=sys.stderr)
            sys.exit(1)
    else:
        print(HELP_TEXT)
