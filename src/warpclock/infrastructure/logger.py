"""Infrastructure: console logger."""

from __future__ import annotations

import sys
from typing import Any

from warpclock.application.ports import Logger as LoggerPort
from warpclock.domain.value_objects import Duration, VirtualInstant


def format_extra(value: Any) -> str:
    """Render a log extra: rates compactly, clock values in seconds."""
    if isinstance(value, float):
        return f"{value:g}"
    if isinstance(value, (Duration, VirtualInstant)):
        return str(value)
    return repr(value) if isinstance(value, str) and " " in value else str(value)


class ConsoleLogger(LoggerPort):
    """Stderr logger writing ``[LEVEL] msg (key=value ...)`` lines.

    Debug lines (rate changes, schedule summaries) only appear when verbose.
    """

    def __init__(self, verbose: bool = False) -> None:
        self._verbose = verbose

    def _emit(self, level: str, msg: str, **kw: Any) -> None:
        line = f"[{level}] {msg}"
        if kw:
            line += " (" + " ".join(f"{k}={format_extra(v)}" for k, v in kw.items()) + ")"
        print(line, file=sys.stderr)

    def info(self, msg: str, **kw: Any) -> None:
        self._emit("INFO", msg, **kw)

    def warn(self, msg: str, **kw: Any) -> None:
        self._emit("WARN", msg, **kw)

    def error(self, msg: str, **kw: Any) -> None:
        self._emit("ERROR", msg, **kw)

    def debug(self, msg: str, **kw: Any) -> None:
        if self._verbose:
            self._emit("DEBUG", msg, **kw)
