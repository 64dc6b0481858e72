"""Configuration loader – reads .env and environment variables."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

DEFAULTS: dict[str, str] = {
    "WARPCLOCK_RATE": "1.0",
    "WARPCLOCK_INTERVAL": "1.0",
    "WARPCLOCK_STRICT": "0",
    "WARPCLOCK_VERBOSE": "0",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def load_config(env_path: str | None = None) -> dict[str, str | None]:
    """Load configuration from .env file and environment variables.

    Values already present in the environment win over the .env file.
    """
    if env_path:
        load_dotenv(env_path)
    else:
        # Walk up to find .env
        cwd = Path.cwd()
        for d in [cwd, *cwd.parents]:
            candidate = d / ".env"
            if candidate.exists():
                load_dotenv(candidate)
                break

    return {key: os.environ.get(key, default) for key, default in DEFAULTS.items()}


def config_float(config: dict[str, str | None], key: str) -> float:
    raw = config.get(key)
    if raw is None:
        raw = DEFAULTS[key]
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{key} must be a number, got {raw!r}") from None


def config_flag(config: dict[str, str | None], key: str) -> bool:
    raw = (config.get(key) or "").strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ValueError(f"{key} must be a boolean flag (1/0, true/false), got {raw!r}")
