from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    rows: int
    cols: int
    strict_pairs: bool
    port: int
    debug: bool


def load_settings() -> Settings:
    """Reads settings from the environment; read on each call so tests can patch os.environ."""
    return Settings(
        rows=_env_int("LIANLIANKAN_ROWS", 8),
        cols=_env_int("LIANLIANKAN_COLS", 10),
        strict_pairs=_env_flag("LIANLIANKAN_STRICT_PAIRS", True),
        port=_env_int("PORT", 5000),
        debug=_env_flag("FLASK_DEBUG", _env_flag("DEBUG", False)),
    )
