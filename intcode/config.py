from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from intcode.memory import DEFAULT_MAX_MEMORY


def repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def load_env() -> None:
    # A source checkout's own `.env` wins; an installed package (no
    # pyproject.toml beside it) searches upward from CWD instead.
    root = repo_root()
    root_env = root / ".env"
    if (root / "pyproject.toml").exists() and root_env.exists():
        env_path = str(root_env)
    else:
        env_path = find_dotenv(usecwd=True)
    if env_path:
        load_dotenv(env_path)


@dataclass(frozen=True)
class IntcodeSettings:
    max_steps: int | None
    max_memory: int
    log_level: str
    search_low: int
    search_high: int


def _optional_int_from_env(name: str) -> int | None:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def _int_from_env(name: str, default: int) -> int:
    value = _optional_int_from_env(name)
    return default if value is None else value


def load_settings() -> IntcodeSettings:
    load_env()
    max_steps = _optional_int_from_env("INTCODE_MAX_STEPS")
    if max_steps is not None and max_steps <= 0:
        raise ValueError(f"INTCODE_MAX_STEPS must be positive, got {max_steps}")
    max_memory = _int_from_env("INTCODE_MAX_MEMORY", DEFAULT_MAX_MEMORY)
    if max_memory <= 0:
        raise ValueError(f"INTCODE_MAX_MEMORY must be positive, got {max_memory}")
    low = _int_from_env("INTCODE_SEARCH_LOW", 0)
    high = _int_from_env("INTCODE_SEARCH_HIGH", 99)
    if low < 0 or low > high:
        raise ValueError(f"invalid search range: INTCODE_SEARCH_LOW={low} INTCODE_SEARCH_HIGH={high}")
    return IntcodeSettings(
        max_steps=max_steps,
        max_memory=max_memory,
        log_level=(os.getenv("INTCODE_LOG_LEVEL") or "WARNING").strip().upper(),
        search_low=low,
        search_high=high,
    )
