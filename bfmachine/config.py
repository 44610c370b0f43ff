from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from bfmachine.machine import DEFAULT_TAPE_SIZE


def repo_root() -> Path:
    # Project root is the directory that contains the `bfmachine/` package.
    return Path(__file__).resolve().parents[1]


def load_env() -> None:
    # Prefer a project-local `.env`; fall back to searching from CWD.
    root_env = repo_root() / ".env"
    env_path = str(root_env) if root_env.exists() else (find_dotenv(usecwd=True) or str(root_env))
    load_dotenv(env_path)


@dataclass(frozen=True)
class MachineSettings:
    tape_size: int = DEFAULT_TAPE_SIZE
    log_level: str = "WARNING"


def _int_env(name: str, default: int, *, minimum: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def _log_level_env(name: str, default: str) -> str:
    raw = (os.getenv(name) or "").strip().upper()
    if not raw:
        return default
    if not isinstance(logging.getLevelName(raw), int):
        raise ValueError(f"{name} must be a logging level name, got {raw!r}")
    return raw


def load_settings() -> MachineSettings:
    load_env()
    return MachineSettings(
        tape_size=_int_env("BFMACHINE_TAPE_SIZE", DEFAULT_TAPE_SIZE, minimum=1),
        log_level=_log_level_env("BFMACHINE_LOG_LEVEL", "WARNING"),
    )
