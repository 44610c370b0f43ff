from __future__ import annotations

import os

import pytest

from bfmachine import config
from bfmachine.config import MachineSettings, load_settings

_real_load_env = config.load_env


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "load_env", lambda: None)


def test_defaults() -> None:
    assert load_settings() == MachineSettings(tape_size=30000, log_level="WARNING")


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BFMACHINE_TAPE_SIZE", "64")
    monkeypatch.setenv("BFMACHINE_LOG_LEVEL", "debug")
    s = load_settings()
    assert s.tape_size == 64
    assert s.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["0", "-5", "lots"])
def test_bad_tape_size(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("BFMACHINE_TAPE_SIZE", raw)
    with pytest.raises(ValueError, match="BFMACHINE_TAPE_SIZE"):
        load_settings()


def test_bad_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BFMACHINE_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError, match="BFMACHINE_LOG_LEVEL"):
        load_settings()


def test_load_env_reads_project_dotenv(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    (tmp_path / ".env").write_text("BFMACHINE_TAPE_SIZE=128\n", encoding="utf-8")
    monkeypatch.setattr(config, "load_env", _real_load_env)
    monkeypatch.setattr(config, "repo_root", lambda: tmp_path)
    try:
        assert load_settings().tape_size == 128
    finally:
        os.environ.pop("BFMACHINE_TAPE_SIZE", None)
