from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture()
def make_machine() -> Callable[..., object]:
    from bfmachine.io import BytesInput, BytesOutput
    from bfmachine.machine import Machine

    def _make(source: str, *, input: bytes = b"", tape_size: int = 30000) -> Machine:
        return Machine(
            source, tape_size=tape_size, input=BytesInput(input), output=BytesOutput()
        )

    return _make


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BFMACHINE_TAPE_SIZE", raising=False)
    monkeypatch.delenv("BFMACHINE_LOG_LEVEL", raising=False)
