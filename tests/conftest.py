from __future__ import annotations

from typing import Sequence

import pytest

from machine_uuid.core.config import AppSettings
from machine_uuid.core.errors import ProcessLaunchError


class FakeRunner:
    """CommandRunner that returns canned stdout and records every call."""

    def __init__(self, stdout: bytes = b"", error: Exception | None = None) -> None:
        self.stdout = stdout
        self.error = error
        self.calls: list[list[str]] = []

    def run(self, program: str, args: Sequence[str]) -> bytes:
        self.calls.append([program, *args])
        if self.error is not None:
            raise self.error
        return self.stdout


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep local .env files and MACHINE_UUID_* variables out of the tests."""

    for name in ("MACHINE_UUID_PLATFORM", "MACHINE_UUID_COMMAND_TIMEOUT_SECONDS", "MACHINE_UUID_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def fake_runner():
    return FakeRunner


@pytest.fixture
def launch_error():
    return ProcessLaunchError("missing", FileNotFoundError(2, "No such file or directory", "missing"))
