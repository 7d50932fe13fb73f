from __future__ import annotations

import pytest

from trycmd import plugins
from trycmd.executors import executor_manager

from .helpers import RecordingExecutor


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch):
    """Start every test with no mode, no plugins and an empty executor registry."""

    monkeypatch.delenv("TRYCMD", raising=False)
    monkeypatch.delenv("TRYCMD_PLUGINS", raising=False)
    executor_manager.clear()
    plugins.reset()
    yield
    executor_manager.clear()
    plugins.reset()


@pytest.fixture
def recorder() -> RecordingExecutor:
    return RecordingExecutor()
