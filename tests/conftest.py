# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.cli.bootstrap import create_initial_state
from tasklist.core.state import AppState
from tasklist.tasks.task_store import TaskStore

from .fakes import FakeClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the connectors.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="DEBUG",
        log_file_enabled=False,
        prompt="> ",
        console_banner=False,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def state(settings: SimpleNamespace, clock: FakeClock) -> AppState:
    """AppState wired through the real composition root, with a fake clock."""
    return create_initial_state(settings=settings, clock=clock)
