# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings (or loads them once),
- wires the store and the clock into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.clock import SystemClock
from ..core.ports import Clock
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, clock: Clock | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and the clock injectable makes the app easier to test and
    avoids hidden global config reads. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    state = AppState(
        settings=settings,
        task_store=TaskStore(),
        clock=clock if clock is not None else SystemClock(),
    )
    logger.debug("AppState created clock=%s", type(state.clock).__name__)
    return state
