# src/tasklist/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from .ports import Clock, TaskRepo


@dataclass
class AppState:
    """
    Everything a connector needs to serve commands.

    Built once by cli.bootstrap and passed explicitly; there is no global store.
    """

    # Settings object (config.Settings, or a SimpleNamespace in tests).
    settings: Any

    task_store: TaskRepo
    clock: Clock

    # Serializes store mutations if more than one connector ever runs.
    lock: threading.Lock = field(default_factory=threading.Lock)
