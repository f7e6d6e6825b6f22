# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command layer.

Commands depend on Protocols instead of concrete implementations.
This keeps the clock and the store swappable and makes testing easier.
"""

from datetime import date
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Identifier, ProjectWithTasks


class Clock(Protocol):
    """Source of the current calendar date ("today" for the due query)."""
    def today(self) -> date: ...


class TaskRepo(Protocol):
    # Projects
    def add_project(self, name: str) -> None: ...
    def list_projects(self) -> list[ProjectWithTasks]: ...
    def list_projects_due_today(self, today: date | str) -> list[ProjectWithTasks]: ...

    # Tasks
    def add_task(self, project_name: str, description: str) -> Identifier: ...
    def set_done(self, id_string: str, done: bool) -> None: ...
    def check(self, id_string: str) -> None: ...
    def uncheck(self, id_string: str) -> None: ...
    def set_deadline(self, id_string: str, date_string: str) -> None: ...
    def count_tasks(self) -> int: ...
