# src/tasklist/tasks/task_errors.py

"""
Errors raised by the task store and its value types.

Every error keeps the offending raw input in `.raw`, so the command layer can
render a message without knowing which operation failed.
"""

from __future__ import annotations


class TaskListError(Exception):
    """Base class for all user-facing task list errors."""

    message = "Task list error: {raw}"

    def __init__(self, raw: object = "") -> None:
        self.raw = raw
        super().__init__(self.message.format(raw=raw))

    def __str__(self) -> str:
        return self.args[0]


class InvalidIdentifier(TaskListError, ValueError):
    message = 'Invalid task ID "{raw}".'


class InvalidDate(TaskListError, ValueError):
    message = 'Invalid date "{raw}". Expected DD-MM-YYYY.'


class EmptyDescription(TaskListError, ValueError):
    message = "Task description must not be empty."


class ProjectNotFound(TaskListError, KeyError):
    message = 'Could not find a project with the name "{raw}".'


class TaskNotFound(TaskListError, LookupError):
    message = 'Task with ID "{raw}" not found.'


class UnknownCommand(TaskListError):
    # Raised by the command layer only; the store never sees raw command lines.
    message = 'Unknown command "{raw}".'
