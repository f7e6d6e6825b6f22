# src/tasklist/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from functools import total_ordering
from typing import NamedTuple, NewType

from .task_errors import InvalidDate, InvalidIdentifier

ProjectName = NewType("ProjectName", str)

# Exactly what Identifier.from_counter emits: positive decimal, no leading zeros.
_IDENTIFIER_RE = re.compile(r"[1-9][0-9]*")

DEADLINE_FORMAT = "%d-%m-%Y"
_DEADLINE_RE = re.compile(r"[0-9]{2}-[0-9]{2}-[0-9]{4}")


@total_ordering
@dataclass(frozen=True, slots=True)
class Identifier:
    """
    Task identifier.

    Created by the store's counter (`from_counter`) or by parsing user input
    (`parse`). Both paths produce the same textual form, so whatever the store
    prints can be typed back in. Direct construction is checked against the
    same form, so an invalid value never exists.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _IDENTIFIER_RE.fullmatch(self.value):
            raise InvalidIdentifier(self.value)

    @classmethod
    def parse(cls, raw: str | None) -> Identifier:
        return cls(raw or "")

    @classmethod
    def from_counter(cls, n: int) -> Identifier:
        if n < 1:
            raise ValueError(f"counter value must be >= 1, got {n}")
        return cls(str(n))

    def __int__(self) -> int:
        return int(self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return int(self) < int(other)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Deadline:
    """A calendar date written as DD-MM-YYYY."""

    day: date

    @classmethod
    def parse(cls, raw: str | None) -> Deadline:
        text = raw or ""
        # strptime alone accepts "1-1-2024"; the regex pins the 2/2/4 digit layout.
        if not _DEADLINE_RE.fullmatch(text):
            raise InvalidDate(raw or "")
        try:
            parsed = datetime.strptime(text, DEADLINE_FORMAT).date()
        except ValueError as e:
            raise InvalidDate(raw or "") from e
        return cls(parsed)

    def is_due_on_or_before(self, today: date) -> bool:
        return self.day <= today

    def __str__(self) -> str:
        return self.day.strftime(DEADLINE_FORMAT)


@dataclass(slots=True)
class Task:
    id: Identifier
    description: str
    done: bool = False
    deadline: Deadline | None = None

    def is_due(self, today: date) -> bool:
        """Tasks without a deadline are never due."""
        return self.deadline is not None and self.deadline.is_due_on_or_before(today)


class ProjectWithTasks(NamedTuple):
    name: ProjectName
    tasks: list[Task]
