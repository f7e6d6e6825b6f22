# src/tasklist/tasks/task_store.py

from __future__ import annotations

from datetime import date

from .task_errors import EmptyDescription, ProjectNotFound, TaskNotFound
from .task_models import Deadline, Identifier, ProjectName, ProjectWithTasks, Task


class TaskStore:
    """
    In-memory task store.

    Layout:
    - projects: name -> list of tasks, tasks kept in insertion order
    - last_id: counter behind generated identifiers (never decreases)

    Rules:
    - every operation validates its input before mutating anything,
      so a raised error leaves the store exactly as it was
    - no I/O and no logging here; callers render results and errors

    Not thread-safe: callers serialize mutations (see AppState.lock).
    """

    def __init__(self) -> None:
        self._projects: dict[ProjectName, list[Task]] = {}
        self._last_id = 0

    # ---- low-level helpers ----

    def _tasks_of(self, project_name: str) -> list[Task]:
        tasks = self._projects.get(ProjectName(project_name))
        if tasks is None:
            raise ProjectNotFound(project_name)
        return tasks

    @staticmethod
    def _clean_description(description: str | None) -> str:
        if not description or not description.strip():
            raise EmptyDescription(description or "")
        return description.strip()

    def _next_id(self) -> Identifier:
        self._last_id += 1
        return Identifier.from_counter(self._last_id)

    @staticmethod
    def _as_date(today: date | str) -> date:
        if isinstance(today, date):
            return today
        return Deadline.parse(today).day

    # ---- projects ----

    def add_project(self, name: str) -> None:
        # An existing project with the same name is replaced (its tasks become unreachable).
        self._projects[ProjectName(name)] = []

    def project_names(self) -> list[ProjectName]:
        return sorted(self._projects)

    def list_projects(self) -> list[ProjectWithTasks]:
        """All projects sorted by name, tasks in insertion order."""
        return [ProjectWithTasks(name, list(self._projects[name])) for name in self.project_names()]

    def list_projects_due_today(self, today: date | str) -> list[ProjectWithTasks]:
        """
        Same ordering as list_projects(), but each project keeps only tasks whose
        deadline is on or before `today`. Projects with no due tasks are still listed.
        """
        ref = self._as_date(today)
        return [
            ProjectWithTasks(name, [t for t in self._projects[name] if t.is_due(ref)])
            for name in self.project_names()
        ]

    # ---- tasks ----

    def count_tasks(self) -> int:
        return sum(len(tasks) for tasks in self._projects.values())

    def add_task(self, project_name: str, description: str) -> Identifier:
        tasks = self._tasks_of(project_name)
        text = self._clean_description(description)

        task_id = self._next_id()
        tasks.append(Task(id=task_id, description=text))
        return task_id

    def add_task_with_explicit_id(
        self, project_name: str, task_id: Identifier | str, description: str
    ) -> None:
        """
        Add a task under a caller-chosen identifier (imports, deterministic tests).

        The generated-id counter is neither advanced nor checked.
        """
        tasks = self._tasks_of(project_name)
        ident = task_id if isinstance(task_id, Identifier) else Identifier.parse(task_id)
        text = self._clean_description(description)

        tasks.append(Task(id=ident, description=text))

    def get_task(self, id_string: str) -> Task:
        ident = Identifier.parse(id_string)
        for tasks in self._projects.values():
            for task in tasks:
                if task.id == ident:
                    return task
        raise TaskNotFound(str(ident))

    def set_done(self, id_string: str, done: bool) -> None:
        task = self.get_task(id_string)
        task.done = done

    def check(self, id_string: str) -> None:
        self.set_done(id_string, True)

    def uncheck(self, id_string: str) -> None:
        self.set_done(id_string, False)

    def set_deadline(self, id_string: str, date_string: str) -> None:
        deadline = Deadline.parse(date_string)
        task = self.get_task(id_string)
        task.deadline = deadline
