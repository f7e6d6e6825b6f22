# src/tasklist/cli/render.py

from __future__ import annotations

from collections.abc import Iterable

from ..tasks.task_models import ProjectWithTasks, Task

TASK_INDENT = "    "


def render_task(task: Task) -> str:
    mark = "x" if task.done else " "
    line = f"{TASK_INDENT}[{mark}] {task.id}: {task.description}"
    if task.deadline is not None:
        line += f" (due {task.deadline})"
    return line


def render_projects(projects: Iterable[ProjectWithTasks]) -> str:
    """
    Project name, then one indented line per task; projects separated by a blank line.
    """
    blocks: list[str] = []
    for name, tasks in projects:
        lines = [name]
        lines.extend(render_task(t) for t in tasks)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
