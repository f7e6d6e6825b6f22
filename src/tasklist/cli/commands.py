# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_errors import TaskListError, UnknownCommand
from .render import render_projects

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)

HELP_MESSAGE = """Commands:
show
add project <project name>
add task <project name> <task description>
check <task ID>
uncheck <task ID>
deadline <task ID> <date>
today
help
quit"""

QUIT_COMMANDS = ("quit",)


def split_first_word(text: str) -> tuple[str, str]:
    """Split off the first whitespace-separated word; the rest keeps its inner spacing."""
    parts = text.split(maxsplit=1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()


class CommandRegistry:
    """
    Line-command registry used by connectors (show, add, check, ...).

    A line is split into a command name (first word, case-insensitive) and the
    rest of the line, which handlers parse themselves.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._usage: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        usage: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._usage[key] = usage
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def usage(self, name: str) -> str:
        return self._usage.get(name.lower(), name)

    def dispatch(self, state: AppState, line: str) -> str:
        """
        Run a command line and return its reply.

        Raises TaskListError subclasses (UnknownCommand included) untouched.
        """
        name, rest = split_first_word(line)
        handler = self._handlers.get(name.lower())
        if handler is None:
            raise UnknownCommand(name)
        return handler(state, rest)

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a raw line. Returns the reply text ("" when the command prints
        nothing), or None for a blank line. Errors are rendered as replies.
        """
        if not line.strip():
            return None
        try:
            return self.dispatch(state, line)
        except TaskListError as e:
            logger.debug("Command failed line=%r error=%s", line, type(e).__name__)
            return str(e)


registry = CommandRegistry()


def _usage_reply(name: str) -> str:
    return f"Usage: {registry.usage(name)}"


def cmd_help(state: AppState, args: str) -> str:
    return HELP_MESSAGE


def cmd_show(state: AppState, args: str) -> str:
    return render_projects(state.task_store.list_projects())


def cmd_today(state: AppState, args: str) -> str:
    today = state.clock.today()
    return render_projects(state.task_store.list_projects_due_today(today))


def cmd_add(state: AppState, args: str) -> str:
    """
    add project <name>
    add task <project> <description>
    """
    sub, rest = split_first_word(args)
    sub = sub.lower()

    if sub == "project":
        # One word, so the same name can be given to "add task".
        if len(rest.split()) != 1:
            return "Usage: add project <project name>"
        state.task_store.add_project(rest)
        logger.info("Project added name=%s", rest)
        return ""

    if sub == "task":
        project, description = split_first_word(rest)
        if not project or not description:
            return "Usage: add task <project name> <task description>"
        task_id = state.task_store.add_task(project, description)
        logger.info("Task added id=%s project=%s", task_id, project)
        return ""

    if not sub:
        return _usage_reply("add")
    raise UnknownCommand(f"add {sub}")


def cmd_check(state: AppState, args: str) -> str:
    if not args:
        return _usage_reply("check")
    state.task_store.check(args)
    logger.info("Task checked id=%s", args)
    return ""


def cmd_uncheck(state: AppState, args: str) -> str:
    if not args:
        return _usage_reply("uncheck")
    state.task_store.uncheck(args)
    logger.info("Task unchecked id=%s", args)
    return ""


def cmd_deadline(state: AppState, args: str) -> str:
    parts = args.split()
    if len(parts) != 2:
        return _usage_reply("deadline")
    task_id, date_string = parts
    state.task_store.set_deadline(task_id, date_string)
    logger.info("Deadline set id=%s date=%s", task_id, date_string)
    return ""


registry.register("show", cmd_show, usage="show")
registry.register(
    "add", cmd_add, usage="add project <project name> | add task <project name> <task description>"
)
registry.register("check", cmd_check, usage="check <task ID>")
registry.register("uncheck", cmd_uncheck, usage="uncheck <task ID>")
registry.register("deadline", cmd_deadline, usage="deadline <task ID> <date>")
registry.register("today", cmd_today, usage="today")
registry.register("help", cmd_help, usage="help", aliases=["?"])
