# tests/test_console_connector.py

from __future__ import annotations

from tasklist.cli import commands
from tasklist.connectors.console_connector import run_console_loop

from .fakes import ScriptedConsole


def test_console_runs_commands_until_quit(state) -> None:
    console = ScriptedConsole(
        lines=[
            "add project home",
            "",
            "add task home buy milk",
            "show",
            "quit",
            "show",  # never reached
        ]
    )

    run_console_loop(state, read_line=console.read_line, write=console.write)

    assert console.written == ["home\n    [ ] 1: buy milk"]
    assert console.lines == ["show"]
    assert console.prompts == ["> "] * 5


def test_console_stops_on_eof(state) -> None:
    console = ScriptedConsole(lines=["add project home", "bogus"])

    run_console_loop(state, read_line=console.read_line, write=console.write)

    assert console.written == ['Unknown command "bogus".']


def test_console_banner(state) -> None:
    state.settings.console_banner = True
    console = ScriptedConsole(lines=["QUIT"])

    run_console_loop(state, read_line=console.read_line, write=console.write)

    assert console.written == ["Type 'help' for commands, 'quit' to exit."]


def test_console_keyboard_interrupt(state) -> None:
    written: list[str] = []

    def read_line(prompt: str) -> str:
        raise KeyboardInterrupt

    run_console_loop(state, read_line=read_line, write=written.append)

    assert written == [""]


def test_console_survives_crashing_command(state, monkeypatch, caplog) -> None:
    def boom(state, args):
        raise RuntimeError("boom")

    monkeypatch.setitem(commands.registry._handlers, "show", boom)
    console = ScriptedConsole(lines=["show", "help"])

    run_console_loop(state, read_line=console.read_line, write=console.write)

    assert console.written == ["Internal error while handling a command.", commands.HELP_MESSAGE]
    assert "Command handler crashed" in caplog.text
    assert not state.lock.locked()
