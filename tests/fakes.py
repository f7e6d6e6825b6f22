# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(slots=True)
class FakeClock:
    """
    Deterministic Clock for unit tests.

    - Returns a fixed date, adjustable between calls
    - Counts calls for assertions
    """

    current: date = date(2024, 1, 2)
    calls: int = 0

    def today(self) -> date:
        self.calls += 1
        return self.current


@dataclass(slots=True)
class ScriptedConsole:
    """
    Feeds lines to the console loop and records everything it writes.

    When the script runs out, raises EOFError like input() at end of stdin.
    """

    lines: list[str]
    written: list[str] = field(default_factory=list)
    prompts: list[str] = field(default_factory=list)

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def write(self, text: str) -> None:
        self.written.append(text)
