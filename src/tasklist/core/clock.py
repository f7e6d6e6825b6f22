# src/tasklist/core/clock.py

from __future__ import annotations

from datetime import date


class SystemClock:
    """Clock backed by the local calendar date of the machine."""

    def today(self) -> date:
        return date.today()
