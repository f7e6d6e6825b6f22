# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from tasklist.config import Settings


def test_settings_defaults(monkeypatch) -> None:
    for suffix in ("APP_NAME", "LOG_LEVEL", "LOG_FILE_ENABLED", "PROMPT", "CONSOLE_BANNER", "DATA_DIR"):
        monkeypatch.delenv(f"TASKLIST_{suffix}", raising=False)

    s = Settings.from_env()

    assert s.app_name == "tasklist"
    assert s.log_level == "WARNING"
    assert s.log_file_enabled is False
    assert s.prompt == "> "
    assert s.console_banner is True
    assert s.data_dir == Path(".local/tasklist")
    assert s.log_file_path == Path(".local/tasklist/tasklist.log")


def test_settings_from_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKLIST_APP_NAME", "todo")
    monkeypatch.setenv("TASKLIST_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKLIST_LOG_FILE_ENABLED", "yes")
    monkeypatch.setenv("TASKLIST_PROMPT", "tasks> ")
    monkeypatch.setenv("TASKLIST_CONSOLE_BANNER", "off")
    monkeypatch.setenv("TASKLIST_DATA_DIR", str(tmp_path))

    s = Settings.from_env()

    assert s.app_name == "todo"
    assert s.log_level == "DEBUG"
    assert s.log_file_enabled is True
    assert s.prompt == "tasks> "
    assert s.console_banner is False
    assert s.log_file_path == tmp_path / "todo.log"


def test_settings_bad_bool_falls_back(monkeypatch) -> None:
    monkeypatch.setenv("TASKLIST_CONSOLE_BANNER", "maybe")
    monkeypatch.setenv("TASKLIST_LOG_FILE_ENABLED", "")
    s = Settings.from_env()
    assert s.console_banner is True
    assert s.log_file_enabled is False
