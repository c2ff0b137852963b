import logging
import os
import subprocess
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

from timegrid.core.dates import now_iso, system_clock
from timegrid.core.settings import Settings, configure_logging


def test_settings_defaults(monkeypatch):
    for key in ("DEFAULT_TIMEZONE", "DEFAULT_WEEK_START", "STRICT_DATETIME_PARSING", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    s = Settings(_env_file=None)
    assert s.DEFAULT_TIMEZONE == "UTC"
    assert s.DEFAULT_WEEK_START == 0
    assert s.STRICT_DATETIME_PARSING is False
    assert s.LOG_LEVEL == "INFO"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("DEFAULT_TIMEZONE", "Europe/Warsaw")
    monkeypatch.setenv("DEFAULT_WEEK_START", "1")
    monkeypatch.setenv("STRICT_DATETIME_PARSING", "yes")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = Settings(_env_file=None)
    assert s.DEFAULT_TIMEZONE == "Europe/Warsaw"
    assert s.DEFAULT_WEEK_START == 1
    assert s.STRICT_DATETIME_PARSING is True
    assert s.LOG_LEVEL == "DEBUG"


def test_configure_logging_sets_level():
    log = configure_logging("debug")
    assert log.name == "timegrid"
    assert logging.getLogger().level == logging.DEBUG
    configure_logging("INFO")


def test_now_iso_with_clock():
    clock = lambda: datetime(2024, 6, 15, 14, 0, 5, 123456, tzinfo=timezone(timedelta(hours=2)))
    assert now_iso(clock) == "2024-06-15T12:00:05Z"


def test_system_clock_is_aware_utc():
    assert system_clock().utcoffset() == timedelta(0)


def _clean_env(root, **extra):
    env = {k: v for k, v in os.environ.items() if k not in {"ENV_FILE", "TIMEGRID_DOTENV_MARKER"}}
    env["PYTHONPATH"] = str(root)
    env.update(extra)
    return env


def test_import_does_not_load_dotenv_into_environ(tmp_path):
    (tmp_path / ".env").write_text("TIMEGRID_DOTENV_MARKER=leaked\n")
    root = Path(__file__).resolve().parents[1]
    out = subprocess.run(
        [sys.executable, "-c", "import os, timegrid; print(repr(os.environ.get('TIMEGRID_DOTENV_MARKER')))"],
        cwd=tmp_path,
        env=_clean_env(root),
        capture_output=True,
        text=True,
        check=True,
    ).stdout
    assert out.strip() == "None"


def test_settings_read_dotenv_without_touching_environ(tmp_path, monkeypatch):
    env_file = tmp_path / "timegrid.env"
    env_file.write_text("DEFAULT_WEEK_START=3\n")
    monkeypatch.delenv("DEFAULT_WEEK_START", raising=False)
    s = Settings(_env_file=str(env_file))
    assert s.DEFAULT_WEEK_START == 3
    assert "DEFAULT_WEEK_START" not in os.environ
