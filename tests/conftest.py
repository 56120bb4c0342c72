"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime

import pytest

from histscope.config import AppConfig, DisplayConfig, LoggingConfig, reset_config
from histscope.environment import Environment
from histscope.storage.models import HistoryRecord

NOW = datetime(2024, 5, 10, 10, 0)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep tests away from the real home directory and shell variables."""
    import histscope.config as cfg_module

    for name in (
        "HISTSCOPE_DATE_FORMAT",
        "HISTSCOPE_HIGHLIGHTER",
        "HISTSCOPE_HIGHLIGHT_TIMEOUT",
        "HISTSCOPE_LOG_LEVEL",
        "HISTSCOPE_SESSION",
        "HISTSCOPE_HOST",
        "HISTSCOPE_FOCUS_SESSION",
        "HISTSCOPE_FOCUS_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(cfg_module, "CONFIG_DIR", tmp_path / ".histscope")
    monkeypatch.setattr(cfg_module, "CONFIG_FILE", tmp_path / ".histscope" / "config.toml")
    reset_config()
    yield
    reset_config()


@pytest.fixture
def app_config(tmp_path):
    """Create a test configuration with highlighting disabled."""
    return AppConfig(
        display=DisplayConfig(date_format="%Y-%m-%d", highlighter="", highlight_timeout=5),
        logging=LoggingConfig(level="DEBUG", file=str(tmp_path / "test.log")),
    )


@pytest.fixture
def env(app_config):
    return Environment(app_config)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def record():
    """The `ls -la` record, run today at 09:00."""
    return HistoryRecord(
        id=1,
        command="ls -la",
        start=int(datetime(2024, 5, 10, 9, 0).timestamp()),
        exit_status=0,
        duration=2,
        count=5,
        session=1,
        host="box",
        dir="/home",
    )
