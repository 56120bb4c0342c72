"""Accessors for the values the renderers and title depend on.

Configured values (date format, highlighter) come from the loaded
``AppConfig``. Runtime values (session, directory, host, focus overrides)
are read from the process environment on every call so a long-running
picker sees the current state.
"""

from __future__ import annotations

import os
import socket

from histscope.config import AppConfig, get_config

SESSION_ENV = "HISTSCOPE_SESSION"
HOST_ENV = "HISTSCOPE_HOST"
FOCUS_SESSION_ENV = "HISTSCOPE_FOCUS_SESSION"
FOCUS_DIR_ENV = "HISTSCOPE_FOCUS_DIR"


def _optional_env(name: str) -> str | None:
    value = os.environ.get(name)
    return value or None


class Environment:
    """Read-only view over configuration and process environment."""

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config if config is not None else get_config()

    def date_format(self) -> str:
        return self.config.display.date_format

    def highlighter_command(self) -> str:
        return self.config.display.highlighter

    def highlight_timeout(self) -> int:
        return self.config.display.highlight_timeout

    def current_session_id(self) -> str:
        # The shell that launched the picker is the session owner
        return os.environ.get(SESSION_ENV) or str(os.getppid())

    def current_directory(self) -> str:
        return os.getcwd()

    def current_host(self) -> str:
        return os.environ.get(HOST_ENV) or socket.gethostname()

    def focus_session(self) -> str | None:
        return _optional_env(FOCUS_SESSION_ENV)

    def focus_directory(self) -> str | None:
        return _optional_env(FOCUS_DIR_ENV)


def get_environment() -> Environment:
    """Environment backed by the global config singleton."""
    return Environment(get_config())
