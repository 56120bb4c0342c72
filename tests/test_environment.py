"""Tests for environment accessors."""

from __future__ import annotations

import os
import socket

from histscope.environment import Environment, get_environment


class TestEnvironment:
    def test_configured_values(self, env):
        assert env.date_format() == "%Y-%m-%d"
        assert env.highlighter_command() == ""
        assert env.highlight_timeout() == 5

    def test_session_from_env(self, env, monkeypatch):
        monkeypatch.setenv("HISTSCOPE_SESSION", "12")
        assert env.current_session_id() == "12"

    def test_session_defaults_to_parent_pid(self, env):
        assert env.current_session_id() == str(os.getppid())

    def test_host(self, env, monkeypatch):
        assert env.current_host() == socket.gethostname()
        monkeypatch.setenv("HISTSCOPE_HOST", "box")
        assert env.current_host() == "box"

    def test_focus_unset(self, env):
        assert env.focus_session() is None
        assert env.focus_directory() is None

    def test_focus_empty_is_unset(self, env, monkeypatch):
        monkeypatch.setenv("HISTSCOPE_FOCUS_DIR", "")
        assert env.focus_directory() is None

    def test_focus_set(self, env, monkeypatch):
        monkeypatch.setenv("HISTSCOPE_FOCUS_SESSION", "3")
        monkeypatch.setenv("HISTSCOPE_FOCUS_DIR", "/tmp")
        assert env.focus_session() == "3"
        assert env.focus_directory() == "/tmp"

    def test_global_environment(self, monkeypatch):
        monkeypatch.setenv("HISTSCOPE_DATE_FORMAT", "%d/%m")
        assert get_environment().date_format() == "%d/%m"
