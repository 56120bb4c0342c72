"""Tests for CLI module."""

from __future__ import annotations

import json
from datetime import datetime

from typer.testing import CliRunner

from histscope.cli import app

runner = CliRunner()

RECORD = {
    "id": 1,
    "command": "ls -la",
    "start": int(datetime(2020, 1, 2, 9, 0).timestamp()),
    "exit_status": 0,
    "duration": 2,
    "count": 5,
    "session": 1,
    "host": "box",
    "dir": "/home",
}


class TestCli:
    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "histscope v" in result.output

    def test_label(self):
        stdin = json.dumps(RECORD) + "\n\n" + json.dumps({**RECORD, "id": 2, "command": "pwd"}) + "\n"
        result = runner.invoke(app, ["label"], input=stdin)
        assert result.exit_code == 0
        assert result.output.splitlines() == ["2020-01-02 ls -la", "2020-01-02 pwd"]

    def test_label_full(self):
        result = runner.invoke(app, ["label", "--full"], input=json.dumps(RECORD))
        assert result.exit_code == 0
        assert result.output.strip() == "2020-01-02 09:00 ls -la"

    def test_label_multiline_command_is_one_line(self):
        multi = {**RECORD, "command": "for f in *; do\n echo $f\ndone"}
        stdin = json.dumps(multi) + "\n" + json.dumps({**RECORD, "id": 2, "command": "ls"}) + "\n"
        result = runner.invoke(app, ["label"], input=stdin)
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "2020-01-02 for f in *; do\\n echo $f\\ndone",
            "2020-01-02 ls",
        ]

    def test_label_print0(self):
        multi = {**RECORD, "command": "for f in *; do\n echo $f\ndone"}
        stdin = json.dumps(multi) + "\n" + json.dumps({**RECORD, "id": 2, "command": "ls"}) + "\n"
        result = runner.invoke(app, ["label", "--print0"], input=stdin)
        assert result.exit_code == 0
        assert result.output.split("\0") == [
            "2020-01-02 for f in *; do\n echo $f\ndone",
            "2020-01-02 ls",
            "",
        ]

    def test_label_bad_record(self):
        result = runner.invoke(app, ["label"], input="{not json}\n")
        assert result.exit_code == 1

    def test_preview(self, monkeypatch):
        monkeypatch.setenv("HISTSCOPE_HIGHLIGHTER", "")
        result = runner.invoke(app, ["preview"], input=json.dumps(RECORD))
        assert result.exit_code == 0
        assert "Details for 1" in result.output
        assert result.output.rstrip("\n").endswith("ls -la")

    def test_preview_needs_one_record(self):
        result = runner.invoke(app, ["preview"], input="")
        assert result.exit_code == 1

    def test_title(self, monkeypatch):
        monkeypatch.setenv("HISTSCOPE_HOST", "box")
        result = runner.invoke(app, ["title", "--scope", "machine"])
        assert result.exit_code == 0
        assert result.output.startswith("Machine location history box")

    def test_title_unknown_scope(self):
        result = runner.invoke(app, ["title", "--scope", "galaxy"])
        assert result.exit_code == 1

    def test_config_show(self):
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "display.date_format" in result.output

    def test_config_set(self):
        from histscope.config import load_config

        result = runner.invoke(app, ["config", "display.highlight_timeout", "9"])
        assert result.exit_code == 0
        assert load_config().display.highlight_timeout == 9

    def test_config_bad_key(self):
        result = runner.invoke(app, ["config", "display.colour", "red"])
        assert result.exit_code == 1

    def test_config_bad_int(self):
        result = runner.invoke(app, ["config", "display.highlight_timeout", "soon"])
        assert result.exit_code == 1
