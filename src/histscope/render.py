"""Label and preview rendering for history records."""

from __future__ import annotations

from datetime import datetime

from histscope.environment import Environment, get_environment
from histscope.services.highlight import highlight_command
from histscope.storage.models import FORMAT_DATE_LENGTH, HistoryRecord, MatchRange
from histscope.utils.formatting import (
    format_date,
    format_duration,
    format_heading,
    format_or_none,
    format_row,
)


def render_date(
    record: HistoryRecord,
    full: bool = False,
    env: Environment | None = None,
    now: datetime | None = None,
) -> str:
    env = env or get_environment()
    return format_date(record.start, env.date_format(), full=full, now=now)


def render_label(
    record: HistoryRecord,
    full: bool = False,
    env: Environment | None = None,
    now: datetime | None = None,
) -> str:
    """Searchable one-line label: padded date or time, then the command."""
    date = render_date(record, full=full, env=env, now=now)
    return f"{date:<{FORMAT_DATE_LENGTH}} {record.command}"


def command_match_range(
    record: HistoryRecord,
    full: bool = False,
    env: Environment | None = None,
    now: datetime | None = None,
) -> MatchRange:
    """Span of the command inside the label ``render_label`` produces."""
    date = render_date(record, full=full, env=env, now=now)
    start = max(len(date), FORMAT_DATE_LENGTH) + 1
    return MatchRange(start, start + len(record.command))


def render_duration(record: HistoryRecord) -> str:
    if record.duration is None:
        return format_or_none(None)
    return format_duration(record.duration)


def render_optional_int(value: int | None) -> str:
    return format_or_none(value)


def render_command(record: HistoryRecord, env: Environment | None = None) -> str:
    """The command text, highlighted when the highlighter is available."""
    env = env or get_environment()
    result = highlight_command(record.command, env.highlighter_command(), env.highlight_timeout())
    return result.text


def render_preview(
    record: HistoryRecord,
    env: Environment | None = None,
    now: datetime | None = None,
) -> str:
    """Multi-line ANSI detail view of a record, ending with its command."""
    env = env or get_environment()

    rows = [
        ("Runtime", render_duration(record)),
        ("Host", record.host),
        ("Executed", str(record.count)),
        ("Directory", record.dir),
        ("Exit Status", render_optional_int(record.exit_status)),
        ("Session", str(record.session)),
        ("Start Time", render_date(record, env=env, now=now)),
    ]

    parts = [format_heading(f"Details for {record.id}")]
    parts.extend(format_row(name, value) for name, value in rows)
    parts.append("\n")
    parts.append(format_heading("Command"))
    parts.append(render_command(record, env=env))
    return "".join(parts)
