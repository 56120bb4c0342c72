"""Data models for histscope."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

# Width of the date/time column of a label, and where the command starts
FORMAT_DATE_LENGTH = 10
COMMAND_START = FORMAT_DATE_LENGTH + 1


@dataclass(frozen=True)
class MatchRange:
    """Span of a rendered label the matching engine should highlight.

    Offsets count characters of the label string, not bytes of its UTF-8
    encoding. ``end`` is exclusive; ``start == end`` is an empty span.
    """

    start: int = 0
    end: int = 0


@dataclass(frozen=True)
class HistoryRecord:
    """One executed shell command with its metadata."""

    id: int
    command: str
    start: int
    exit_status: int | None = None
    duration: int | None = None
    count: int = 1
    session: int = 0
    host: str = ""
    dir: str = ""
    match_range: MatchRange = MatchRange()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> HistoryRecord:
        """Build a record from a history-source mapping (e.g. a JSON object).

        Without an explicit ``match_range`` the range covers the command
        text as it appears in a label whose date fits the 10-column date
        field. Longer date formats push the command further right; use
        ``histscope.render.command_match_range`` to measure the real label.
        """
        command = str(data["command"])
        raw_range = data.get("match_range")
        if raw_range is None:
            match_range = MatchRange(COMMAND_START, COMMAND_START + len(command))
        else:
            start, end = raw_range
            match_range = MatchRange(int(start), int(end))

        return cls(
            id=int(data["id"]),
            command=command,
            start=int(data["start"]),
            exit_status=_optional_int(data.get("exit_status")),
            duration=_optional_int(data.get("duration")),
            count=int(data.get("count", 1)),
            session=int(data.get("session", 0)),
            host=str(data.get("host", "")),
            dir=str(data.get("dir", "")),
            match_range=match_range,
        )


def _optional_int(value: Any) -> int | None:
    return None if value is None else int(value)


@dataclass
class HighlightResult:
    """Outcome of running the external highlighter.

    ``text`` is always usable: the highlighted output on success, the raw
    command otherwise.
    """

    text: str
    highlighted: bool = False
    reason: str = ""
