"""Adapter exposing history records to a fuzzy-matching picker."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from histscope.environment import Environment
from histscope.render import render_label, render_preview
from histscope.storage.models import HistoryRecord, MatchRange


class PreviewKind(enum.Enum):
    TEXT = "text"
    ANSI = "ansi"


@dataclass(frozen=True)
class ItemPreview:
    """Preview text plus how the picker should treat it.

    ``ANSI`` text is already styled and must be displayed as is.
    """

    text: str
    kind: PreviewKind = PreviewKind.TEXT


@runtime_checkable
class MatchableItem(Protocol):
    """Interface a picker needs from a listed item."""

    def label(self) -> str: ...

    def preview(self) -> ItemPreview: ...

    def match_ranges(self) -> tuple[MatchRange]: ...


class HistoryItem:
    """Read-through view of a ``HistoryRecord`` for the picker."""

    __slots__ = ("record", "env")

    def __init__(self, record: HistoryRecord, env: Environment | None = None) -> None:
        self.record = record
        self.env = env

    def label(self) -> str:
        return render_label(self.record, env=self.env)

    def preview(self) -> ItemPreview:
        return ItemPreview(render_preview(self.record, env=self.env), PreviewKind.ANSI)

    def match_ranges(self) -> tuple[MatchRange]:
        return (self.record.match_range,)

    def __repr__(self) -> str:
        return f"HistoryItem(id={self.record.id})"
