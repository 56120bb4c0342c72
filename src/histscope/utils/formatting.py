"""Text formatting utilities for labels and previews."""

from __future__ import annotations

import logging
from datetime import datetime

logger = logging.getLogger(__name__)

# Bold white, so it can never be mistaken for a real value
NONE_TOKEN = "\x1b[37;1m<NONE>\x1b[0m"

BOLD = "\x1b[1m"
RESET = "\x1b[0m"

TIME_FORMAT = "%H:%M"

_DURATION_UNITS: list[tuple[int, str, str]] = [
    (31_557_600, "year", "years"),
    (2_630_016, "month", "months"),
    (86_400, "day", "days"),
    (3_600, "h", "h"),
    (60, "m", "m"),
    (1, "s", "s"),
]


def format_duration(seconds: int) -> str:
    """Format seconds to human-readable duration, e.g. ``2m 3s``."""
    remaining = max(int(seconds), 0)
    if remaining == 0:
        return "0s"

    parts: list[str] = []
    for size, singular, plural in _DURATION_UNITS:
        amount, remaining = divmod(remaining, size)
        if amount:
            parts.append(f"{amount}{singular if amount == 1 else plural}")
    return " ".join(parts)


def format_or_none(value: int | None) -> str:
    """Render an optional integer, using the placeholder for ``None``."""
    if value is None:
        return NONE_TOKEN
    return str(value)


def start_of_today(now: datetime | None = None) -> datetime:
    """Local midnight of the day containing ``now``."""
    now = now or datetime.now()
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def format_date(start: int, date_format: str, full: bool = False, now: datetime | None = None) -> str:
    """Format an epoch timestamp for display, in local time.

    Short form shows ``HH:MM`` for timestamps from today onwards and the
    configured date format otherwise. Full form always shows the date
    followed by the time.
    """
    try:
        started = datetime.fromtimestamp(start)
    except (OverflowError, OSError, ValueError) as e:
        logger.debug("Unrepresentable timestamp %r: %s", start, e)
        return str(start)

    if full:
        fmt = f"{date_format} {TIME_FORMAT}"
    elif started >= start_of_today(now):
        fmt = TIME_FORMAT
    else:
        fmt = date_format

    try:
        return started.strftime(fmt)
    except (TypeError, ValueError) as e:
        logger.debug("Invalid date format %r: %s", fmt, e)
        return str(start)


def format_row(name: str, value: str) -> str:
    """A bold, 20-column label followed by its value."""
    return f"{BOLD}{name:<20}{RESET}{value}\n"


def format_heading(text: str) -> str:
    return f"{BOLD}{text}{RESET}\n\n"
