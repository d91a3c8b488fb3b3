"""Timestamp formatting for the document metadata and submitted-on line."""

from __future__ import annotations

from datetime import datetime

__all__ = ["format_creation_date", "format_submitted_on", "format_clock_time"]

# Fixed English abbreviations; strftime("%b") follows the process locale.
_MONTH_ABBR: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def format_creation_date(ts: datetime) -> str:
    """Return ``ts`` as ``DD/MM/YYYY``."""

    return f"{ts.day:02d}/{ts.month:02d}/{ts.year:04d}"


def format_clock_time(ts: datetime) -> str:
    """Return ``ts`` on a 12-hour clock such as ``9:05am`` or ``12:30pm``."""

    hour = ts.hour % 12 or 12
    suffix = "am" if ts.hour < 12 else "pm"
    return f"{hour}:{ts.minute:02d}{suffix}"


def format_submitted_on(ts: datetime) -> str:
    """Return the human readable submission line, e.g.
    ``Submitted on 03 Mar 2019 at 2:15pm``."""

    day = f"{ts.day:02d} {_MONTH_ABBR[ts.month - 1]} {ts.year:04d}"
    return f"Submitted on {day} at {format_clock_time(ts)}"
