"""
Date range selection - pure calendar logic.

Handles day picks, calendar marks, and the short range text.

Key behaviors:
- A pick on an empty or completed range starts a new range
- A pick before the current start swaps it into the start position
- Marks cover every day of the range, across month and year boundaries
- Display text shows the month once when both days share it

Functional Core - pure business logic.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date, timedelta

from src.domain.entities import MarkStyle, to_iso

from .models import DEFAULT_CONFIG, CalendarConfig, DateRangeSelection

# --- Selection ---


def select_day(current: DateRangeSelection, picked: date) -> DateRangeSelection:
    """Return the selection that results from tapping ``picked``."""
    if current.starts_at is None or current.ends_at is not None:
        return DateRangeSelection(starts_at=picked)

    if picked < current.starts_at:
        return DateRangeSelection(starts_at=picked, ends_at=current.starts_at)

    return DateRangeSelection(starts_at=current.starts_at, ends_at=picked)


def is_selectable(day: date, today: date) -> bool:
    """The calendar never offers days before today."""
    return day >= today


# --- Marks ---


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every day from start to end inclusive."""
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)


def day_span(selection: DateRangeSelection) -> int:
    if selection.starts_at is None:
        return 0
    if selection.ends_at is None:
        return 1
    return (selection.ends_at - selection.starts_at).days + 1


def marked_dates(selection: DateRangeSelection) -> dict[str, MarkStyle]:
    """Map ISO date strings to their position in the selected range."""
    start = selection.starts_at
    if start is None:
        return {}

    end = selection.ends_at
    if end is None or end == start:
        return {to_iso(start): "single"}

    marks: dict[str, MarkStyle] = {}
    for day in iter_days(start, end):
        if day == start:
            marks[to_iso(day)] = "range_start"
        elif day == end:
            marks[to_iso(day)] = "range_end"
        else:
            marks[to_iso(day)] = "range_middle"
    return marks


# --- Labels ---


def month_label(day: date, config: CalendarConfig = DEFAULT_CONFIG) -> str:
    return config.month_abbreviations[day.month - 1]


def short_label(day: date, config: CalendarConfig = DEFAULT_CONFIG) -> str:
    """``DD`` + joiner + ``MMM``, e.g. ``10 de jun``."""
    return f"{day.day:02d}{config.date_joiner}{month_label(day, config)}"


def format_range(
    selection: DateRangeSelection,
    config: CalendarConfig = DEFAULT_CONFIG,
) -> str:
    start = selection.starts_at
    if start is None:
        return ""

    end = selection.ends_at
    if end is None:
        return short_label(start, config)

    if (start.year, start.month) == (end.year, end.month):
        head = f"{start.day:02d}"
    else:
        head = short_label(start, config)

    return f"{head}{config.range_separator}{short_label(end, config)}"
