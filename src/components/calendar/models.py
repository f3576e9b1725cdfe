"""
Calendar component - Data models.

Date-range selection state for the calendar picker.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from src.domain.entities import MarkStyle

PT_BR_MONTHS: tuple[str, ...] = (
    "jan", "fev", "mar", "abr", "mai", "jun",
    "jul", "ago", "set", "out", "nov", "dez",
)


# --- Configuration ---


@dataclass(frozen=True)
class CalendarConfig:
    """Label configuration from rules."""

    month_abbreviations: tuple[str, ...] = PT_BR_MONTHS
    date_joiner: str = " de "
    range_separator: str = " - "

    def __post_init__(self) -> None:
        if len(self.month_abbreviations) != 12:
            raise ValueError("month_abbreviations must hold 12 entries")


DEFAULT_CONFIG = CalendarConfig()


# --- Selection ---


@dataclass(frozen=True)
class DateRangeSelection:
    """
    Two-endpoint, possibly partial, date range.

    Both absent, start only, or start <= end.
    """

    starts_at: date | None = None
    ends_at: date | None = None

    def __post_init__(self) -> None:
        if self.ends_at is not None:
            if self.starts_at is None:
                raise ValueError("ends_at requires starts_at")
            if self.ends_at < self.starts_at:
                raise ValueError(
                    f"starts_at {self.starts_at} is after ends_at {self.ends_at}"
                )

    @property
    def is_empty(self) -> bool:
        return self.starts_at is None

    @property
    def is_complete(self) -> bool:
        return self.starts_at is not None and self.ends_at is not None


# --- Input / Output ---


@dataclass(frozen=True)
class SelectDayInput:
    """Input for picking a day on the calendar."""

    current: DateRangeSelection
    picked: date


@dataclass(frozen=True)
class SelectDayOutput:
    """Next selection plus everything the calendar needs to redraw."""

    selection: DateRangeSelection
    marked_dates: dict[str, MarkStyle] = field(default_factory=dict)
    display_text: str = ""
