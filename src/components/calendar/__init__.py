"""
Calendar component - Date range selection, marking, and formatting.
"""

from ._impl import (
    day_span,
    format_range,
    is_selectable,
    iter_days,
    marked_dates,
    month_label,
    select_day,
    short_label,
)
from .component import run_select_day
from .models import (
    DEFAULT_CONFIG,
    PT_BR_MONTHS,
    CalendarConfig,
    DateRangeSelection,
    SelectDayInput,
    SelectDayOutput,
)

__all__ = [
    # Entry points
    "run_select_day",
    # Functional core
    "select_day",
    "marked_dates",
    "format_range",
    "day_span",
    "is_selectable",
    "iter_days",
    "month_label",
    "short_label",
    # Models
    "CalendarConfig",
    "DEFAULT_CONFIG",
    "PT_BR_MONTHS",
    "DateRangeSelection",
    "SelectDayInput",
    "SelectDayOutput",
]
