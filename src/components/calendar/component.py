"""
Calendar component - Date range picking for the trip forms.

Shell Layer - bundles the next selection with its derived marks and text.
"""

from __future__ import annotations

from ._impl import format_range, marked_dates, select_day
from .models import DEFAULT_CONFIG, CalendarConfig, SelectDayInput, SelectDayOutput


def run_select_day(
    input_data: SelectDayInput,
    config: CalendarConfig = DEFAULT_CONFIG,
) -> SelectDayOutput:
    """Apply a day pick and derive what the calendar shows next."""
    selection = select_day(input_data.current, input_data.picked)
    return SelectDayOutput(
        selection=selection,
        marked_dates=marked_dates(selection),
        display_text=format_range(selection, config),
    )
