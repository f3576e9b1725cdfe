"""
Flow component - Step and overlay control for the trip forms.

Shell Layer - entry points for screen actions.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.components.calendar import DateRangeSelection
from src.domain.entities import ActiveOverlay, ValidationFailure

from ._impl import advance, can_edit_dates, check_update, close_overlay, open_overlay
from .models import DEFAULT_CONFIG, AdvanceOutput, FlowState, TripFormConfig, TripFormSnapshot

# --- Component Models (Shell Layer) ---


@dataclass(frozen=True)
class AdvanceInput:
    """Input for the create form's continue action."""

    state: FlowState
    destination: str
    selection: DateRangeSelection


@dataclass(frozen=True)
class OverlayInput:
    """Input for showing or hiding an overlay."""

    state: FlowState
    overlay: ActiveOverlay


@dataclass(frozen=True)
class UpdateGuardOutput:
    """Output from the edit form's submit guard."""

    error: ValidationFailure | None = None

    @property
    def success(self) -> bool:
        return self.error is None


# --- Shell Layer Functions ---


def run_advance(
    input_data: AdvanceInput,
    config: TripFormConfig = DEFAULT_CONFIG,
) -> AdvanceOutput:
    """Press continue on the create form."""
    return advance(
        input_data.state,
        TripFormSnapshot(
            destination=input_data.destination,
            selection=input_data.selection,
        ),
        config,
    )


def run_overlay(input_data: OverlayInput) -> FlowState:
    """Show the requested overlay, or hide all of them for ``"none"``."""
    if input_data.overlay == "none":
        return close_overlay(input_data.state)
    return open_overlay(input_data.state, input_data.overlay)


def run_open_calendar(state: FlowState) -> FlowState:
    """Open the date picker if the form currently allows editing dates."""
    if not can_edit_dates(state):
        return state
    return open_overlay(state, "calendar_picker")


def run_check_update(destination: str, selection: DateRangeSelection) -> UpdateGuardOutput:
    """Check the edit form before submitting."""
    return UpdateGuardOutput(error=check_update(destination, selection))
