"""
FlowController - step and overlay state machines for the trip forms.

Create mode walks details -> invite_guests; edit mode has no steps.
Both modes share the overlay machine and the required-fields guard.

Functional Core - pure business logic.
"""

from __future__ import annotations

from dataclasses import replace

from src.components.calendar import DateRangeSelection
from src.domain.entities import OVERLAYS, ActiveOverlay, FlowMode, ValidationFailure
from src.domain.validators import check_destination, has_destination

from .models import (
    DEFAULT_CONFIG,
    AdvanceOutput,
    FlowState,
    SubmissionState,
    TripFormConfig,
    TripFormSnapshot,
)

# --- Guards ---


def check_update(
    destination: str,
    selection: DateRangeSelection,
) -> ValidationFailure | None:
    """Required fields: a destination and both dates."""
    if not has_destination(destination):
        return ValidationFailure(
            code="empty_or_short_destination",
            message="Destination is required",
            field="destination",
        )

    if not selection.is_complete:
        return ValidationFailure(
            code="incomplete_date_range",
            message="Both the departure and the return dates are required",
            field="dates",
        )

    return None


def can_submit_update(destination: str, selection: DateRangeSelection) -> bool:
    return check_update(destination, selection) is None


def check_trip_details(
    snapshot: TripFormSnapshot,
    config: TripFormConfig = DEFAULT_CONFIG,
) -> ValidationFailure | None:
    """Required fields first, then the minimum destination length."""
    failure = check_update(snapshot.destination, snapshot.selection)
    if failure is not None:
        return failure

    if not check_destination(snapshot.destination, config.min_destination_length):
        return ValidationFailure(
            code="empty_or_short_destination",
            message=(
                f"Destination must have at least "
                f"{config.min_destination_length} characters"
            ),
            field="destination",
        )

    return None


# --- Step machine ---


def new_flow(mode: FlowMode) -> FlowState:
    if mode == "create":
        return FlowState(mode="create", step="details")
    if mode == "edit":
        return FlowState(mode="edit")
    raise ValueError(f"Unknown flow mode: {mode}")


def advance(
    state: FlowState,
    snapshot: TripFormSnapshot,
    config: TripFormConfig = DEFAULT_CONFIG,
) -> AdvanceOutput:
    """
    Move the create form forward.

    From ``details`` a valid form moves to ``invite_guests``. From
    ``invite_guests`` the step stays and the form is ready to submit.
    A failure returns the state untouched.
    """
    if state.mode != "create":
        raise ValueError("advance is only defined for the create flow")

    failure = check_trip_details(snapshot, config)
    if failure is not None:
        return AdvanceOutput(state=state, error=failure)

    if state.step == "details":
        return AdvanceOutput(state=replace(state, step="invite_guests"))

    return AdvanceOutput(state=state, ready_to_submit=True)


def back(state: FlowState) -> FlowState:
    """Return from the guest step to edit place and dates."""
    if state.step == "invite_guests":
        return replace(state, step="details")
    return state


def can_edit_dates(state: FlowState) -> bool:
    return state.mode == "edit" or state.step == "details"


# --- Overlay machine ---


def open_overlay(state: FlowState, overlay: ActiveOverlay) -> FlowState:
    """Show ``overlay``, replacing whichever one was open."""
    if overlay not in OVERLAYS:
        raise ValueError(f"Unknown overlay: {overlay}")
    return replace(state, overlay=overlay)


def close_overlay(state: FlowState) -> FlowState:
    return replace(state, overlay="none")


# --- Submission flag ---


def begin_submission(state: SubmissionState) -> SubmissionState:
    """Apply before the service call starts."""
    return replace(state, submitting=True)


def end_submission(state: SubmissionState) -> SubmissionState:
    """Apply once the service call has finished, successfully or not."""
    return replace(state, submitting=False)
