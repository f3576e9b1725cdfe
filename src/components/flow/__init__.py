"""
Flow component - Step sequencing and single-overlay control for the trip forms.
"""

from ._impl import (
    advance,
    back,
    begin_submission,
    can_edit_dates,
    can_submit_update,
    check_trip_details,
    check_update,
    close_overlay,
    end_submission,
    new_flow,
    open_overlay,
)
from .component import (
    AdvanceInput,
    OverlayInput,
    UpdateGuardOutput,
    run_advance,
    run_check_update,
    run_open_calendar,
    run_overlay,
)
from .models import (
    DEFAULT_CONFIG,
    AdvanceOutput,
    FlowState,
    SubmissionState,
    TripFormConfig,
    TripFormSnapshot,
)

__all__ = [
    # Entry points
    "run_advance",
    "run_overlay",
    "run_open_calendar",
    "run_check_update",
    # Functional core
    "new_flow",
    "advance",
    "back",
    "can_edit_dates",
    "open_overlay",
    "close_overlay",
    "check_trip_details",
    "check_update",
    "can_submit_update",
    "begin_submission",
    "end_submission",
    # Models
    "FlowState",
    "SubmissionState",
    "TripFormConfig",
    "TripFormSnapshot",
    "DEFAULT_CONFIG",
    # Input / output models
    "AdvanceInput",
    "AdvanceOutput",
    "OverlayInput",
    "UpdateGuardOutput",
]
