"""
Flow component - Data models.

Step and overlay state shared by the create and edit trip forms.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.components.calendar import DateRangeSelection
from src.domain.entities import ActiveOverlay, FlowMode, TripStep, ValidationFailure

# --- Configuration ---


@dataclass(frozen=True)
class TripFormConfig:
    """Trip form configuration from rules."""

    min_destination_length: int = 4


DEFAULT_CONFIG = TripFormConfig()


# --- State ---


@dataclass(frozen=True)
class FlowState:
    """
    Position in a trip form.

    ``step`` is only tracked in create mode. Exactly one overlay is active;
    ``"none"`` means no overlay is shown.
    """

    mode: FlowMode
    step: TripStep | None = None
    overlay: ActiveOverlay = "none"


@dataclass(frozen=True)
class SubmissionState:
    """Whether a service call for the form is in flight."""

    submitting: bool = False


# --- Input / Output ---


@dataclass(frozen=True)
class TripFormSnapshot:
    """Form values the step guard inspects."""

    destination: str
    selection: DateRangeSelection


@dataclass(frozen=True)
class AdvanceOutput:
    """Result of pressing "continue" on the create form."""

    state: FlowState
    error: ValidationFailure | None = None
    ready_to_submit: bool = False

    @property
    def success(self) -> bool:
        return self.error is None
