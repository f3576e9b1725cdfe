"""
Trips component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.components.calendar import CalendarConfig, DateRangeSelection
from src.components.calendar import DEFAULT_CONFIG as DEFAULT_CALENDAR_CONFIG
from src.components.flow import TripFormConfig
from src.components.invite import InviteSet
from src.domain.entities import TripDetails, ValidationFailure

# --- Configuration ---


@dataclass(frozen=True)
class TripsConfig:
    """Trip configuration from rules."""

    form: TripFormConfig = field(default_factory=TripFormConfig)
    calendar: CalendarConfig = DEFAULT_CALENDAR_CONFIG
    headline_max_destination_length: int = 14
    headline_template: str = "{destination} - de {start_day} a {end_day} de {month}."


DEFAULT_CONFIG = TripsConfig()


# --- Input Models ---


@dataclass(frozen=True)
class CreateTripInput:
    """Everything the create form collected."""

    destination: str
    selection: DateRangeSelection
    invites: InviteSet = field(default_factory=InviteSet)


@dataclass(frozen=True)
class UpdateTripInput:
    trip_id: str
    destination: str
    selection: DateRangeSelection


@dataclass(frozen=True)
class ConfirmParticipantInput:
    participant_id: str
    name: str
    email: str


# --- Output Models ---


@dataclass(frozen=True)
class CreateTripOutput:
    """Output from trip creation."""

    trip_id: str | None = None
    error: ValidationFailure | None = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class TripOperationOutput:
    """Output from update and confirmation calls."""

    error: ValidationFailure | None = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class TripOverviewOutput:
    """A fetched trip with its one-line headline."""

    trip: TripDetails | None = None
    headline: str = ""
    error: ValidationFailure | None = None

    @property
    def success(self) -> bool:
        return self.error is None
