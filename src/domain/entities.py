from dataclasses import dataclass
from datetime import UTC, date, datetime, time
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# --- Enums / Literals ---
MarkStyle = Literal["single", "range_start", "range_middle", "range_end"]
TripStep = Literal["details", "invite_guests"]
ActiveOverlay = Literal[
    "none",
    "calendar_picker",
    "guest_picker",
    "update_trip_form",
    "confirm_attendance",
    "new_link_form",
]
FlowMode = Literal["create", "edit"]
ErrorCode = Literal[
    "empty_or_short_destination",
    "incomplete_date_range",
    "invalid_format",
    "duplicate",
    "invalid_url_or_empty_title",
    "network_failure",
]

OVERLAYS: tuple[ActiveOverlay, ...] = (
    "none",
    "calendar_picker",
    "guest_picker",
    "update_trip_form",
    "confirm_attendance",
    "new_link_form",
)

# --- Failures ---


@dataclass(frozen=True)
class ValidationFailure:
    """A recoverable, user-correctable failure."""

    code: ErrorCode
    message: str
    field: str | None = None


class TripServiceError(Exception):
    """Raised by service adapters when the remote trip service fails."""


# --- Calendar days ---


def parse_day(value: str) -> date:
    """Parse an ISO ``yyyy-mm-dd`` string."""
    return date.fromisoformat(value)


def to_iso(day: date) -> str:
    return day.isoformat()


def to_instant(day: date) -> datetime:
    """Widen a calendar day to midnight UTC."""
    return datetime.combine(day, time.min, tzinfo=UTC)


# --- Service payloads ---


class CreateTripRequest(BaseModel):
    destination: str
    starts_at: datetime
    ends_at: datetime
    emails_to_invite: list[str] = Field(default_factory=list)


class UpdateTripRequest(BaseModel):
    id: str
    destination: str
    starts_at: datetime
    ends_at: datetime


class CreateLinkRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    trip_id: str = Field(alias="tripId")
    title: str
    url: str


class ParticipantConfirmationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    participant_id: str = Field(alias="participantId")
    name: str
    email: str


class TripDetails(BaseModel):
    id: str
    destination: str
    starts_at: datetime
    ends_at: datetime
    is_confirmed: bool = False


class TripLink(BaseModel):
    id: str
    title: str
    url: str


class Participant(BaseModel):
    id: str
    name: str | None = None
    email: str
    is_confirmed: bool = False
