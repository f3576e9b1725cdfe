"""
Trip request shaping and trip headline text.

Functional Core - pure business logic.
"""

from __future__ import annotations

from datetime import date

from src.components.calendar import DateRangeSelection, month_label
from src.components.invite import InviteSet
from src.domain.entities import (
    CreateTripRequest,
    ParticipantConfirmationRequest,
    UpdateTripRequest,
    ValidationFailure,
    to_instant,
)
from src.domain.validators import is_valid_email, normalize_email

from .models import DEFAULT_CONFIG, TripsConfig


def _require_dates(selection: DateRangeSelection) -> tuple[date, date]:
    if selection.starts_at is None or selection.ends_at is None:
        raise ValueError("Trip requests need both dates")
    return selection.starts_at, selection.ends_at


# --- Requests ---


def build_create_trip_request(
    destination: str,
    selection: DateRangeSelection,
    invites: InviteSet,
) -> CreateTripRequest:
    starts_at, ends_at = _require_dates(selection)
    return CreateTripRequest(
        destination=destination.strip(),
        starts_at=to_instant(starts_at),
        ends_at=to_instant(ends_at),
        emails_to_invite=list(invites.emails),
    )


def build_update_trip_request(
    trip_id: str,
    destination: str,
    selection: DateRangeSelection,
) -> UpdateTripRequest:
    starts_at, ends_at = _require_dates(selection)
    return UpdateTripRequest(
        id=trip_id,
        destination=destination.strip(),
        starts_at=to_instant(starts_at),
        ends_at=to_instant(ends_at),
    )


def check_participant_confirmation(name: str, email: str) -> ValidationFailure | None:
    if not name.strip():
        return ValidationFailure(
            code="invalid_format",
            message="Name is required",
            field="name",
        )

    if not is_valid_email(normalize_email(email)):
        return ValidationFailure(
            code="invalid_format",
            message="Invalid email address",
            field="email",
        )

    return None


def build_participant_confirmation(
    participant_id: str,
    name: str,
    email: str,
) -> ParticipantConfirmationRequest:
    return ParticipantConfirmationRequest(
        participant_id=participant_id,
        name=name.strip(),
        email=normalize_email(email),
    )


# --- Headline ---


def truncate_destination(destination: str, max_length: int) -> str:
    if len(destination) > max_length:
        return destination[:max_length] + "..."
    return destination


def format_trip_headline(
    destination: str,
    starts_at: date,
    ends_at: date,
    config: TripsConfig = DEFAULT_CONFIG,
) -> str:
    """One-line trip summary; the month shown is the end date's."""
    return config.headline_template.format(
        destination=truncate_destination(
            destination, config.headline_max_destination_length
        ),
        start_day=f"{starts_at.day:02d}",
        end_day=f"{ends_at.day:02d}",
        month=month_label(ends_at, config.calendar),
    )
