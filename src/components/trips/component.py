"""
Trips component - Trip creation, update, lookup, and attendance confirmation.

Shell Layer - handles I/O and error conversion.
"""

from __future__ import annotations

import logging

from src.components.flow import TripFormSnapshot, check_trip_details, check_update
from src.domain.entities import TripServiceError, ValidationFailure

from ._impl import (
    build_create_trip_request,
    build_participant_confirmation,
    build_update_trip_request,
    check_participant_confirmation,
    format_trip_headline,
)
from .models import (
    DEFAULT_CONFIG,
    ConfirmParticipantInput,
    CreateTripInput,
    CreateTripOutput,
    TripOperationOutput,
    TripOverviewOutput,
    TripsConfig,
    UpdateTripInput,
)
from .ports import ParticipantsServerPort, TripServerPort

logger = logging.getLogger(__name__)


def _network_failure(e: TripServiceError) -> ValidationFailure:
    return ValidationFailure(code="network_failure", message=str(e) or "Service unavailable")


def run_create_trip(
    input_data: CreateTripInput,
    server: TripServerPort,
    config: TripsConfig = DEFAULT_CONFIG,
) -> CreateTripOutput:
    """Create a trip from a completed create form."""
    failure = check_trip_details(
        TripFormSnapshot(destination=input_data.destination, selection=input_data.selection),
        config.form,
    )
    if failure is not None:
        return CreateTripOutput(error=failure)

    request = build_create_trip_request(
        input_data.destination, input_data.selection, input_data.invites
    )
    try:
        trip_id = server.create(request)
    except TripServiceError as e:
        logger.warning("Trip creation failed: %s", e)
        return CreateTripOutput(error=_network_failure(e))

    logger.info(
        "Trip %s created with %d invite(s)", trip_id, len(request.emails_to_invite)
    )
    return CreateTripOutput(trip_id=trip_id)


def run_update_trip(
    input_data: UpdateTripInput,
    server: TripServerPort,
) -> TripOperationOutput:
    """Update destination and dates of an existing trip."""
    failure = check_update(input_data.destination, input_data.selection)
    if failure is not None:
        return TripOperationOutput(error=failure)

    request = build_update_trip_request(
        input_data.trip_id, input_data.destination, input_data.selection
    )
    try:
        server.update(request)
    except TripServiceError as e:
        logger.warning("Trip %s update failed: %s", input_data.trip_id, e)
        return TripOperationOutput(error=_network_failure(e))

    logger.info("Trip %s updated", input_data.trip_id)
    return TripOperationOutput()


def run_get_trip(
    trip_id: str,
    server: TripServerPort,
    config: TripsConfig = DEFAULT_CONFIG,
) -> TripOverviewOutput:
    """Fetch a trip and build its headline."""
    try:
        trip = server.get_by_id(trip_id)
    except TripServiceError as e:
        logger.warning("Trip %s lookup failed: %s", trip_id, e)
        return TripOverviewOutput(error=_network_failure(e))

    headline = format_trip_headline(
        trip.destination, trip.starts_at.date(), trip.ends_at.date(), config
    )
    return TripOverviewOutput(trip=trip, headline=headline)


def run_confirm_participant(
    input_data: ConfirmParticipantInput,
    server: ParticipantsServerPort,
) -> TripOperationOutput:
    """Confirm a participant's attendance."""
    failure = check_participant_confirmation(input_data.name, input_data.email)
    if failure is not None:
        return TripOperationOutput(error=failure)

    request = build_participant_confirmation(
        input_data.participant_id, input_data.name, input_data.email
    )
    try:
        server.confirm(request)
    except TripServiceError as e:
        logger.warning(
            "Confirmation of participant %s failed: %s", input_data.participant_id, e
        )
        return TripOperationOutput(error=_network_failure(e))

    logger.info("Participant %s confirmed", input_data.participant_id)
    return TripOperationOutput()
