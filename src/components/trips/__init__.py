"""
Trips component - Trip requests, headline text, and service calls.
"""

from ._impl import (
    build_create_trip_request,
    build_participant_confirmation,
    build_update_trip_request,
    check_participant_confirmation,
    format_trip_headline,
    truncate_destination,
)
from .component import (
    run_confirm_participant,
    run_create_trip,
    run_get_trip,
    run_update_trip,
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
from .ports import ClockPort, ParticipantsServerPort, TripServerPort, TripStoragePort

__all__ = [
    # Entry points
    "run_create_trip",
    "run_update_trip",
    "run_get_trip",
    "run_confirm_participant",
    # Functional core
    "build_create_trip_request",
    "build_update_trip_request",
    "build_participant_confirmation",
    "check_participant_confirmation",
    "format_trip_headline",
    "truncate_destination",
    # Input models
    "CreateTripInput",
    "UpdateTripInput",
    "ConfirmParticipantInput",
    # Output models
    "CreateTripOutput",
    "TripOperationOutput",
    "TripOverviewOutput",
    # Config
    "TripsConfig",
    "DEFAULT_CONFIG",
    # Ports
    "TripServerPort",
    "ParticipantsServerPort",
    "TripStoragePort",
    "ClockPort",
]
