"""
Trips component - Port interfaces.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol

from src.domain.entities import (
    CreateTripRequest,
    Participant,
    ParticipantConfirmationRequest,
    TripDetails,
    UpdateTripRequest,
)


class TripServerPort(Protocol):
    """Remote trip service. Failures raise TripServiceError."""

    def create(self, request: CreateTripRequest) -> str:
        """Create a trip and return its id."""
        ...

    def update(self, request: UpdateTripRequest) -> None:
        """Replace a trip's destination and dates."""
        ...

    def get_by_id(self, trip_id: str) -> TripDetails:
        """Fetch a trip."""
        ...


class ParticipantsServerPort(Protocol):
    """Remote participant service. Failures raise TripServiceError."""

    def confirm(self, request: ParticipantConfirmationRequest) -> None:
        """Confirm a participant's attendance."""
        ...

    def get_by_trip_id(self, trip_id: str) -> list[Participant]:
        """List the participants of a trip."""
        ...


class TripStoragePort(Protocol):
    """Local storage for the id of the current trip."""

    def save(self, trip_id: str) -> None: ...
    def get(self) -> str | None: ...


class ClockPort(Protocol):
    """Port for the current date - enables deterministic testing."""

    def today(self) -> date:
        """Get the current local date."""
        ...
