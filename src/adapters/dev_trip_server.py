"""
In-memory trip service adapter (dev).

Stands in for the remote trip, participant, and link services during local
development and tests. Satisfies TripServerPort, ParticipantsServerPort,
and LinksServerPort.

Call ``fail_next()`` to make the next request raise TripServiceError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from uuid import uuid4

from src.domain.entities import (
    CreateLinkRequest,
    CreateTripRequest,
    Participant,
    ParticipantConfirmationRequest,
    TripDetails,
    TripLink,
    TripServiceError,
    UpdateTripRequest,
)

logger = logging.getLogger(__name__)


@dataclass
class InMemoryTripServer:
    """Dev trip service keeping everything in dictionaries."""

    trips: dict[str, TripDetails] = field(default_factory=dict)
    participants: dict[str, list[Participant]] = field(default_factory=dict)
    links: dict[str, list[TripLink]] = field(default_factory=dict)
    _failures: int = 0

    def fail_next(self, count: int = 1) -> None:
        self._failures += count

    def _check_failure(self, operation: str) -> None:
        if self._failures > 0:
            self._failures -= 1
            logger.debug("InMemoryTripServer: simulated failure in %s", operation)
            raise TripServiceError(f"Simulated failure in {operation}")

    # --- Trips ---

    def create(self, request: CreateTripRequest) -> str:
        self._check_failure("create")
        trip_id = str(uuid4())
        self.trips[trip_id] = TripDetails(
            id=trip_id,
            destination=request.destination,
            starts_at=request.starts_at,
            ends_at=request.ends_at,
        )
        self.participants[trip_id] = [
            Participant(id=str(uuid4()), email=email)
            for email in request.emails_to_invite
        ]
        logger.debug("InMemoryTripServer.create: trip_id=%s", trip_id)
        return trip_id

    def update(self, request: UpdateTripRequest) -> None:
        self._check_failure("update")
        if request.id not in self.trips:
            raise TripServiceError(f"Trip {request.id} not found")
        self.trips[request.id] = self.trips[request.id].model_copy(
            update={
                "destination": request.destination,
                "starts_at": request.starts_at,
                "ends_at": request.ends_at,
            }
        )

    def get_by_id(self, trip_id: str) -> TripDetails:
        self._check_failure("get_by_id")
        trip = self.trips.get(trip_id)
        if trip is None:
            raise TripServiceError(f"Trip {trip_id} not found")
        return trip

    # --- Participants ---

    def confirm(self, request: ParticipantConfirmationRequest) -> None:
        self._check_failure("confirm")
        for trip_id, people in self.participants.items():
            for i, person in enumerate(people):
                if person.id == request.participant_id:
                    people[i] = person.model_copy(
                        update={
                            "name": request.name,
                            "email": request.email,
                            "is_confirmed": True,
                        }
                    )
                    logger.debug(
                        "InMemoryTripServer.confirm: trip_id=%s participant_id=%s",
                        trip_id,
                        person.id,
                    )
                    return
        raise TripServiceError(f"Participant {request.participant_id} not found")

    def get_by_trip_id(self, trip_id: str) -> list[Participant]:
        self._check_failure("get_by_trip_id")
        return list(self.participants.get(trip_id, []))

    # --- Links ---

    def create_link(self, request: CreateLinkRequest) -> str:
        self._check_failure("create_link")
        if request.trip_id not in self.trips:
            raise TripServiceError(f"Trip {request.trip_id} not found")
        link = TripLink(id=str(uuid4()), title=request.title, url=request.url)
        self.links.setdefault(request.trip_id, []).append(link)
        return link.id

    def get_links_by_trip_id(self, trip_id: str) -> list[TripLink]:
        self._check_failure("get_links_by_trip_id")
        return list(self.links.get(trip_id, []))


@dataclass
class InMemoryLinksServer:
    """LinksServerPort view over an InMemoryTripServer."""

    backend: InMemoryTripServer

    def create(self, request: CreateLinkRequest) -> str:
        return self.backend.create_link(request)

    def get_links_by_trip_id(self, trip_id: str) -> list[TripLink]:
        return self.backend.get_links_by_trip_id(trip_id)


@dataclass
class InMemoryTripStorage:
    """TripStoragePort keeping the current trip id in memory."""

    trip_id: str | None = None

    def save(self, trip_id: str) -> None:
        self.trip_id = trip_id

    def get(self) -> str | None:
        return self.trip_id
