"""
Trips component unit tests.

Tests for request shaping, headline text, and the service entry points.
"""

from __future__ import annotations

from datetime import UTC, date, datetime

import pytest

from src.components.calendar import DateRangeSelection
from src.components.invite import InviteSet
from src.components.trips import (
    ConfirmParticipantInput,
    CreateTripInput,
    TripsConfig,
    UpdateTripInput,
    build_create_trip_request,
    build_participant_confirmation,
    build_update_trip_request,
    check_participant_confirmation,
    format_trip_headline,
    run_confirm_participant,
    run_create_trip,
    run_get_trip,
    run_update_trip,
    truncate_destination,
)
from src.domain.entities import (
    CreateTripRequest,
    Participant,
    ParticipantConfirmationRequest,
    TripDetails,
    TripServiceError,
    UpdateTripRequest,
)

RANGE = DateRangeSelection(starts_at=date(2024, 6, 10), ends_at=date(2024, 6, 15))

# --- Mock Implementations ---


class MockTripServer:
    """In-memory trip service for testing."""

    def __init__(self) -> None:
        self.created: list[CreateTripRequest] = []
        self.updated: list[UpdateTripRequest] = []
        self.trips: dict[str, TripDetails] = {}
        self.fail = False

    def create(self, request: CreateTripRequest) -> str:
        if self.fail:
            raise TripServiceError("timeout")
        self.created.append(request)
        return "trip-1"

    def update(self, request: UpdateTripRequest) -> None:
        if self.fail:
            raise TripServiceError("timeout")
        self.updated.append(request)

    def get_by_id(self, trip_id: str) -> TripDetails:
        if self.fail or trip_id not in self.trips:
            raise TripServiceError("not found")
        return self.trips[trip_id]


class MockParticipantsServer:
    """In-memory participant service for testing."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.confirmed: list[ParticipantConfirmationRequest] = []

    def confirm(self, request: ParticipantConfirmationRequest) -> None:
        if self.fail:
            raise TripServiceError("")
        self.confirmed.append(request)

    def get_by_trip_id(self, trip_id: str) -> list[Participant]:
        return []


@pytest.fixture
def server() -> MockTripServer:
    return MockTripServer()


# --- Request Tests ---


class TestRequests:
    def test_create_request(self) -> None:
        invites = InviteSet(emails=("a@a.com", "b@b.com"))
        request = build_create_trip_request(" Lisboa ", RANGE, invites)
        assert request.destination == "Lisboa"
        assert request.starts_at == datetime(2024, 6, 10, tzinfo=UTC)
        assert request.ends_at == datetime(2024, 6, 15, tzinfo=UTC)
        assert request.emails_to_invite == ["a@a.com", "b@b.com"]

    def test_create_request_serializes_iso(self) -> None:
        request = build_create_trip_request("Lisboa", RANGE, InviteSet())
        payload = request.model_dump(mode="json")
        assert payload["starts_at"].startswith("2024-06-10T00:00:00")
        assert payload["ends_at"].startswith("2024-06-15T00:00:00")
        assert payload["emails_to_invite"] == []

    def test_update_request(self) -> None:
        request = build_update_trip_request("trip-1", "Porto", RANGE)
        assert request.id == "trip-1"
        assert request.destination == "Porto"

    def test_incomplete_selection_rejected(self) -> None:
        with pytest.raises(ValueError):
            build_create_trip_request(
                "Lisboa", DateRangeSelection(starts_at=date(2024, 6, 10)), InviteSet()
            )
        with pytest.raises(ValueError):
            build_update_trip_request("trip-1", "Lisboa", DateRangeSelection())

    def test_participant_confirmation_payload(self) -> None:
        request = build_participant_confirmation("p-1", " Ana ", " Ana@Example.com ")
        assert request.model_dump(by_alias=True) == {
            "participantId": "p-1",
            "name": "Ana",
            "email": "ana@example.com",
        }

    def test_participant_confirmation_guard(self) -> None:
        assert check_participant_confirmation("Ana", "ana@example.com") is None
        no_name = check_participant_confirmation(" ", "ana@example.com")
        bad_email = check_participant_confirmation("Ana", "ana.example.com")
        assert no_name is not None and no_name.field == "name"
        assert bad_email is not None and bad_email.code == "invalid_format"


# --- Headline Tests ---


class TestHeadline:
    def test_short_destination(self) -> None:
        text = format_trip_headline("Lisboa", date(2024, 6, 10), date(2024, 6, 15))
        assert text == "Lisboa - de 10 a 15 de jun."

    def test_long_destination_truncated(self) -> None:
        text = format_trip_headline(
            "Florianópolis, Brasil", date(2024, 6, 10), date(2024, 6, 15)
        )
        assert text.startswith("Florianópolis,...")

    def test_uses_end_month(self) -> None:
        text = format_trip_headline("Porto", date(2024, 6, 28), date(2024, 7, 3))
        assert text == "Porto - de 28 a 03 de jul."

    def test_truncate_boundary(self) -> None:
        assert truncate_destination("a" * 14, 14) == "a" * 14
        assert truncate_destination("a" * 15, 14) == "a" * 14 + "..."

    def test_configured_length(self) -> None:
        config = TripsConfig(headline_max_destination_length=3)
        text = format_trip_headline("Lisboa", date(2024, 6, 10), date(2024, 6, 15), config)
        assert text.startswith("Lis... - de")


# --- Entry Point Tests ---


class TestRunCreateTrip:
    def test_creates(self, server: MockTripServer) -> None:
        output = run_create_trip(
            CreateTripInput(destination="Lisboa", selection=RANGE), server
        )
        assert output.success
        assert output.trip_id == "trip-1"
        assert len(server.created) == 1

    def test_guard_failure_skips_server(self, server: MockTripServer) -> None:
        output = run_create_trip(CreateTripInput(destination="NY", selection=RANGE), server)
        assert output.error is not None
        assert output.error.code == "empty_or_short_destination"
        assert server.created == []

    def test_network_failure(self, server: MockTripServer) -> None:
        server.fail = True
        output = run_create_trip(
            CreateTripInput(destination="Lisboa", selection=RANGE), server
        )
        assert output.trip_id is None
        assert output.error is not None
        assert output.error.code == "network_failure"

    def test_other_errors_propagate(self) -> None:
        class Broken(MockTripServer):
            def create(self, request: CreateTripRequest) -> str:
                raise KeyError("bug")

        with pytest.raises(KeyError):
            run_create_trip(CreateTripInput(destination="Lisboa", selection=RANGE), Broken())


class TestRunUpdateTrip:
    def test_updates(self, server: MockTripServer) -> None:
        output = run_update_trip(
            UpdateTripInput(trip_id="trip-1", destination="Rio", selection=RANGE), server
        )
        assert output.success
        assert server.updated[0].destination == "Rio"

    def test_incomplete_dates(self, server: MockTripServer) -> None:
        output = run_update_trip(
            UpdateTripInput(
                trip_id="trip-1",
                destination="Rio",
                selection=DateRangeSelection(starts_at=date(2024, 6, 10)),
            ),
            server,
        )
        assert output.error is not None
        assert output.error.code == "incomplete_date_range"
        assert server.updated == []

    def test_network_failure(self, server: MockTripServer) -> None:
        server.fail = True
        output = run_update_trip(
            UpdateTripInput(trip_id="trip-1", destination="Rio", selection=RANGE), server
        )
        assert output.error is not None
        assert output.error.code == "network_failure"


class TestRunGetTrip:
    def test_headline(self, server: MockTripServer) -> None:
        server.trips["trip-1"] = TripDetails(
            id="trip-1",
            destination="Lisboa",
            starts_at=datetime(2024, 6, 10, tzinfo=UTC),
            ends_at=datetime(2024, 6, 15, tzinfo=UTC),
        )
        output = run_get_trip("trip-1", server)
        assert output.success
        assert output.headline == "Lisboa - de 10 a 15 de jun."

    def test_missing(self, server: MockTripServer) -> None:
        output = run_get_trip("nope", server)
        assert output.trip is None
        assert output.error is not None
        assert output.error.code == "network_failure"


class TestRunConfirmParticipant:
    def test_confirms(self) -> None:
        participants = MockParticipantsServer()
        output = run_confirm_participant(
            ConfirmParticipantInput(participant_id="p-1", name="Ana", email="ana@a.com"),
            participants,
        )
        assert output.success
        assert participants.confirmed[0].participant_id == "p-1"

    def test_invalid_email(self) -> None:
        participants = MockParticipantsServer()
        output = run_confirm_participant(
            ConfirmParticipantInput(participant_id="p-1", name="Ana", email="ana"),
            participants,
        )
        assert output.error is not None
        assert output.error.code == "invalid_format"
        assert participants.confirmed == []

    def test_network_failure_has_message(self) -> None:
        output = run_confirm_participant(
            ConfirmParticipantInput(participant_id="p-1", name="Ana", email="ana@a.com"),
            MockParticipantsServer(fail=True),
        )
        assert output.error is not None
        assert output.error.code == "network_failure"
        assert output.error.message == "Service unavailable"
