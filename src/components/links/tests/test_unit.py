"""
Links component unit tests.

Tests for link form validation and creation.
"""

from __future__ import annotations

import pytest

from src.components.links import (
    CreateLinkInput,
    LinkConfig,
    build_link_request,
    check_link_form,
    run_create,
)
from src.domain.entities import CreateLinkRequest, TripLink, TripServiceError

# --- Mock Server ---


class MockLinksServer:
    """In-memory link service for testing."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.requests: list[CreateLinkRequest] = []

    def create(self, request: CreateLinkRequest) -> str:
        if self.fail:
            raise TripServiceError("service unavailable")
        self.requests.append(request)
        return f"link-{len(self.requests)}"

    def get_links_by_trip_id(self, trip_id: str) -> list[TripLink]:
        return [
            TripLink(id=f"link-{i}", title=r.title, url=r.url)
            for i, r in enumerate(self.requests, start=1)
            if r.trip_id == trip_id
        ]


@pytest.fixture
def server() -> MockLinksServer:
    return MockLinksServer()


# --- Validation Tests ---


class TestCheckLinkForm:
    def test_valid(self) -> None:
        assert check_link_form("Hotel", "https://booking.example.com/r/1") is None

    def test_empty_title(self) -> None:
        failure = check_link_form("   ", "https://example.com")
        assert failure is not None
        assert failure.code == "invalid_url_or_empty_title"
        assert failure.field == "title"

    @pytest.mark.parametrize(
        "url",
        ["", "example.com", "ftp://example.com", "https://", "https://exa mple.com", "https://nohost"],
    )
    def test_invalid_url(self, url: str) -> None:
        failure = check_link_form("Hotel", url)
        assert failure is not None
        assert failure.code == "invalid_url_or_empty_title"
        assert failure.field == "url"

    def test_url_is_trimmed(self) -> None:
        assert check_link_form("Hotel", "  https://example.com  ") is None

    def test_configured_schemes(self) -> None:
        config = LinkConfig(allowed_schemes=("https",))
        assert check_link_form("Hotel", "http://example.com", config) is not None
        assert check_link_form("Hotel", "https://example.com", config) is None

    def test_build_request_trims(self) -> None:
        request = build_link_request("trip-1", " Hotel ", " https://example.com ")
        assert request.title == "Hotel"
        assert request.url == "https://example.com"
        assert request.model_dump(by_alias=True) == {
            "tripId": "trip-1",
            "title": "Hotel",
            "url": "https://example.com",
        }


# --- Creation Tests ---


class TestRunCreate:
    def test_creates(self, server: MockLinksServer) -> None:
        output = run_create(
            CreateLinkInput(trip_id="trip-1", title="Hotel", url="https://example.com"),
            server,
        )
        assert output.success
        assert len(server.get_links_by_trip_id("trip-1")) == 1

    def test_invalid_form_skips_server(self, server: MockLinksServer) -> None:
        output = run_create(
            CreateLinkInput(trip_id="trip-1", title="", url="https://example.com"),
            server,
        )
        assert not output.success
        assert server.requests == []

    def test_service_failure(self) -> None:
        output = run_create(
            CreateLinkInput(trip_id="trip-1", title="Hotel", url="https://example.com"),
            MockLinksServer(fail=True),
        )
        assert output.error is not None
        assert output.error.code == "network_failure"
