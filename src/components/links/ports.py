"""
Links component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import CreateLinkRequest, TripLink


class LinksServerPort(Protocol):
    """Remote link service."""

    def create(self, request: CreateLinkRequest) -> str:
        """Create a link and return its id."""
        ...

    def get_links_by_trip_id(self, trip_id: str) -> list[TripLink]:
        """List the links of a trip."""
        ...
