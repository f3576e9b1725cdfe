"""
Links component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import ValidationFailure

# --- Configuration ---


@dataclass(frozen=True)
class LinkConfig:
    """Link configuration from rules."""

    allowed_schemes: tuple[str, ...] = ("http", "https")


DEFAULT_CONFIG = LinkConfig()


# --- Input / Output ---


@dataclass(frozen=True)
class CreateLinkInput:
    """Input for adding a link to a trip."""

    trip_id: str
    title: str
    url: str


@dataclass(frozen=True)
class LinkOperationOutput:
    """Output from link operation."""

    error: ValidationFailure | None = None

    @property
    def success(self) -> bool:
        return self.error is None
