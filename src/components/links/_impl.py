"""
Link form validation.

Functional Core - pure business logic.
"""

from __future__ import annotations

from src.domain.entities import CreateLinkRequest, ValidationFailure
from src.domain.validators import is_valid_url

from .models import DEFAULT_CONFIG, LinkConfig


def check_link_form(
    title: str,
    url: str,
    config: LinkConfig = DEFAULT_CONFIG,
) -> ValidationFailure | None:
    """A link needs a title and a well-formed URL."""
    if not title.strip():
        return ValidationFailure(
            code="invalid_url_or_empty_title",
            message="Title is required",
            field="title",
        )

    if not is_valid_url(url.strip(), config.allowed_schemes):
        return ValidationFailure(
            code="invalid_url_or_empty_title",
            message="Invalid link",
            field="url",
        )

    return None


def build_link_request(trip_id: str, title: str, url: str) -> CreateLinkRequest:
    return CreateLinkRequest(trip_id=trip_id, title=title.strip(), url=url.strip())
