"""
InviteSet - guest email list for trip creation.

Functional Core - pure business logic.
"""

from __future__ import annotations

from src.domain.entities import ValidationFailure
from src.domain.validators import is_valid_email, normalize_email

from .models import AddEmailOutput, InviteSet


def add_email(invites: InviteSet, raw_email: str) -> AddEmailOutput:
    """
    Add a guest email.

    Rejected emails leave the set as it was.
    """
    email = normalize_email(raw_email)

    if not is_valid_email(email):
        return AddEmailOutput(
            invites=invites,
            error=ValidationFailure(
                code="invalid_format",
                message="Invalid email address",
                field="email",
            ),
        )

    if email in invites.emails:
        return AddEmailOutput(
            invites=invites,
            error=ValidationFailure(
                code="duplicate",
                message=f"'{email}' has already been added",
                field="email",
            ),
        )

    return AddEmailOutput(invites=InviteSet(emails=(*invites.emails, email)))


def remove_email(invites: InviteSet, email: str) -> InviteSet:
    target = normalize_email(email)
    if target not in invites.emails:
        return invites
    return InviteSet(emails=tuple(e for e in invites.emails if e != target))


def size(invites: InviteSet) -> int:
    return len(invites.emails)


def contains(invites: InviteSet, email: str) -> bool:
    return normalize_email(email) in invites.emails
