"""
Invite component - Guest email management.

Shell Layer - entry points used by the trip-creation screen.
"""

from __future__ import annotations

from ._impl import add_email, remove_email
from .models import AddEmailInput, AddEmailOutput, InviteSet, RemoveEmailInput


def run_add(input_data: AddEmailInput) -> AddEmailOutput:
    """Add a guest email to the set."""
    return add_email(input_data.invites, input_data.raw_email)


def run_remove(input_data: RemoveEmailInput) -> InviteSet:
    """Remove a guest email from the set."""
    return remove_email(input_data.invites, input_data.email)


def run(input_data: AddEmailInput | RemoveEmailInput) -> AddEmailOutput | InviteSet:
    if isinstance(input_data, AddEmailInput):
        return run_add(input_data)

    elif isinstance(input_data, RemoveEmailInput):
        return run_remove(input_data)

    else:
        raise ValueError(f"Unknown input type: {type(input_data)}")
