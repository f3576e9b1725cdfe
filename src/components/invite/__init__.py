"""
Invite component - Guest email set with validation and de-duplication.
"""

from ._impl import add_email, contains, remove_email, size
from .component import (
    run,
    run_add,
    run_remove,
)
from .models import (
    AddEmailInput,
    AddEmailOutput,
    InviteSet,
    RemoveEmailInput,
)

__all__ = [
    # Entry points
    "run",
    "run_add",
    "run_remove",
    # Functional core
    "add_email",
    "remove_email",
    "size",
    "contains",
    # Input models
    "AddEmailInput",
    "RemoveEmailInput",
    # Output models
    "AddEmailOutput",
    "InviteSet",
]
