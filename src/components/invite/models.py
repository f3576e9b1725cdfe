"""Invite component - Data models."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from src.domain.entities import ValidationFailure


@dataclass(frozen=True)
class InviteSet:
    """Normalized guest emails, unique, in the order they were added."""

    emails: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.emails)

    def __iter__(self) -> Iterator[str]:
        return iter(self.emails)


@dataclass(frozen=True)
class AddEmailInput:
    invites: InviteSet
    raw_email: str


@dataclass(frozen=True)
class RemoveEmailInput:
    invites: InviteSet
    email: str


@dataclass(frozen=True)
class AddEmailOutput:
    invites: InviteSet
    error: ValidationFailure | None = None

    @property
    def success(self) -> bool:
        return self.error is None
