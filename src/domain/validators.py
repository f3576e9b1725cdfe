import re
from collections.abc import Iterable
from urllib.parse import urlparse

# local@label.label[.label...], no whitespace, no empty labels
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s.]+(\.[^@\s.]+)+$")


def normalize_email(raw: str) -> str:
    return raw.strip().lower()


def is_valid_email(value: str) -> bool:
    """
    Shape check only: one '@', a non-empty local part, and a dotted domain
    whose labels are all non-empty.
    """
    return bool(_EMAIL_RE.match(value))


def is_valid_url(value: str, allowed_schemes: Iterable[str] = ("http", "https")) -> bool:
    if not value or any(ch.isspace() for ch in value):
        return False

    try:
        parsed = urlparse(value)
    except ValueError:
        return False

    if parsed.scheme.lower() not in {s.lower() for s in allowed_schemes}:
        return False

    host = parsed.hostname or ""
    if host == "localhost":
        return True
    labels = host.split(".")
    return len(labels) > 1 and all(labels)


def has_destination(destination: str) -> bool:
    return bool(destination.strip())


def check_destination(destination: str, min_length: int) -> bool:
    """Non-empty and at least ``min_length`` characters once trimmed."""
    trimmed = destination.strip()
    return bool(trimmed) and len(trimmed) >= min_length
