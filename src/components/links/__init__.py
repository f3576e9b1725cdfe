"""
Links component - Trip link form and creation.
"""

from ._impl import build_link_request, check_link_form
from .component import run_create
from .models import (
    DEFAULT_CONFIG,
    CreateLinkInput,
    LinkConfig,
    LinkOperationOutput,
)
from .ports import LinksServerPort

__all__ = [
    # Entry points
    "run_create",
    # Functional core
    "check_link_form",
    "build_link_request",
    # Models
    "LinkConfig",
    "DEFAULT_CONFIG",
    "CreateLinkInput",
    "LinkOperationOutput",
    # Ports
    "LinksServerPort",
]
