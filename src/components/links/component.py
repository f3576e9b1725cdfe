"""
Links component - Trip link creation.

Shell Layer - handles I/O and error conversion.
"""

from __future__ import annotations

import logging

from src.domain.entities import TripServiceError, ValidationFailure

from ._impl import build_link_request, check_link_form
from .models import DEFAULT_CONFIG, CreateLinkInput, LinkConfig, LinkOperationOutput
from .ports import LinksServerPort

logger = logging.getLogger(__name__)


def run_create(
    input_data: CreateLinkInput,
    server: LinksServerPort,
    config: LinkConfig = DEFAULT_CONFIG,
) -> LinkOperationOutput:
    """Validate the link form and send it to the link service."""
    failure = check_link_form(input_data.title, input_data.url, config)
    if failure is not None:
        return LinkOperationOutput(error=failure)

    request = build_link_request(input_data.trip_id, input_data.title, input_data.url)
    try:
        link_id = server.create(request)
    except TripServiceError as e:
        logger.warning("Link creation failed for trip %s: %s", input_data.trip_id, e)
        return LinkOperationOutput(
            error=ValidationFailure(code="network_failure", message=str(e))
        )

    logger.info("Link %s added to trip %s", link_id, input_data.trip_id)
    return LinkOperationOutput()
