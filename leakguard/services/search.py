"""Secure product search handler."""

from __future__ import annotations

import logging
from typing import assert_never

from fastapi.responses import HTMLResponse

from leakguard.models.errors import DatabaseError, GenericError
from leakguard.models.search import SearchSuccess
from leakguard.services.catalog import lookup
from leakguard.services.renderer import render

logger = logging.getLogger(__name__)

SECURE_ROUTE = "/secure-search"


def handle_secure_search(product: str | None, error_logger: logging.Logger) -> HTMLResponse:
    """Search the catalog, delegating every failure to the renderer.

    Args:
        product: The ``product`` query parameter, or None when absent.
        error_logger: Operator channel passed through to ``render``.

    Returns:
        200 with the result on success, otherwise the renderer's fixed 500.
    """
    logger.info("Received secure search request", extra={"route": SECURE_ROUTE})

    if product is None:
        return render(GenericError(), error_logger, route=SECURE_ROUTE).response

    try:
        outcome = lookup(product)
        if isinstance(outcome, SearchSuccess):
            return HTMLResponse(content=f"<h1>Search Result</h1><p>{outcome.value}</p>")
    except Exception as exc:
        return render(GenericError(), error_logger, exc_info=exc, route=SECURE_ROUTE).response

    match outcome:
        case DatabaseError():
            return render(outcome, error_logger, route=SECURE_ROUTE).response
        case _:
            assert_never(outcome)
