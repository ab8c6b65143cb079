"""Product search handler that leaks backend errors to the caller.

Kept only as a baseline for comparison with ``handle_secure_search``: it
writes the raw error detail, connection string included, into the HTML
body. Disable it with ``EXPOSE_VULNERABLE_SEARCH=false``.
"""

from __future__ import annotations

import logging
from typing import assert_never

from fastapi.responses import HTMLResponse

from leakguard.models.errors import DatabaseError
from leakguard.models.search import SearchSuccess
from leakguard.services.catalog import lookup

logger = logging.getLogger(__name__)

VULNERABLE_ROUTE = "/vulnerable-search"


def handle_vulnerable_search(product: str, error_logger: logging.Logger) -> HTMLResponse:
    """Search the catalog and echo any failure verbatim.

    Args:
        product: The ``product`` query parameter.
        error_logger: Channel that also records what was exposed.

    Returns:
        200 with the result line, or 500 with the unsanitized error text.
    """
    logger.info("Received vulnerable search request", extra={"route": VULNERABLE_ROUTE})

    outcome = lookup(product)
    match outcome:
        case SearchSuccess(value=value):
            return HTMLResponse(content=f"Search Result: {value}")
        case DatabaseError() as error:
            error_logger.error(
                "Exposing error to client: %s",
                error,
                extra={"route": VULNERABLE_ROUTE, "error_kind": error.kind},
            )
            return HTMLResponse(
                content=(
                    "<h1>Error occurred!</h1><p>We encountered an issue:</p>"
                    f"<pre>{error}</pre>"
                ),
                status_code=500,
            )
        case _:
            assert_never(outcome)
