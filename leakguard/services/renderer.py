"""Turn a classified error into an operator log record and a sanitized response.

This is the only module allowed to see ``DatabaseError.detail`` on the
secure path. The response body is a constant: nothing from the error is
interpolated into it, whatever the detail contains.
"""

from __future__ import annotations

import logging
from typing import NamedTuple, assert_never

from fastapi.responses import HTMLResponse

from leakguard.models.errors import DatabaseError, ErrorKind, GenericError

GENERIC_ERROR_BODY = (
    "<h1>Error!</h1><p>An unexpected error occurred. Please try again later.</p>"
)
ERROR_STATUS_CODE = 500

DEFAULT_ERROR_LOGGER = "leakguard.errors"


class RenderedError(NamedTuple):
    """Artifacts produced for one failed request."""

    record: logging.LogRecord
    response: HTMLResponse


def _log_message(error: ErrorKind) -> str:
    match error:
        case DatabaseError(detail=detail):
            return f"Detailed DB error: {detail}"
        case GenericError():
            return "A generic application error occurred."
        case _:
            assert_never(error)


def render(
    error: ErrorKind,
    logger: logging.Logger,
    *,
    exc_info: BaseException | None = None,
    route: str | None = None,
) -> RenderedError:
    """Log ``error`` for operators and build the fixed 500 response.

    The record is fully built before it is handed to ``logger`` so that a
    request emits either one complete record or none.

    Args:
        error: The classified failure.
        logger: Operator-only channel receiving the detail.
        exc_info: Exception that caused the failure, if any. Its traceback
            goes to the log only.
        route: Request path, attached to the record for context.

    Returns:
        The emitted log record and the sanitized HTML response.
    """
    message = _log_message(error)
    extra = {"error_kind": error.kind, "status_code": ERROR_STATUS_CODE}
    if route is not None:
        extra["route"] = route

    record = logger.makeRecord(
        logger.name,
        logging.ERROR,
        __file__,
        0,
        message,
        None,
        (type(exc_info), exc_info, exc_info.__traceback__) if exc_info is not None else None,
        func="render",
        extra=extra,
    )
    if logger.isEnabledFor(logging.ERROR):
        logger.handle(record)

    response = HTMLResponse(content=GENERIC_ERROR_BODY, status_code=ERROR_STATUS_CODE)
    return RenderedError(record=record, response=response)
