"""Exception handlers for converting library exceptions to HTTP responses.

Instead of one handler per exception, base exception handlers determine
the HTTP status code from the error_code attribute.

Hosts opt in with register_exception_handlers(app).
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from nlogin_web.application.exceptions import ApplicationError
from nlogin_web.domain.exceptions import DomainException
from nlogin_web.presentation.error_codes import get_http_status_for_error_code

logger = logging.getLogger(__name__)


async def application_error_handler(
    request: Request, exc: ApplicationError
) -> JSONResponse:
    """
    Handle ALL application layer exceptions.

    StoreUnavailableError becomes 503 and UnverifiableAccountError 500, so a
    website never shows an outage or corrupt hash as a wrong password.
    """
    http_status = get_http_status_for_error_code(exc.error_code)
    if http_status >= 500:
        logger.error(f"{exc.error_code} on {request.url.path}: {exc.message}")

    return JSONResponse(
        status_code=http_status,
        content={
            "detail": exc.message,
            "error_code": exc.error_code,
        },
    )


async def domain_exception_handler(
    request: Request, exc: DomainException
) -> JSONResponse:
    """
    Handle ALL domain layer exceptions.

    The HTTP status code is determined by the error_code attribute.
    """
    http_status = get_http_status_for_error_code(exc.error_code)

    return JSONResponse(
        status_code=http_status,
        content={
            "detail": exc.message,
            "error_code": exc.error_code,
        },
    )


async def database_error_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """
    Handle database errors that are not connectivity failures.

    Returns a standardized error response without exposing database details.
    """
    logger.error(f"Database error: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An internal database error occurred",
            "error_code": "DATABASE_ERROR",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers above on a host application."""
    app.add_exception_handler(ApplicationError, application_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(DomainException, domain_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, database_error_handler)  # type: ignore[arg-type]
