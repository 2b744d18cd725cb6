"""Mapping of domain and adapter errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from forum.adapter.error import UpstreamAuthError
from forum.domain.error import (
    DomainError,
    ForbiddenError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from forum.interface.error import AuthenticationRequiredError


def _error_response(status_code: int, detail: str, **headers: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"detail": detail}, headers=headers or None
    )


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    logfire.info("Resource not found", path=request.url.path, error=str(exc))
    return _error_response(status.HTTP_404_NOT_FOUND, str(exc))


async def handle_forbidden(request: Request, exc: ForbiddenError) -> JSONResponse:
    logfire.warn("Forbidden mutation", path=request.url.path, error=str(exc))
    return _error_response(status.HTTP_403_FORBIDDEN, str(exc))


async def handle_validation(request: Request, exc: ValidationError) -> JSONResponse:
    return _error_response(422, str(exc))


async def handle_unauthenticated(
    request: Request, exc: UpstreamAuthError | AuthenticationRequiredError
) -> JSONResponse:
    logfire.info("Unauthenticated request", path=request.url.path, error=str(exc))
    return _error_response(
        status.HTTP_401_UNAUTHORIZED, str(exc), **{"WWW-Authenticate": "Bearer"}
    )


async def handle_store_error(request: Request, exc: StoreError) -> JSONResponse:
    logfire.error("Store failure", path=request.url.path, error=str(exc))
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    logfire.warn("Unhandled domain error", path=request.url.path, error=str(exc))
    return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the app.

    Handlers are looked up by the exception's class hierarchy, so the
    specific errors win over the ``DomainError`` fallback.
    """
    app.add_exception_handler(NotFoundError, handle_not_found)  # type: ignore[arg-type]
    app.add_exception_handler(ForbiddenError, handle_forbidden)  # type: ignore[arg-type]
    app.add_exception_handler(ValidationError, handle_validation)  # type: ignore[arg-type]
    app.add_exception_handler(UpstreamAuthError, handle_unauthenticated)  # type: ignore[arg-type]
    app.add_exception_handler(AuthenticationRequiredError, handle_unauthenticated)  # type: ignore[arg-type]
    app.add_exception_handler(StoreError, handle_store_error)  # type: ignore[arg-type]
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
