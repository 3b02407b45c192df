"""Interface layer errors and their HTTP mapping."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from engage.domain.error import DomainError, ErrorKind

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.NOT_AUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorKind.VALIDATION_FAILED: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error as ``{"error": {"kind", "message", "field"}}``."""
    status_code = STATUS_BY_KIND[exc.kind]
    if status_code >= 500:
        logfire.error("Request failed", path=request.url.path, error=exc.message)
    else:
        logfire.info(
            "Request rejected",
            path=request.url.path,
            kind=exc.kind.value,
            error=exc.message,
        )
    return JSONResponse(status_code=status_code, content={"error": exc.to_dict()})


async def request_model_error_handler(
    request: Request, exc: PydanticValidationError
) -> JSONResponse:
    """Use case request models reject a value (e.g. page size out of range)."""
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(part) for part in first.get("loc", ())) or None
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": {
                "kind": ErrorKind.VALIDATION_FAILED.value,
                "message": first.get("msg", "Invalid request"),
                "field": field,
            }
        },
    )


async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    """Malformed identifiers and similar bad input."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "kind": ErrorKind.VALIDATION_FAILED.value,
                "message": str(exc),
                "field": None,
            }
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    """Map domain and request errors to HTTP responses."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(PydanticValidationError, request_model_error_handler)
    app.add_exception_handler(ValueError, value_error_handler)
