"""
HTTP translation of certificate, tag and order failures.

Every error body has the shape ``{"detail", "code", "errors"?}``:

- ValidationError  -> 400 (bad field values, unknown sort field, paging)
- NotFoundError    -> 404 (certificate, tag, user or order id)
- ConflictError    -> 409 (duplicate tag name)
- StorageError     -> 500 (detail hidden, cause logged)
- RequestValidationError -> 422 (query/body shape rejected by FastAPI)
- anything else    -> 500 INTERNAL_ERROR
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from gift_certificates.domain.errors import DomainError

logger = logging.getLogger(__name__)

STATUS_CODE_MAP: dict[str, int] = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CONFLICT": status.HTTP_409_CONFLICT,
    "STORAGE_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}
STORAGE_ERROR_DETAIL = "A storage error occurred"
REQUEST_SHAPE_DETAIL = "Invalid request parameters"
UNEXPECTED_ERROR_DETAIL = "An unexpected error occurred"


def _request_fields(request: Request) -> dict[str, str]:
    return {"path": request.url.path, "method": request.method}


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code = STATUS_CODE_MAP.get(exc.error_code, status.HTTP_400_BAD_REQUEST)
    body: dict[str, Any] = exc.to_dict()

    if status_code >= 500:
        logger.error(
            "Storage failure while serving request",
            extra={
                "error_code": exc.error_code,
                "error_message": exc.message,
                "context": exc.context,
                **_request_fields(request),
            },
        )
        # The cause may carry SQL or connection details
        body = {"message": STORAGE_ERROR_DETAIL, "code": exc.error_code}
    else:
        logger.info(
            "Request rejected",
            extra={
                "error_code": exc.error_code,
                "error_message": exc.message,
                **_request_fields(request),
            },
        )

    content: dict[str, Any] = {"detail": body["message"], "code": body["code"]}
    if "errors" in body:
        content["errors"] = body["errors"]

    return JSONResponse(status_code=status_code, content=content)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Shape errors: a non-numeric page, page_size over the maximum, a price that is
    not a decimal string, a missing certificate name, an unknown body field.
    """
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"] if loc not in ("body", "query")),
            "message": error["msg"],
            "code": error["type"],
        }
        for error in exc.errors()
    ]

    logger.info("Malformed request", extra={"errors": errors, **_request_fields(request)})

    return JSONResponse(
        status_code=422,
        content=jsonable_encoder(
            {"detail": REQUEST_SHAPE_DETAIL, "code": "VALIDATION_ERROR", "errors": errors}
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error while serving request",
        exc_info=exc,
        extra={"error_type": type(exc).__name__, **_request_fields(request)},
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": UNEXPECTED_ERROR_DETAIL, "code": "INTERNAL_ERROR"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)
