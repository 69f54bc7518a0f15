"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "sort_by",
                "message": "Must be one of ['name', 'create_date', 'price']",
                "code": "INVALID_SORT_FIELD",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Supports:
    - Simple errors (just detail and code)
    - Multi-field validation errors (detail + errors array)

    Examples:
        Simple error:
            {
                "detail": "Certificate with identifier '7' not found",
                "code": "NOT_FOUND"
            }

        Validation error with multiple fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "price",
                        "message": "Must be > 0",
                        "code": "INVALID_VALUE"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Certificate with identifier '7' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "name",
                            "message": "Must not be blank",
                            "code": "BLANK",
                        },
                        {
                            "field": "duration",
                            "message": "Must be > 0",
                            "code": "INVALID_VALUE",
                        },
                    ],
                },
            ]
        }
    )


def error_responses(*status_codes: int) -> dict[int | str, dict[str, Any]]:
    """OpenAPI ``responses=`` entries documenting ErrorResponse for the given codes."""
    descriptions = {
        400: "Validation error",
        404: "Resource not found",
        409: "Conflict with existing data",
        422: "Malformed request",
        500: "Storage failure",
    }
    return {
        code: {"model": ErrorResponse, "description": descriptions.get(code, "Error")}
        for code in status_codes
    }
