from __future__ import annotations

from gift_certificates.domain.errors import ValidationError


def validate_identifier(field: str, value: int) -> None:
    """
    Check that a caller-supplied identifier can name a stored row.

    Raises:
        ValidationError: If the value is not a positive integer
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError(
            errors=[
                {
                    "field": field,
                    "message": "Must be a positive integer",
                    "code": "INVALID_ID",
                }
            ]
        )
