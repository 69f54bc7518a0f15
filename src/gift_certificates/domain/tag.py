from __future__ import annotations

from dataclasses import dataclass

from gift_certificates.domain.errors import ValidationError


TAG_NAME_MAX_LENGTH = 50


@dataclass(frozen=True, slots=True)
class Tag:
    name: str
    id: int | None = None

    def validate(self) -> None:
        """
        Validate tag fields.

        Raises:
            ValidationError: If the name is blank or too long
        """
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError(
                errors=[{"field": "name", "message": "Must not be blank", "code": "BLANK"}]
            )
        if len(self.name) > TAG_NAME_MAX_LENGTH:
            raise ValidationError(
                errors=[
                    {
                        "field": "name",
                        "message": f"Must be at most {TAG_NAME_MAX_LENGTH} characters",
                        "code": "TOO_LONG",
                    }
                ]
            )
