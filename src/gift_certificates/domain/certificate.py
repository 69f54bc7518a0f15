from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from gift_certificates.domain.errors import ValidationError
from gift_certificates.domain.tag import Tag


NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000
# Capacity of the NUMERIC(12, 2) and INTEGER columns
PRICE_MAX = Decimal("9999999999.99")
DURATION_MAX = 2**31 - 1
SORT_DESCENDING = "DESC"


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class FilterValidationError(ValidationError):
    """Raised when filter parameters are invalid."""

    pass


class SortField(str, Enum):
    """Columns a certificate search may be ordered by."""

    NAME = "name"
    CREATE_DATE = "create_date"
    PRICE = "price"


@dataclass(frozen=True, slots=True)
class Certificate:
    name: str
    description: str
    price: Decimal
    duration: int
    id: int | None = None
    create_date: datetime | None = None
    last_update_date: datetime | None = None
    tags: tuple[Tag, ...] = ()

    @property
    def tag_names(self) -> tuple[str, ...]:
        return tuple(tag.name for tag in self.tags)

    def validate(self) -> None:
        """
        Validate certificate fields, collecting every failure.

        Raises:
            ValidationError: If any field value is invalid
        """
        errors: list[dict[str, str]] = []

        if not isinstance(self.name, str) or not self.name.strip():
            errors.append({"field": "name", "message": "Must not be blank", "code": "BLANK"})
        elif len(self.name) > NAME_MAX_LENGTH:
            errors.append(
                {
                    "field": "name",
                    "message": f"Must be at most {NAME_MAX_LENGTH} characters",
                    "code": "TOO_LONG",
                }
            )

        if not isinstance(self.description, str):
            errors.append(
                {"field": "description", "message": "Must be a string", "code": "INVALID_TYPE"}
            )
        elif len(self.description) > DESCRIPTION_MAX_LENGTH:
            errors.append(
                {
                    "field": "description",
                    "message": f"Must be at most {DESCRIPTION_MAX_LENGTH} characters",
                    "code": "TOO_LONG",
                }
            )

        # Guardrail: no floats past the boundary
        if not isinstance(self.price, Decimal):
            errors.append(
                {"field": "price", "message": "Must be a Decimal", "code": "INVALID_TYPE"}
            )
        elif self.price <= 0:
            errors.append({"field": "price", "message": "Must be > 0", "code": "INVALID_VALUE"})
        elif self.price > PRICE_MAX:
            errors.append(
                {"field": "price", "message": f"Must be <= {PRICE_MAX}", "code": "OUT_OF_RANGE"}
            )

        if not isinstance(self.duration, int) or isinstance(self.duration, bool):
            errors.append(
                {"field": "duration", "message": "Must be an integer", "code": "INVALID_TYPE"}
            )
        elif self.duration <= 0:
            errors.append(
                {"field": "duration", "message": "Must be > 0", "code": "INVALID_VALUE"}
            )
        elif self.duration > DURATION_MAX:
            errors.append(
                {
                    "field": "duration",
                    "message": f"Must be <= {DURATION_MAX}",
                    "code": "OUT_OF_RANGE",
                }
            )

        if errors:
            raise ValidationError(errors=errors)


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not str(value).strip():
        return None
    return str(value)


@dataclass(frozen=True, slots=True)
class CertificateFilters:
    """
    Optional search constraints over certificates.

    Safe to build from untrusted input: blank values are normalized to
    ``None`` and nothing is checked until ``validate()``.
    """

    name_part: str | None = None
    description_part: str | None = None
    tag_name: str | None = None
    tag_names: tuple[str, ...] | None = None
    sort_by: str | None = None
    sort_order: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name_part", _blank_to_none(self.name_part))
        object.__setattr__(self, "description_part", _blank_to_none(self.description_part))
        object.__setattr__(self, "tag_name", _blank_to_none(self.tag_name))
        object.__setattr__(self, "sort_by", _blank_to_none(self.sort_by))
        object.__setattr__(self, "sort_order", _blank_to_none(self.sort_order))
        object.__setattr__(self, "tag_names", self._normalize_tag_names(self.tag_names))

    @staticmethod
    def _normalize_tag_names(names: Iterable[str] | None) -> tuple[str, ...] | None:
        if names is None or isinstance(names, str):
            names = [names] if names else []
        unique: dict[str, None] = {}
        for name in names:
            normalized = _blank_to_none(name)
            if normalized is not None:
                unique.setdefault(normalized, None)
        return tuple(unique) or None

    def has_name_part(self) -> bool:
        return self.name_part is not None

    def has_description_part(self) -> bool:
        return self.description_part is not None

    def has_tag_name(self) -> bool:
        return self.tag_name is not None

    def has_tag_names(self) -> bool:
        return self.tag_names is not None

    def has_sort(self) -> bool:
        return self.sort_by is not None

    @property
    def sort_field(self) -> SortField | None:
        if self.sort_by is None:
            return None
        return SortField(self.sort_by)

    @property
    def is_descending(self) -> bool:
        return self.sort_order == SORT_DESCENDING

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If the sort field is not sortable
        """
        allowed = [sort_field.value for sort_field in SortField]
        if self.sort_by is not None and self.sort_by not in allowed:
            raise FilterValidationError(
                errors=[
                    {
                        "field": "sort_by",
                        "message": f"Must be one of {allowed}",
                        "code": "INVALID_SORT_FIELD",
                    }
                ]
            )


PATCHABLE_FIELDS = frozenset({"name", "description", "price", "duration"})


@dataclass(frozen=True, slots=True)
class CertificatePatch:
    """
    JSON merge-patch over a certificate.

    ``changes`` holds only the fields present in the payload. ``tag_names``
    is ``None`` when the payload does not mention tags.
    """

    changes: Mapping[str, Any] = field(default_factory=dict)
    tag_names: tuple[str, ...] | None = None

    def validate(self) -> None:
        unknown = sorted(set(self.changes) - PATCHABLE_FIELDS)
        if unknown:
            raise ValidationError(
                errors=[
                    {"field": name, "message": "Field cannot be patched", "code": "NOT_PATCHABLE"}
                    for name in unknown
                ]
            )

    def apply_to(self, certificate: Certificate) -> Certificate:
        """Return a copy of ``certificate`` with the patched fields replaced."""
        self.validate()
        return replace(certificate, **dict(self.changes))
