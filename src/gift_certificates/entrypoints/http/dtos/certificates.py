from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from gift_certificates.domain.certificate import DURATION_MAX
from gift_certificates.entrypoints.http.dtos.paging import PageQueryDTO
from gift_certificates.entrypoints.http.dtos.tags import TagResponseDTO

# At most 10 integer digits and 2 decimals: NUMERIC(12, 2)
PRICE_PATTERN = r"^\d{1,10}(\.\d{1,2})?$"


class CertificateResponseDTO(BaseModel):
    id: int
    name: str
    description: str
    price: str
    duration: int
    create_date: datetime | None = None
    last_update_date: datetime | None = None
    tags: list[TagResponseDTO] = []


class CertificatesSearchQueryDTO(PageQueryDTO):
    """Query parameters for searching certificates."""

    name: str | None = Field(
        default=None,
        description="Part of the certificate name (case-insensitive substring)",
        examples=["spa"],
    )
    description: str | None = Field(
        default=None,
        description="Part of the certificate description (case-insensitive substring)",
        examples=["massage"],
    )
    tag: str | None = Field(
        default=None,
        description="Only certificates carrying this tag",
        examples=["wellness"],
    )
    tags: list[str] | None = Field(
        default=None,
        description="Certificates carrying any of these tags (repeat the parameter)",
        examples=[["wellness", "luxury"]],
    )
    sort_by: str | None = Field(
        default=None,
        description="Sort field: name, create_date or price",
        examples=["price"],
    )
    sort_order: str | None = Field(
        default=None,
        description="DESC for descending order; anything else sorts ascending",
        examples=["DESC"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "spa",
                "tags": ["wellness", "luxury"],
                "sort_by": "price",
                "sort_order": "DESC",
                "page": 1,
                "page_size": 20,
            }
        }
    )


class CertificateCreateDTO(BaseModel):
    """Request payload for creating a certificate."""

    name: str = Field(description="Certificate name", examples=["Day Spa"])
    description: str = Field(
        default="",
        description="Free-text description",
        examples=["Full day access to the spa"],
    )
    price: str = Field(
        description="Price as decimal string",
        examples=["50.00"],
        pattern=PRICE_PATTERN,
    )
    duration: int = Field(description="Validity in days", examples=[30], le=DURATION_MAX)
    tags: list[str] = Field(
        default_factory=list,
        description="Tag names; the default tag is assigned when empty",
        examples=[["wellness"]],
    )

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "name": "Day Spa",
                "description": "Full day access to the spa",
                "price": "50.00",
                "duration": 30,
                "tags": ["wellness"],
            }
        },
    )


class CertificatePatchDTO(BaseModel):
    """
    JSON merge-patch payload. Only the fields present are changed; tags are
    added to the certificate.
    """

    name: str | None = None
    description: str | None = None
    price: str | None = Field(default=None, pattern=PRICE_PATTERN)
    duration: int | None = Field(default=None, le=DURATION_MAX)
    tags: list[str] | None = None

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={"example": {"price": "75.00", "tags": ["luxury"]}},
    )


class CertificateSearchResponseDTO(BaseModel):
    certificates: list[CertificateResponseDTO]
    total: int
    page: int
    page_size: int
