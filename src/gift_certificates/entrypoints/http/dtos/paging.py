from pydantic import BaseModel, Field

from gift_certificates.domain.paging import DEFAULT_PAGE_SIZE, MAX_PAGE, MAX_PAGE_SIZE


class PageQueryDTO(BaseModel):
    """1-based pagination query parameters."""

    page: int = Field(
        default=1,
        description="Page number (1-based)",
        examples=[1],
        ge=1,
        le=MAX_PAGE,
    )
    page_size: int = Field(
        default=DEFAULT_PAGE_SIZE,
        description="Maximum number of results per page",
        examples=[DEFAULT_PAGE_SIZE],
        ge=1,
        le=MAX_PAGE_SIZE,
    )
