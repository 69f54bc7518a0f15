from __future__ import annotations

from dataclasses import dataclass

from gift_certificates.domain.errors import ValidationError


DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 200
# OFFSET is a signed 64-bit value in the store
MAX_OFFSET = 2**63 - 1
MAX_PAGE = MAX_OFFSET // MAX_PAGE_SIZE + 1


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


@dataclass(frozen=True, slots=True)
class PageRequest:
    """1-based page window: offset = (page - 1) * page_size."""

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.page < 1:
            raise PagingValidationError("page must be >= 1")
        if self.page_size < 1:
            raise PagingValidationError("page_size must be >= 1")
        if self.page_size > MAX_PAGE_SIZE:
            raise PagingValidationError(f"page_size must be <= {MAX_PAGE_SIZE}")
        if self.offset > MAX_OFFSET:
            raise PagingValidationError(f"page is too large for page_size {self.page_size}")
