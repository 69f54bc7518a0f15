from __future__ import annotations

from dataclasses import dataclass

from gift_certificates.domain.certificate import Certificate, CertificateFilters
from gift_certificates.domain.paging import PageRequest
from gift_certificates.ports.certificate_repository import CertificateRepository


@dataclass(frozen=True, slots=True)
class SearchCertificatesRequest:
    filters: CertificateFilters
    page: PageRequest


@dataclass(frozen=True, slots=True)
class SearchCertificatesResponse:
    certificates: list[Certificate]
    total_count: int  # Matching certificates before paging


class SearchCertificates:
    """
    Certificate search with filters, sorting and pagination.

    This use case validates filter and page parameters and delegates
    query composition to the repository adapter. No filtering logic exists
    in the use case.
    """

    def __init__(self, certificate_repository: CertificateRepository) -> None:
        self._certificate_repository = certificate_repository

    def execute(self, request: SearchCertificatesRequest) -> SearchCertificatesResponse:
        """
        Execute certificate search.

        Validates request parameters before delegating to repository.

        Args:
            request: Search parameters (filters and page)

        Returns:
            Response containing matching certificates (possibly empty) and total count

        Raises:
            FilterValidationError: If the sort field is not sortable
            PagingValidationError: If page parameters are invalid
        """
        request.filters.validate()
        request.page.validate()

        result = self._certificate_repository.search(
            filters=request.filters,
            page=request.page,
        )

        return SearchCertificatesResponse(
            certificates=result.certificates,
            total_count=result.total_count,
        )
