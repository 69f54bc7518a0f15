from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from gift_certificates.domain.certificate import Certificate, CertificateFilters
from gift_certificates.domain.paging import PageRequest


@dataclass(frozen=True)
class SearchResult:
    """Result from certificate search including pagination metadata."""

    certificates: list[Certificate]
    total_count: int  # Matching certificates before paging


class CertificateRepository(ABC):
    """
    Port for certificate data access.

    Read-path absence is a normal result (``None`` / ``False``), never an
    exception. Storage failures surface as ``StorageError`` after the unit of
    work has been rolled back.

    Contract (Preconditions):
        - filters, page and certificate fields are validated by the caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate
    """

    @abstractmethod
    def find(self, certificate_id: int) -> Certificate | None:
        """Return the certificate or ``None`` when no row has this id."""
        ...

    @abstractmethod
    def save(self, certificate: Certificate) -> int:
        """
        Persist a new certificate together with its tag associations.

        Tags carried by the certificate must already have ids.

        Returns:
            Generated certificate id
        """
        ...

    @abstractmethod
    def update(self, certificate: Certificate) -> Certificate | None:
        """Replace the stored fields by id; ``None`` when the id does not exist."""
        ...

    @abstractmethod
    def delete(self, certificate_id: int) -> bool:
        """Remove the certificate; ``False`` when the id does not exist."""
        ...

    @abstractmethod
    def search(self, filters: CertificateFilters, page: PageRequest) -> SearchResult:
        """
        Search certificates with filters and paging.

        Args:
            filters: Filter criteria (AND semantics) - pre-validated
            page: Page window - pre-validated

        Returns:
            SearchResult containing one page of certificates and the total count
        """
        ...
