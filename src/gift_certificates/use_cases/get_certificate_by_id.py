"""Get certificate by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from gift_certificates.domain.certificate import Certificate
from gift_certificates.domain.errors import NotFoundError
from gift_certificates.domain.identifiers import validate_identifier
from gift_certificates.ports.certificate_repository import CertificateRepository


@dataclass(frozen=True, slots=True)
class GetCertificateByIdRequest:
    """Request to get a certificate by ID."""

    certificate_id: int


@dataclass(frozen=True, slots=True)
class GetCertificateByIdResponse:
    """Response containing the requested certificate."""

    certificate: Certificate


class GetCertificateById:
    """
    Use case for retrieving a single certificate by ID.

    Responsibilities:
    - Validate certificate_id (must be a positive integer)
    - Delegate to repository for data access
    - Raise NotFoundError if the certificate doesn't exist
    """

    def __init__(self, certificate_repository: CertificateRepository) -> None:
        self._certificate_repository = certificate_repository

    def execute(self, request: GetCertificateByIdRequest) -> GetCertificateByIdResponse:
        """
        Raises:
            ValidationError: If certificate_id is not a positive integer
            NotFoundError: If no certificate has this id
        """
        validate_identifier("certificate_id", request.certificate_id)

        certificate = self._certificate_repository.find(request.certificate_id)

        if certificate is None:
            raise NotFoundError(resource="Certificate", identifier=request.certificate_id)

        return GetCertificateByIdResponse(certificate=certificate)
