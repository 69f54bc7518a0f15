from __future__ import annotations

import logging
from dataclasses import dataclass

from gift_certificates.domain.errors import NotFoundError
from gift_certificates.domain.identifiers import validate_identifier
from gift_certificates.ports.certificate_repository import CertificateRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeleteCertificateRequest:
    certificate_id: int


class DeleteCertificate:
    def __init__(self, certificate_repository: CertificateRepository) -> None:
        self._certificate_repository = certificate_repository

    def execute(self, request: DeleteCertificateRequest) -> None:
        validate_identifier("certificate_id", request.certificate_id)

        if not self._certificate_repository.delete(request.certificate_id):
            raise NotFoundError(resource="Certificate", identifier=request.certificate_id)

        logger.info("Certificate deleted", extra={"certificate_id": request.certificate_id})
