from __future__ import annotations

import logging
from dataclasses import dataclass

from gift_certificates.domain.certificate import Certificate, CertificatePatch
from gift_certificates.domain.errors import NotFoundError
from gift_certificates.domain.identifiers import validate_identifier
from gift_certificates.ports.certificate_repository import CertificateRepository
from gift_certificates.use_cases.assign_tags import AssignTags, AssignTagsRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateCertificateRequest:
    certificate_id: int
    patch: CertificatePatch


@dataclass(frozen=True, slots=True)
class UpdateCertificateResponse:
    certificate: Certificate


class UpdateCertificate:
    """
    Apply a merge patch to an existing certificate.

    Tags listed in the patch are added to the certificate (missing tags are
    created); tags already assigned are kept.
    """

    def __init__(
        self,
        certificate_repository: CertificateRepository,
        assign_tags: AssignTags,
    ) -> None:
        self._certificate_repository = certificate_repository
        self._assign_tags = assign_tags

    def execute(self, request: UpdateCertificateRequest) -> UpdateCertificateResponse:
        """
        Raises:
            ValidationError: If the patch or the merged certificate is invalid
            NotFoundError: If no certificate has this id
            StorageError: If the storage engine fails
        """
        validate_identifier("certificate_id", request.certificate_id)
        request.patch.validate()

        existing = self._certificate_repository.find(request.certificate_id)
        if existing is None:
            raise NotFoundError(resource="Certificate", identifier=request.certificate_id)

        merged = request.patch.apply_to(existing)
        merged.validate()
        if request.patch.tag_names:
            AssignTags.validate_names(request.patch.tag_names)

        updated = self._certificate_repository.update(merged)
        if updated is None:
            raise NotFoundError(resource="Certificate", identifier=request.certificate_id)

        if request.patch.tag_names:
            self._assign_tags.execute(
                AssignTagsRequest(
                    certificate_id=request.certificate_id,
                    tag_names=request.patch.tag_names,
                )
            )
            updated = self._certificate_repository.find(request.certificate_id) or updated

        logger.info(
            "Certificate updated",
            extra={
                "certificate_id": request.certificate_id,
                "fields": sorted(request.patch.changes),
            },
        )

        return UpdateCertificateResponse(certificate=updated)
