from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from gift_certificates.domain.certificate import Certificate
from gift_certificates.domain.errors import StorageError
from gift_certificates.ports.certificate_repository import CertificateRepository
from gift_certificates.use_cases.assign_tags import AssignTags

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreateCertificateRequest:
    certificate: Certificate
    tag_names: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class CreateCertificateResponse:
    certificate: Certificate


class CreateCertificate:
    """
    Create a certificate and attach its tags.

    Responsibilities:
    - Validate certificate fields and tag names before any write
    - Resolve requested tags, creating missing ones
    - Fall back to the default tag when no tags are requested
    - Persist the certificate with its tag associations in one repository save

    All writes share the caller's unit of work, so a failure while tagging
    leaves no half-created certificate behind.
    """

    def __init__(
        self,
        certificate_repository: CertificateRepository,
        assign_tags: AssignTags,
    ) -> None:
        self._certificate_repository = certificate_repository
        self._assign_tags = assign_tags

    def execute(self, request: CreateCertificateRequest) -> CreateCertificateResponse:
        """
        Raises:
            ValidationError: If certificate fields or tag names are invalid
            StorageError: If the storage engine fails
        """
        request.certificate.validate()
        AssignTags.validate_names(request.tag_names)

        if request.tag_names:
            tags = self._assign_tags.resolve(request.tag_names)
        else:
            tags = (self._assign_tags.resolve_default(),)

        certificate_id = self._certificate_repository.save(
            replace(request.certificate, id=None, tags=tags)
        )

        logger.info(
            "Certificate created",
            extra={"certificate_id": certificate_id, "tags": [tag.name for tag in tags]},
        )

        certificate = self._certificate_repository.find(certificate_id)
        if certificate is None:
            raise StorageError(f"Certificate {certificate_id} missing after save")

        return CreateCertificateResponse(certificate=certificate)
