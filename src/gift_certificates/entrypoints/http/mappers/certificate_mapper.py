from __future__ import annotations

from decimal import Decimal, InvalidOperation

from gift_certificates.domain.certificate import Certificate, CertificateFilters, CertificatePatch
from gift_certificates.domain.errors import ValidationError
from gift_certificates.domain.paging import PageRequest
from gift_certificates.entrypoints.http.dtos.certificates import (
    CertificateCreateDTO,
    CertificatePatchDTO,
    CertificateResponseDTO,
    CertificateSearchResponseDTO,
    CertificatesSearchQueryDTO,
)
from gift_certificates.entrypoints.http.mappers.tag_mapper import TagMapper
from gift_certificates.use_cases.create_certificate import CreateCertificateRequest
from gift_certificates.use_cases.search_certificates import (
    SearchCertificatesRequest,
    SearchCertificatesResponse,
)


def _to_decimal(field: str, value: str) -> Decimal:
    try:
        return Decimal(value)
    except (InvalidOperation, ValueError):
        raise ValidationError(
            errors=[
                {
                    "field": field,
                    "message": f"Must be a valid decimal: {value}",
                    "code": "INVALID_DECIMAL",
                }
            ]
        )


class CertificateMapper:
    """Maps between REST DTOs and domain models for certificates."""

    @staticmethod
    def to_domain_filters(dto: CertificatesSearchQueryDTO) -> CertificateFilters:
        """
        Converts query params to domain filters.

        Blank values become "no constraint" inside CertificateFilters itself.
        """
        return CertificateFilters(
            name_part=dto.name,
            description_part=dto.description,
            tag_name=dto.tag,
            tag_names=tuple(dto.tags) if dto.tags else None,
            sort_by=dto.sort_by,
            sort_order=dto.sort_order,
        )

    @staticmethod
    def to_domain_page(dto: CertificatesSearchQueryDTO) -> PageRequest:
        return PageRequest(page=dto.page, page_size=dto.page_size)

    @staticmethod
    def to_domain_request(dto: CertificatesSearchQueryDTO) -> SearchCertificatesRequest:
        """Convenience method: builds complete domain request from DTO."""
        return SearchCertificatesRequest(
            filters=CertificateMapper.to_domain_filters(dto),
            page=CertificateMapper.to_domain_page(dto),
        )

    @staticmethod
    def to_domain_create_request(dto: CertificateCreateDTO) -> CreateCertificateRequest:
        """
        Converts the create payload to a domain request.

        Handles string → Decimal conversion at the boundary.

        Raises:
            ValidationError: If price cannot be converted to a Decimal
        """
        certificate = Certificate(
            name=dto.name,
            description=dto.description,
            price=_to_decimal("price", dto.price),
            duration=dto.duration,
        )
        return CreateCertificateRequest(certificate=certificate, tag_names=tuple(dto.tags))

    @staticmethod
    def to_domain_patch(dto: CertificatePatchDTO) -> CertificatePatch:
        """
        Converts a merge-patch payload to a domain patch.

        Only fields present in the payload are carried over. An explicit null
        stays null so the merged certificate fails validation for required
        fields.
        """
        changes = dto.model_dump(exclude_unset=True)
        tag_names = changes.pop("tags", None)

        if changes.get("price") is not None:
            changes["price"] = _to_decimal("price", changes["price"])

        return CertificatePatch(
            changes=changes,
            tag_names=tuple(tag_names) if tag_names else None,
        )

    @staticmethod
    def to_certificate_response(certificate: Certificate) -> CertificateResponseDTO:
        """Converts a domain Certificate to its DTO (Decimal → str at the boundary)."""
        return CertificateResponseDTO(
            id=certificate.id,
            name=certificate.name,
            description=certificate.description,
            price=str(certificate.price),
            duration=certificate.duration,
            create_date=certificate.create_date,
            last_update_date=certificate.last_update_date,
            tags=[TagMapper.to_tag_response(tag) for tag in certificate.tags],
        )

    @staticmethod
    def to_search_response(
        result: SearchCertificatesResponse,
        page: int,
        page_size: int,
    ) -> CertificateSearchResponseDTO:
        """
        Converts domain search result to REST response with pagination metadata.

        Args:
            result: Domain search result containing certificates and total count
            page: Current page (echoed from request)
            page_size: Current page size (echoed from request)
        """
        return CertificateSearchResponseDTO(
            certificates=[
                CertificateMapper.to_certificate_response(certificate)
                for certificate in result.certificates
            ],
            total=result.total_count,
            page=page,
            page_size=page_size,
        )
