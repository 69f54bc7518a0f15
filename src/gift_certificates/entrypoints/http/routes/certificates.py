from typing import Annotated

from fastapi import APIRouter, Body, Depends, Query, Response, status

from gift_certificates.entrypoints.http.dependencies import (
    get_create_certificate_use_case,
    get_delete_certificate_use_case,
    get_get_certificate_by_id_use_case,
    get_search_certificates_use_case,
    get_update_certificate_use_case,
)
from gift_certificates.entrypoints.http.dtos.certificates import (
    CertificateCreateDTO,
    CertificatePatchDTO,
    CertificateResponseDTO,
    CertificateSearchResponseDTO,
    CertificatesSearchQueryDTO,
)
from gift_certificates.entrypoints.http.error_responses import error_responses
from gift_certificates.entrypoints.http.mappers.certificate_mapper import CertificateMapper
from gift_certificates.use_cases.create_certificate import CreateCertificate
from gift_certificates.use_cases.delete_certificate import (
    DeleteCertificate,
    DeleteCertificateRequest,
)
from gift_certificates.use_cases.get_certificate_by_id import (
    GetCertificateById,
    GetCertificateByIdRequest,
)
from gift_certificates.use_cases.search_certificates import SearchCertificates
from gift_certificates.use_cases.update_certificate import (
    UpdateCertificate,
    UpdateCertificateRequest,
)

MERGE_PATCH_MEDIA_TYPE = "application/merge-patch+json"

router = APIRouter(tags=["Certificates"])


@router.get(
    "/certificates",
    response_model=CertificateSearchResponseDTO,
    summary="Search gift certificates",
    description="""
    Search gift certificates with optional filters, sorting and pagination.

    ## Filters
    - All filters use AND semantics
    - name/description: case-insensitive substring match
    - tag: certificates carrying this tag
    - tags: certificates carrying any of the listed tags (repeat the parameter)

    ## Sorting
    - sort_by: name, create_date or price
    - sort_order: DESC for descending, anything else ascending

    ## Pagination
    - 1-based page, default page_size 20, max 200

    ## Example
    ```
    GET /gift-certificates/certificates?name=spa&sort_by=price&sort_order=DESC
    ```
    """,
    responses=error_responses(400, 422, 500),
)
def search_certificates(
    query: Annotated[CertificatesSearchQueryDTO, Query()],
    use_case: SearchCertificates = Depends(get_search_certificates_use_case),
) -> CertificateSearchResponseDTO:
    """Search certificates endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = CertificateMapper.to_domain_request(query)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return CertificateMapper.to_search_response(
        result=result,
        page=query.page,
        page_size=query.page_size,
    )


@router.get(
    "/certificates/{certificate_id}",
    response_model=CertificateResponseDTO,
    summary="Get a gift certificate",
    responses=error_responses(400, 404, 500),
)
def get_certificate(
    certificate_id: int,
    use_case: GetCertificateById = Depends(get_get_certificate_by_id_use_case),
) -> CertificateResponseDTO:
    result = use_case.execute(GetCertificateByIdRequest(certificate_id=certificate_id))
    return CertificateMapper.to_certificate_response(result.certificate)


@router.post(
    "/certificates",
    response_model=CertificateResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a gift certificate",
    description="""
    Create a gift certificate. Tags that do not exist yet are created.
    When no tags are given the default tag is assigned.

    ## Monetary Values
    - price is a decimal string with up to 2 decimal places (e.g., "50.00")
    """,
    responses=error_responses(400, 409, 422, 500),
)
def create_certificate(
    payload: CertificateCreateDTO,
    use_case: CreateCertificate = Depends(get_create_certificate_use_case),
) -> CertificateResponseDTO:
    request = CertificateMapper.to_domain_create_request(payload)
    result = use_case.execute(request)
    return CertificateMapper.to_certificate_response(result.certificate)


@router.patch(
    "/certificates/{certificate_id}",
    response_model=CertificateResponseDTO,
    summary="Update a gift certificate",
    description="""
    Apply a JSON merge patch (application/merge-patch+json) to a certificate.

    - Only the fields present in the body change
    - Tags listed in the body are added to the certificate
    """,
    responses=error_responses(400, 404, 422, 500),
)
def update_certificate(
    certificate_id: int,
    payload: Annotated[CertificatePatchDTO, Body(media_type=MERGE_PATCH_MEDIA_TYPE)],
    use_case: UpdateCertificate = Depends(get_update_certificate_use_case),
) -> CertificateResponseDTO:
    request = UpdateCertificateRequest(
        certificate_id=certificate_id,
        patch=CertificateMapper.to_domain_patch(payload),
    )
    result = use_case.execute(request)
    return CertificateMapper.to_certificate_response(result.certificate)


@router.delete(
    "/certificates/{certificate_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a gift certificate",
    responses=error_responses(400, 404, 500),
)
def delete_certificate(
    certificate_id: int,
    use_case: DeleteCertificate = Depends(get_delete_certificate_use_case),
) -> Response:
    use_case.execute(DeleteCertificateRequest(certificate_id=certificate_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
