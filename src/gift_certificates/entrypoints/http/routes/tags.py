from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from gift_certificates.domain.paging import PageRequest
from gift_certificates.entrypoints.http.dependencies import (
    get_create_tag_use_case,
    get_delete_tag_use_case,
    get_get_tag_by_id_use_case,
    get_list_tags_use_case,
)
from gift_certificates.entrypoints.http.dtos.paging import PageQueryDTO
from gift_certificates.entrypoints.http.dtos.tags import (
    TagCreateDTO,
    TagListResponseDTO,
    TagResponseDTO,
)
from gift_certificates.entrypoints.http.error_responses import error_responses
from gift_certificates.entrypoints.http.mappers.tag_mapper import TagMapper
from gift_certificates.use_cases.create_tag import CreateTag, CreateTagRequest
from gift_certificates.use_cases.delete_tag import DeleteTag, DeleteTagRequest
from gift_certificates.use_cases.get_tag_by_id import GetTagById, GetTagByIdRequest
from gift_certificates.use_cases.list_tags import ListTags, ListTagsRequest

router = APIRouter(tags=["Tags"])


@router.get(
    "/tags",
    response_model=TagListResponseDTO,
    summary="List tags",
    responses=error_responses(422, 500),
)
def list_tags(
    query: Annotated[PageQueryDTO, Query()],
    use_case: ListTags = Depends(get_list_tags_use_case),
) -> TagListResponseDTO:
    page = PageRequest(page=query.page, page_size=query.page_size)
    result = use_case.execute(ListTagsRequest(page=page))
    return TagMapper.to_list_response(result.tags, page=query.page, page_size=query.page_size)


@router.get(
    "/tags/{tag_id}",
    response_model=TagResponseDTO,
    summary="Get a tag",
    responses=error_responses(400, 404, 500),
)
def get_tag(
    tag_id: int,
    use_case: GetTagById = Depends(get_get_tag_by_id_use_case),
) -> TagResponseDTO:
    result = use_case.execute(GetTagByIdRequest(tag_id=tag_id))
    return TagMapper.to_tag_response(result.tag)


@router.post(
    "/tags",
    response_model=TagResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a tag",
    description="Create a tag. Tag names are unique; a duplicate name is a 409.",
    responses=error_responses(400, 409, 422, 500),
)
def create_tag(
    payload: TagCreateDTO,
    use_case: CreateTag = Depends(get_create_tag_use_case),
) -> TagResponseDTO:
    result = use_case.execute(CreateTagRequest(name=payload.name))
    return TagMapper.to_tag_response(result.tag)


@router.delete(
    "/tags/{tag_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a tag",
    description="Delete a tag. It is removed from every certificate carrying it.",
    responses=error_responses(400, 404, 500),
)
def delete_tag(
    tag_id: int,
    use_case: DeleteTag = Depends(get_delete_tag_use_case),
) -> Response:
    use_case.execute(DeleteTagRequest(tag_id=tag_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
