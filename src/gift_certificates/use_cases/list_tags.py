from __future__ import annotations

from dataclasses import dataclass

from gift_certificates.domain.paging import PageRequest
from gift_certificates.domain.tag import Tag
from gift_certificates.ports.tag_repository import TagRepository


@dataclass(frozen=True, slots=True)
class ListTagsRequest:
    page: PageRequest


@dataclass(frozen=True, slots=True)
class ListTagsResponse:
    tags: list[Tag]


class ListTags:
    def __init__(self, tag_repository: TagRepository) -> None:
        self._tag_repository = tag_repository

    def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        request.page.validate()
        return ListTagsResponse(tags=self._tag_repository.find_all(request.page))
