from __future__ import annotations

from dataclasses import dataclass

from gift_certificates.domain.errors import NotFoundError
from gift_certificates.domain.identifiers import validate_identifier
from gift_certificates.domain.tag import Tag
from gift_certificates.ports.tag_repository import TagRepository


@dataclass(frozen=True, slots=True)
class GetTagByIdRequest:
    tag_id: int


@dataclass(frozen=True, slots=True)
class GetTagByIdResponse:
    tag: Tag


class GetTagById:
    def __init__(self, tag_repository: TagRepository) -> None:
        self._tag_repository = tag_repository

    def execute(self, request: GetTagByIdRequest) -> GetTagByIdResponse:
        validate_identifier("tag_id", request.tag_id)

        tag = self._tag_repository.find(request.tag_id)
        if tag is None:
            raise NotFoundError(resource="Tag", identifier=request.tag_id)

        return GetTagByIdResponse(tag=tag)
