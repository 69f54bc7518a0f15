from __future__ import annotations

import logging
from dataclasses import dataclass

from gift_certificates.domain.errors import ConflictError
from gift_certificates.domain.tag import Tag
from gift_certificates.ports.tag_repository import TagRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreateTagRequest:
    name: str


@dataclass(frozen=True, slots=True)
class CreateTagResponse:
    tag: Tag


class CreateTag:
    """
    Create a tag with a unique name.

    The name is checked against existing tags first; the repository's unique
    constraint is the final guard.
    """

    def __init__(self, tag_repository: TagRepository) -> None:
        self._tag_repository = tag_repository

    def execute(self, request: CreateTagRequest) -> CreateTagResponse:
        """
        Raises:
            ValidationError: If the name is blank or too long
            ConflictError: If a tag with this name already exists
        """
        tag = Tag(name=request.name)
        tag.validate()

        if self._tag_repository.find_by_name(request.name) is not None:
            raise ConflictError(
                f"Tag with name '{request.name}' already exists", name=request.name
            )

        tag_id = self._tag_repository.save(tag)
        logger.info("Tag created", extra={"tag_id": tag_id, "tag_name": request.name})

        return CreateTagResponse(tag=Tag(id=tag_id, name=request.name))
