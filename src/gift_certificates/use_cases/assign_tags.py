"""Tag assignment shared by certificate creation and update."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from gift_certificates.domain.tag import Tag
from gift_certificates.ports.tag_repository import TagRepository

logger = logging.getLogger(__name__)

DEFAULT_TAG_NAME = "Main"


@dataclass(frozen=True, slots=True)
class AssignTagsRequest:
    certificate_id: int
    tag_names: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class AssignTagsResponse:
    tags: tuple[Tag, ...]


class AssignTags:
    """
    Tag-list update for a certificate.

    Each name is looked up; missing tags are created on first use, then the
    tag is assigned to the certificate. All names are validated before the
    first write.
    """

    def __init__(
        self,
        tag_repository: TagRepository,
        default_tag_name: str = DEFAULT_TAG_NAME,
    ) -> None:
        self._tag_repository = tag_repository
        self._default_tag_name = default_tag_name

    @property
    def default_tag_name(self) -> str:
        return self._default_tag_name

    @staticmethod
    def validate_names(tag_names: Iterable[str]) -> None:
        for name in tag_names:
            Tag(name=name).validate()

    def resolve(self, tag_names: Iterable[str]) -> tuple[Tag, ...]:
        """
        Map names to stored tags, creating the missing ones.

        Raises:
            ValidationError: If any name is invalid (nothing is written)
        """
        names = list(dict.fromkeys(tag_names))
        self.validate_names(names)

        tags: list[Tag] = []
        for name in names:
            tag = self._tag_repository.find_by_name(name)
            if tag is None:
                tag_id = self._tag_repository.save(Tag(name=name))
                tag = Tag(id=tag_id, name=name)
                logger.info("Tag created", extra={"tag_id": tag_id, "tag_name": name})
            tags.append(tag)

        return tuple(tags)

    def resolve_default(self) -> Tag:
        return self.resolve([self._default_tag_name])[0]

    def execute(self, request: AssignTagsRequest) -> AssignTagsResponse:
        tags = self.resolve(request.tag_names)

        for tag in tags:
            self._tag_repository.assign_tag(tag.id, request.certificate_id)  # type: ignore[arg-type]

        return AssignTagsResponse(tags=tags)
