from __future__ import annotations

from gift_certificates.domain.tag import Tag
from gift_certificates.entrypoints.http.dtos.tags import TagListResponseDTO, TagResponseDTO


class TagMapper:
    """Maps between REST DTOs and domain models for tags."""

    @staticmethod
    def to_tag_response(tag: Tag) -> TagResponseDTO:
        return TagResponseDTO(id=tag.id, name=tag.name)

    @staticmethod
    def to_list_response(tags: list[Tag], page: int, page_size: int) -> TagListResponseDTO:
        return TagListResponseDTO(
            tags=[TagMapper.to_tag_response(tag) for tag in tags],
            page=page,
            page_size=page_size,
        )
