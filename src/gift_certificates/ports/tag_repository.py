from __future__ import annotations

from abc import ABC, abstractmethod

from gift_certificates.domain.paging import PageRequest
from gift_certificates.domain.tag import Tag


class TagRepository(ABC):
    """
    Port for tag data access and tag-to-certificate assignment.

    Tag names are unique; ``save`` raises ``ConflictError`` on a duplicate name.
    """

    @abstractmethod
    def find(self, tag_id: int) -> Tag | None: ...

    @abstractmethod
    def find_by_name(self, name: str) -> Tag | None: ...

    @abstractmethod
    def find_all(self, page: PageRequest) -> list[Tag]: ...

    @abstractmethod
    def save(self, tag: Tag) -> int:
        """Persist a new tag and return its generated id."""
        ...

    @abstractmethod
    def delete(self, tag_id: int) -> bool: ...

    @abstractmethod
    def assign_tag(self, tag_id: int, certificate_id: int) -> None:
        """Associate an existing tag with an existing certificate (idempotent)."""
        ...
