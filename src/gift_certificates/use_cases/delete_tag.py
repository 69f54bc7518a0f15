from __future__ import annotations

import logging
from dataclasses import dataclass

from gift_certificates.domain.errors import NotFoundError
from gift_certificates.domain.identifiers import validate_identifier
from gift_certificates.ports.tag_repository import TagRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeleteTagRequest:
    tag_id: int


class DeleteTag:
    def __init__(self, tag_repository: TagRepository) -> None:
        self._tag_repository = tag_repository

    def execute(self, request: DeleteTagRequest) -> None:
        validate_identifier("tag_id", request.tag_id)

        if not self._tag_repository.delete(request.tag_id):
            raise NotFoundError(resource="Tag", identifier=request.tag_id)

        logger.info("Tag deleted", extra={"tag_id": request.tag_id})
