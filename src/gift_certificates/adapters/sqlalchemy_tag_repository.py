"""SQLAlchemy implementation of TagRepository."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from gift_certificates.domain.errors import ConflictError, NotFoundError, StorageError
from gift_certificates.domain.paging import PageRequest
from gift_certificates.domain.tag import Tag
from gift_certificates.infra.db.models.certificate import CertificateRow, TagRow
from gift_certificates.ports.tag_repository import TagRepository

logger = logging.getLogger(__name__)


class SqlAlchemyTagRepository(TagRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def find(self, tag_id: int) -> Tag | None:
        try:
            row = self._session.get(TagRow, tag_id)
        except SQLAlchemyError as exc:
            raise self._storage_error("get a tag", exc) from exc
        return self._to_domain(row) if row else None

    def find_by_name(self, name: str) -> Tag | None:
        try:
            row = self._session.execute(
                select(TagRow).where(TagRow.name == name)
            ).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise self._storage_error("get a tag by name", exc) from exc
        return self._to_domain(row) if row else None

    def find_all(self, page: PageRequest) -> list[Tag]:
        query = select(TagRow).order_by(TagRow.id).offset(page.offset).limit(page.limit)
        try:
            rows = self._session.execute(query).scalars().all()
        except SQLAlchemyError as exc:
            raise self._storage_error("get a list of tags", exc) from exc
        return [self._to_domain(row) for row in rows]

    def save(self, tag: Tag) -> int:
        """
        Persist a new tag.

        Raises:
            ConflictError: If the unique name constraint rejects the insert
            StorageError: On any other storage failure
        """
        row = TagRow(name=tag.name)
        try:
            self._session.add(row)
            self._session.flush()
        except IntegrityError as exc:
            self._session.rollback()
            raise ConflictError(
                f"Tag with name '{tag.name}' already exists", name=tag.name
            ) from exc
        except SQLAlchemyError as exc:
            raise self._storage_error("save tag", exc, rollback=True) from exc
        return row.id

    def delete(self, tag_id: int) -> bool:
        try:
            row = self._session.get(TagRow, tag_id)
            if row is None:
                return False

            # Association rows go with the tag; clearing also updates loaded certificates
            row.certificates.clear()
            self._session.delete(row)
            self._session.flush()
            return True
        except SQLAlchemyError as exc:
            raise self._storage_error("delete tag", exc, rollback=True) from exc

    def assign_tag(self, tag_id: int, certificate_id: int) -> None:
        """
        Associate a tag with a certificate. Assigning twice is a no-op.

        Raises:
            NotFoundError: If either the tag or the certificate does not exist
        """
        try:
            tag = self._session.get(TagRow, tag_id)
            certificate = self._session.get(CertificateRow, certificate_id)
            if tag is None:
                raise NotFoundError(resource="Tag", identifier=tag_id)
            if certificate is None:
                raise NotFoundError(resource="Certificate", identifier=certificate_id)

            if tag not in certificate.tags:
                certificate.tags.append(tag)
                self._session.flush()
        except SQLAlchemyError as exc:
            raise self._storage_error("assign tag", exc, rollback=True) from exc

    def _storage_error(
        self, action: str, exc: SQLAlchemyError, rollback: bool = False
    ) -> StorageError:
        if rollback:
            self._session.rollback()

        logger.error(
            "Tag storage operation failed",
            extra={"action": action, "error_type": type(exc).__name__},
        )
        return StorageError(f"Unable to {action}: {exc}")

    def _to_domain(self, row: TagRow) -> Tag:
        return Tag(id=row.id, name=row.name)
