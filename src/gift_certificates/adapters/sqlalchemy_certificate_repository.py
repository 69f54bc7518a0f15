"""SQLAlchemy implementation of CertificateRepository."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gift_certificates.adapters.certificate_query_builder import CertificateQueryBuilder
from gift_certificates.domain.certificate import Certificate, CertificateFilters
from gift_certificates.domain.errors import StorageError
from gift_certificates.domain.paging import PageRequest
from gift_certificates.domain.tag import Tag
from gift_certificates.infra.db.models.certificate import CertificateRow, TagRow
from gift_certificates.ports.certificate_repository import CertificateRepository, SearchResult

logger = logging.getLogger(__name__)


class SqlAlchemyCertificateRepository(CertificateRepository):
    """
    SQLAlchemy implementation of CertificateRepository.

    - Runs inside the caller's session (one unit of work per request)
    - Delegates query composition to CertificateQueryBuilder
    - Returns total_count via COUNT(*) over the filtered query
    - Converts CertificateRow (infrastructure) to Certificate (domain)
    - Wraps SQLAlchemyError in StorageError; writes roll the session back first
    """

    def __init__(
        self,
        session: Session,
        query_builder: CertificateQueryBuilder | None = None,
    ) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
            query_builder: Search query builder (a default one if omitted)
        """
        self._session = session
        self._query_builder = query_builder or CertificateQueryBuilder()

    def find(self, certificate_id: int) -> Certificate | None:
        try:
            row = self._session.get(CertificateRow, certificate_id)
            return self._to_domain(row) if row else None
        except SQLAlchemyError as exc:
            raise self._storage_error("get a certificate", exc) from exc

    def save(self, certificate: Certificate) -> int:
        try:
            row = CertificateRow(
                name=certificate.name,
                description=certificate.description,
                price=certificate.price,
                duration=certificate.duration,
            )
            tag_ids = [tag.id for tag in certificate.tags if tag.id is not None]
            if tag_ids:
                row.tags = list(
                    self._session.scalars(select(TagRow).where(TagRow.id.in_(tag_ids))).all()
                )

            self._session.add(row)
            self._session.flush()
            return row.id
        except SQLAlchemyError as exc:
            raise self._storage_error("save certificate", exc, rollback=True) from exc

    def update(self, certificate: Certificate) -> Certificate | None:
        try:
            row = self._session.get(CertificateRow, certificate.id)
            if row is None:
                return None

            row.name = certificate.name
            row.description = certificate.description
            row.price = certificate.price
            row.duration = certificate.duration

            self._session.flush()
            # Pick up the server-side last_update_date
            self._session.refresh(row)
            return self._to_domain(row)
        except SQLAlchemyError as exc:
            raise self._storage_error("update certificate", exc, rollback=True) from exc

    def delete(self, certificate_id: int) -> bool:
        try:
            row = self._session.get(CertificateRow, certificate_id)
            if row is None:
                return False

            self._session.delete(row)
            self._session.flush()
            return True
        except SQLAlchemyError as exc:
            raise self._storage_error("delete certificate", exc, rollback=True) from exc

    def search(self, filters: CertificateFilters, page: PageRequest) -> SearchResult:
        """
        Search certificates with filters and paging.

        Executes two queries:
        1. COUNT(*) to get total matching certificates (before paging)
        2. SELECT with OFFSET/LIMIT to get the requested page

        Args:
            filters: Filter criteria (AND semantics) - must be pre-validated
            page: Page window - must be pre-validated

        Returns:
            SearchResult with certificates and total_count
        """
        built = self._query_builder.build(filters, page)

        try:
            total_count = self._session.execute(built.count_statement).scalar_one()
            rows = self._session.execute(built.statement).scalars().all()
        except SQLAlchemyError as exc:
            raise self._storage_error("get a list of certificates", exc) from exc

        return SearchResult(
            certificates=[self._to_domain(row) for row in rows],
            total_count=total_count,
        )

    def _storage_error(
        self, action: str, exc: SQLAlchemyError, rollback: bool = False
    ) -> StorageError:
        if rollback:
            self._session.rollback()

        logger.error(
            "Certificate storage operation failed",
            extra={"action": action, "error_type": type(exc).__name__},
        )
        return StorageError(f"Unable to {action}: {exc}")

    def _to_domain(self, row: CertificateRow) -> Certificate:
        """
        Convert database model (CertificateRow) to domain entity (Certificate).

        Args:
            row: SQLAlchemy CertificateRow model

        Returns:
            Certificate domain entity
        """
        return Certificate(
            id=row.id,
            name=row.name,
            description=row.description,
            price=row.price,  # Already Decimal from NUMERIC column
            duration=row.duration,
            create_date=row.create_date,
            last_update_date=row.last_update_date,
            tags=tuple(Tag(id=tag.id, name=tag.name) for tag in row.tags),
        )
