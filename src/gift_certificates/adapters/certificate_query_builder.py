"""Translates certificate filters and a page window into SQLAlchemy statements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from sqlalchemy import func, select
from sqlalchemy.orm import aliased

from gift_certificates.domain.certificate import CertificateFilters, SortField
from gift_certificates.domain.paging import PageRequest, PagingValidationError
from gift_certificates.infra.db.models.certificate import CertificateRow, TagRow

if TYPE_CHECKING:
    from sqlalchemy.sql import Select


# Allow-list: only these columns can ever reach ORDER BY
SORTABLE_COLUMNS: dict[SortField, Any] = {
    SortField.NAME: CertificateRow.name,
    SortField.CREATE_DATE: CertificateRow.create_date,
    SortField.PRICE: CertificateRow.price,
}


@dataclass(frozen=True, slots=True)
class BuiltQuery:
    """Executable statements plus the window they were built for."""

    statement: Select[tuple[CertificateRow]]
    count_statement: Select[tuple[int]]
    offset: int
    limit: int


class CertificateQueryBuilder:
    """
    Builds certificate search queries.

    Policy:
    - Every present criterion adds one AND condition
    - Name and description match as substrings, case-insensitively, with LIKE
      wildcards in the input escaped
    - A single tag name is an equality join against the tag set
    - A tag name list is an IN join (certificates carrying any listed tag)
    - Tag joins make the query DISTINCT so a certificate appears once
    - Sorting resolves through SORTABLE_COLUMNS; id is always the final key
    - offset = (page - 1) * page_size, limit = page_size
    """

    def build(self, filters: CertificateFilters, page: PageRequest) -> BuiltQuery:
        """
        Build the paged SELECT and the matching COUNT statement.

        Raises:
            PagingValidationError: If page or page_size is below 1
        """
        if page.page < 1 or page.page_size < 1:
            raise PagingValidationError(
                "page and page_size must be >= 1",
                page=page.page,
                page_size=page.page_size,
            )

        query = self.build_filtered(filters)
        count_statement = select(func.count()).select_from(query.subquery())

        statement = self.apply_sort(query, filters).offset(page.offset).limit(page.limit)

        return BuiltQuery(
            statement=statement,
            count_statement=count_statement,
            offset=page.offset,
            limit=page.limit,
        )

    def build_filtered(self, filters: CertificateFilters) -> Select[tuple[CertificateRow]]:
        query = select(CertificateRow)
        joined = False

        if filters.has_tag_name():
            tag = aliased(TagRow)
            query = query.join(CertificateRow.tags.of_type(tag)).where(
                tag.name == filters.tag_name
            )
            joined = True

        if filters.has_tag_names():
            any_tag = aliased(TagRow)
            query = query.join(CertificateRow.tags.of_type(any_tag)).where(
                any_tag.name.in_(filters.tag_names)
            )
            joined = True

        if filters.has_description_part():
            query = query.where(
                CertificateRow.description.icontains(filters.description_part, autoescape=True)
            )

        if filters.has_name_part():
            query = query.where(CertificateRow.name.icontains(filters.name_part, autoescape=True))

        # One row per certificate however many of its tags matched
        if joined:
            query = query.distinct()

        return query

    def apply_sort(
        self, query: Select[tuple[CertificateRow]], filters: CertificateFilters
    ) -> Select[tuple[CertificateRow]]:
        sort_field = filters.sort_field
        if sort_field is not None:
            column = SORTABLE_COLUMNS[sort_field]
            query = query.order_by(column.desc() if filters.is_descending else column.asc())

        return query.order_by(CertificateRow.id.asc())
