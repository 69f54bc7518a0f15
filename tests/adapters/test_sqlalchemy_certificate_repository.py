"""
Tests for SqlAlchemyCertificateRepository.

Queries run against in-memory SQLite; storage failures are simulated with a
mocked session.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from gift_certificates.adapters.sqlalchemy_certificate_repository import (
    SqlAlchemyCertificateRepository,
)
from gift_certificates.domain.certificate import Certificate, CertificateFilters
from gift_certificates.domain.errors import StorageError
from gift_certificates.domain.paging import PageRequest
from gift_certificates.domain.tag import Tag
from gift_certificates.ports.certificate_repository import SearchResult


@pytest.fixture
def repo(session: Session) -> SqlAlchemyCertificateRepository:
    return SqlAlchemyCertificateRepository(session)


def names(result: SearchResult) -> list[str]:
    return [certificate.name for certificate in result.certificates]


# ==============================================================================
# Search
# ==============================================================================


def test_search_by_name_part_sorted_by_price_desc(
    repo: SqlAlchemyCertificateRepository, seed_catalog: dict[str, int]
) -> None:
    result = repo.search(
        filters=CertificateFilters(name_part="spa", sort_by="price", sort_order="DESC"),
        page=PageRequest(page=1, page_size=2),
    )

    assert names(result) == ["Spa Retreat", "Day Spa"]
    assert result.total_count == 2


def test_search_without_criteria_returns_everything(
    repo: SqlAlchemyCertificateRepository, seed_catalog: dict[str, int]
) -> None:
    result = repo.search(filters=CertificateFilters(), page=PageRequest())

    assert names(result) == ["Day Spa", "Spa Retreat", "Gym Pass"]
    assert result.total_count == 3


def test_search_by_description_part(
    repo: SqlAlchemyCertificateRepository, seed_catalog: dict[str, int]
) -> None:
    result = repo.search(
        filters=CertificateFilters(description_part="MASSAGE"), page=PageRequest()
    )

    assert names(result) == ["Spa Retreat"]


def test_search_by_tag_name(
    repo: SqlAlchemyCertificateRepository, seed_catalog: dict[str, int]
) -> None:
    result = repo.search(
        filters=CertificateFilters(tag_name="wellness", sort_by="name"), page=PageRequest()
    )

    assert names(result) == ["Day Spa", "Spa Retreat"]
    assert result.total_count == 2


def test_search_by_tag_names_returns_deduplicated_union(
    repo: SqlAlchemyCertificateRepository, seed_catalog: dict[str, int]
) -> None:
    # Spa Retreat carries both tags and must appear once
    result = repo.search(
        filters=CertificateFilters(tag_names=("wellness", "luxury"), sort_by="price"),
        page=PageRequest(),
    )

    assert names(result) == ["Day Spa", "Spa Retreat"]
    assert result.total_count == 2


def test_search_combines_criteria_with_and(
    repo: SqlAlchemyCertificateRepository, seed_catalog: dict[str, int]
) -> None:
    result = repo.search(
        filters=CertificateFilters(name_part="spa", tag_name="luxury"), page=PageRequest()
    )

    assert names(result) == ["Spa Retreat"]


def test_search_treats_like_wildcards_literally(
    repo: SqlAlchemyCertificateRepository, seed_catalog: dict[str, int]
) -> None:
    result = repo.search(filters=CertificateFilters(name_part="%"), page=PageRequest())

    assert result.certificates == []
    assert result.total_count == 0


def test_search_pages_with_total_before_paging(
    repo: SqlAlchemyCertificateRepository, seed_catalog: dict[str, int]
) -> None:
    result = repo.search(
        filters=CertificateFilters(sort_by="price"),
        page=PageRequest(page=2, page_size=2),
    )

    assert names(result) == ["Spa Retreat"]
    assert result.total_count == 3


def test_search_past_last_page_is_empty(
    repo: SqlAlchemyCertificateRepository, seed_catalog: dict[str, int]
) -> None:
    result = repo.search(filters=CertificateFilters(), page=PageRequest(page=5, page_size=2))

    assert result.certificates == []
    assert result.total_count == 3


def test_search_loads_tags(
    repo: SqlAlchemyCertificateRepository, seed_catalog: dict[str, int]
) -> None:
    result = repo.search(filters=CertificateFilters(name_part="retreat"), page=PageRequest())

    assert result.certificates[0].tag_names == ("wellness", "luxury")
    assert result.certificates[0].price == Decimal("120.00")


# ==============================================================================
# Find / Save / Update / Delete
# ==============================================================================


def test_find_returns_certificate(
    repo: SqlAlchemyCertificateRepository, seed_catalog: dict[str, int]
) -> None:
    certificate = repo.find(seed_catalog["gym"])

    assert certificate is not None
    assert certificate.id == seed_catalog["gym"]
    assert certificate.name == "Gym Pass"
    assert certificate.duration == 31
    assert certificate.create_date is not None
    assert certificate.tag_names == ("sport",)


def test_find_missing_returns_none(repo: SqlAlchemyCertificateRepository) -> None:
    assert repo.find(999) is None


def test_save_persists_certificate_with_tags(
    repo: SqlAlchemyCertificateRepository, seed_catalog: dict[str, int]
) -> None:
    certificate_id = repo.save(
        Certificate(
            name="Sauna",
            description="Finnish sauna",
            price=Decimal("25.50"),
            duration=10,
            tags=(Tag(id=seed_catalog["wellness"], name="wellness"),),
        )
    )

    stored = repo.find(certificate_id)
    assert stored is not None
    assert stored.name == "Sauna"
    assert stored.price == Decimal("25.50")
    assert stored.tag_names == ("wellness",)
    assert stored.create_date is not None
    assert stored.last_update_date is not None


def test_update_replaces_fields(
    repo: SqlAlchemyCertificateRepository, seed_catalog: dict[str, int]
) -> None:
    existing = repo.find(seed_catalog["day_spa"])
    assert existing is not None

    updated = repo.update(
        Certificate(
            id=existing.id,
            name="Day Spa Deluxe",
            description=existing.description,
            price=Decimal("65.00"),
            duration=existing.duration,
        )
    )

    assert updated is not None
    assert updated.name == "Day Spa Deluxe"
    assert updated.price == Decimal("65.00")
    # Tag set is untouched by a field update
    assert updated.tag_names == ("wellness",)


def test_update_missing_returns_none(repo: SqlAlchemyCertificateRepository) -> None:
    missing = Certificate(
        id=999, name="Ghost", description="", price=Decimal("1.00"), duration=1
    )

    assert repo.update(missing) is None


def test_delete_removes_certificate(
    repo: SqlAlchemyCertificateRepository, seed_catalog: dict[str, int]
) -> None:
    assert repo.delete(seed_catalog["retreat"]) is True
    assert repo.find(seed_catalog["retreat"]) is None

    result = repo.search(filters=CertificateFilters(tag_name="luxury"), page=PageRequest())
    assert result.certificates == []


def test_delete_missing_returns_false(repo: SqlAlchemyCertificateRepository) -> None:
    assert repo.delete(999) is False


# ==============================================================================
# Storage failures
# ==============================================================================


def operational_error() -> OperationalError:
    return OperationalError("SELECT 1", {}, Exception("connection lost"))


def test_search_wraps_storage_failure() -> None:
    mock_session = Mock(spec=Session)
    mock_session.execute.side_effect = operational_error()
    repo = SqlAlchemyCertificateRepository(mock_session)

    with pytest.raises(StorageError) as exc_info:
        repo.search(filters=CertificateFilters(), page=PageRequest())

    assert "Unable to get a list of certificates" in exc_info.value.message
    assert isinstance(exc_info.value.__cause__, OperationalError)


def test_save_rolls_back_on_storage_failure() -> None:
    mock_session = Mock(spec=Session)
    mock_session.flush.side_effect = operational_error()
    repo = SqlAlchemyCertificateRepository(mock_session)

    with pytest.raises(StorageError):
        repo.save(Certificate(name="Sauna", description="", price=Decimal("1.00"), duration=1))

    mock_session.rollback.assert_called_once()


def test_find_wraps_storage_failure_without_rollback() -> None:
    mock_session = Mock(spec=Session)
    mock_session.get.side_effect = operational_error()
    repo = SqlAlchemyCertificateRepository(mock_session)

    with pytest.raises(StorageError):
        repo.find(1)

    mock_session.rollback.assert_not_called()
