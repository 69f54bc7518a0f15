"""
Dependency injection for FastAPI routes.

Key principle: Database sessions are per-request, never cached. The engine
and session factory are explicit handles owned by the application
(``app.state``), created lazily from settings on first use.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session, sessionmaker

from gift_certificates.adapters.sqlalchemy_certificate_repository import (
    SqlAlchemyCertificateRepository,
)
from gift_certificates.adapters.sqlalchemy_order_repository import (
    SqlAlchemyOrderRepository,
    SqlAlchemyUserRepository,
)
from gift_certificates.adapters.sqlalchemy_tag_repository import SqlAlchemyTagRepository
from gift_certificates.infra.config import Settings, load_settings
from gift_certificates.infra.db.session import (
    create_db_engine,
    create_session_factory,
    session_scope,
)
from gift_certificates.use_cases.assign_tags import AssignTags
from gift_certificates.use_cases.create_certificate import CreateCertificate
from gift_certificates.use_cases.create_tag import CreateTag
from gift_certificates.use_cases.delete_certificate import DeleteCertificate
from gift_certificates.use_cases.delete_tag import DeleteTag
from gift_certificates.use_cases.get_certificate_by_id import GetCertificateById
from gift_certificates.use_cases.get_order_details import GetOrderDetails
from gift_certificates.use_cases.get_tag_by_id import GetTagById
from gift_certificates.use_cases.get_user_by_id import GetUserById
from gift_certificates.use_cases.get_user_orders import GetUserOrders
from gift_certificates.use_cases.list_tags import ListTags
from gift_certificates.use_cases.list_users import ListUsers
from gift_certificates.use_cases.purchase_certificate import PurchaseCertificate
from gift_certificates.use_cases.search_certificates import SearchCertificates
from gift_certificates.use_cases.update_certificate import UpdateCertificate


def get_settings(request: Request) -> Settings:
    """Settings given to build_app(), or read from the environment once per app."""
    if request.app.state.settings is None:
        request.app.state.settings = load_settings()
    return request.app.state.settings


def get_session_factory(
    request: Request, settings: Settings = Depends(get_settings)
) -> sessionmaker[Session]:
    """Session factory owned by the app; built from settings on first request."""
    if request.app.state.session_factory is None:
        request.app.state.session_factory = create_session_factory(create_db_engine(settings))
    return request.app.state.session_factory


def get_db(
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
) -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    FastAPI will:
    1. Call this function when a request starts
    2. Inject the session into the use case factories
    3. Commit/rollback and close the session when the request ends

    The whole request is one unit of work: every write it performs commits
    together or is rolled back together.

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with session_scope(session_factory) as session:
        yield session


# ==============================================================================
# Certificates
# ==============================================================================


def get_search_certificates_use_case(db: Session = Depends(get_db)) -> SearchCertificates:
    """
    Factory function that returns a configured SearchCertificates use case.

    Called per-request, so each request gets a fresh repository bound to its
    own session.
    """
    return SearchCertificates(certificate_repository=SqlAlchemyCertificateRepository(session=db))


def get_get_certificate_by_id_use_case(db: Session = Depends(get_db)) -> GetCertificateById:
    return GetCertificateById(certificate_repository=SqlAlchemyCertificateRepository(session=db))


def get_assign_tags(
    db: Session = Depends(get_db), settings: Settings = Depends(get_settings)
) -> AssignTags:
    return AssignTags(
        tag_repository=SqlAlchemyTagRepository(session=db),
        default_tag_name=settings.default_tag_name,
    )


def get_create_certificate_use_case(
    db: Session = Depends(get_db), assign_tags: AssignTags = Depends(get_assign_tags)
) -> CreateCertificate:
    return CreateCertificate(
        certificate_repository=SqlAlchemyCertificateRepository(session=db),
        assign_tags=assign_tags,
    )


def get_update_certificate_use_case(
    db: Session = Depends(get_db), assign_tags: AssignTags = Depends(get_assign_tags)
) -> UpdateCertificate:
    return UpdateCertificate(
        certificate_repository=SqlAlchemyCertificateRepository(session=db),
        assign_tags=assign_tags,
    )


def get_delete_certificate_use_case(db: Session = Depends(get_db)) -> DeleteCertificate:
    return DeleteCertificate(certificate_repository=SqlAlchemyCertificateRepository(session=db))


# ==============================================================================
# Tags
# ==============================================================================


def get_create_tag_use_case(db: Session = Depends(get_db)) -> CreateTag:
    return CreateTag(tag_repository=SqlAlchemyTagRepository(session=db))


def get_get_tag_by_id_use_case(db: Session = Depends(get_db)) -> GetTagById:
    return GetTagById(tag_repository=SqlAlchemyTagRepository(session=db))


def get_list_tags_use_case(db: Session = Depends(get_db)) -> ListTags:
    return ListTags(tag_repository=SqlAlchemyTagRepository(session=db))


def get_delete_tag_use_case(db: Session = Depends(get_db)) -> DeleteTag:
    return DeleteTag(tag_repository=SqlAlchemyTagRepository(session=db))


# ==============================================================================
# Users and orders
# ==============================================================================


def get_list_users_use_case(db: Session = Depends(get_db)) -> ListUsers:
    return ListUsers(user_repository=SqlAlchemyUserRepository(session=db))


def get_get_user_by_id_use_case(db: Session = Depends(get_db)) -> GetUserById:
    return GetUserById(user_repository=SqlAlchemyUserRepository(session=db))


def get_purchase_certificate_use_case(db: Session = Depends(get_db)) -> PurchaseCertificate:
    return PurchaseCertificate(
        user_repository=SqlAlchemyUserRepository(session=db),
        certificate_repository=SqlAlchemyCertificateRepository(session=db),
        order_repository=SqlAlchemyOrderRepository(session=db),
    )


def get_get_user_orders_use_case(db: Session = Depends(get_db)) -> GetUserOrders:
    return GetUserOrders(
        user_repository=SqlAlchemyUserRepository(session=db),
        order_repository=SqlAlchemyOrderRepository(session=db),
    )


def get_get_order_details_use_case(db: Session = Depends(get_db)) -> GetOrderDetails:
    return GetOrderDetails(order_repository=SqlAlchemyOrderRepository(session=db))
