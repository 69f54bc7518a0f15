"""SQLAlchemy implementations of UserRepository and OrderRepository."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gift_certificates.domain.errors import StorageError
from gift_certificates.domain.order import Order, OrderSummary, User
from gift_certificates.domain.paging import PageRequest
from gift_certificates.infra.db.models.order import OrderRow
from gift_certificates.infra.db.models.user import UserRow
from gift_certificates.ports.order_repository import OrderRepository
from gift_certificates.ports.user_repository import UserRepository

logger = logging.getLogger(__name__)


def _storage_error(
    session: Session, action: str, exc: SQLAlchemyError, rollback: bool = False
) -> StorageError:
    if rollback:
        session.rollback()

    logger.error(
        "Order storage operation failed",
        extra={"action": action, "error_type": type(exc).__name__},
    )
    return StorageError(f"Unable to {action}: {exc}")


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def find(self, user_id: int) -> User | None:
        try:
            row = self._session.get(UserRow, user_id)
        except SQLAlchemyError as exc:
            raise _storage_error(self._session, "get a user", exc) from exc
        return User(id=row.id, name=row.name) if row else None

    def find_all(self, page: PageRequest) -> list[User]:
        query = select(UserRow).order_by(UserRow.id).offset(page.offset).limit(page.limit)
        try:
            rows = self._session.execute(query).scalars().all()
        except SQLAlchemyError as exc:
            raise _storage_error(self._session, "get a list of users", exc) from exc
        return [User(id=row.id, name=row.name) for row in rows]


class SqlAlchemyOrderRepository(OrderRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def save(self, order: Order) -> Order:
        row = OrderRow(
            user_id=order.user_id,
            certificate_id=order.certificate_id,
            cost=order.cost,
        )
        try:
            self._session.add(row)
            self._session.flush()
            # Load the server-side order_date
            self._session.refresh(row)
        except SQLAlchemyError as exc:
            raise _storage_error(self._session, "make order", exc, rollback=True) from exc

        return Order(
            id=row.id,
            user_id=row.user_id,
            certificate_id=row.certificate_id,
            cost=row.cost,
            order_date=row.order_date,
        )

    def find_by_user(self, user_id: int, page: PageRequest) -> list[OrderSummary]:
        query = (
            select(OrderRow)
            .where(OrderRow.user_id == user_id)
            .order_by(OrderRow.id)
            .offset(page.offset)
            .limit(page.limit)
        )
        try:
            rows = self._session.execute(query).scalars().all()
        except SQLAlchemyError as exc:
            raise _storage_error(self._session, "get a list of orders", exc) from exc
        return [self._to_summary(row) for row in rows]

    def find_for_user(self, user_id: int, order_id: int) -> OrderSummary | None:
        query = select(OrderRow).where(OrderRow.id == order_id, OrderRow.user_id == user_id)
        try:
            row = self._session.execute(query).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise _storage_error(self._session, "get an order", exc) from exc
        return self._to_summary(row) if row else None

    def _to_summary(self, row: OrderRow) -> OrderSummary:
        return OrderSummary(
            id=row.id,
            purchase_cost=row.cost,
            purchase_time=row.order_date,
        )
