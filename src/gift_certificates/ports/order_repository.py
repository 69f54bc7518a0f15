from __future__ import annotations

from abc import ABC, abstractmethod

from gift_certificates.domain.order import Order, OrderSummary
from gift_certificates.domain.paging import PageRequest


class OrderRepository(ABC):
    """Port for order data access. Orders are created on purchase and never mutated."""

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Persist a new order and return it with its id and order date."""
        ...

    @abstractmethod
    def find_by_user(self, user_id: int, page: PageRequest) -> list[OrderSummary]: ...

    @abstractmethod
    def find_for_user(self, user_id: int, order_id: int) -> OrderSummary | None:
        """Return the order only if it belongs to ``user_id``."""
        ...
