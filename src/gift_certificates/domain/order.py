from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str


@dataclass(frozen=True, slots=True)
class Order:
    user_id: int
    certificate_id: int | None
    cost: Decimal
    id: int | None = None
    order_date: datetime | None = None


@dataclass(frozen=True, slots=True)
class OrderSummary:
    """Read-only view of an order as shown to its owner."""

    id: int
    purchase_cost: Decimal
    purchase_time: datetime | None
