from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, func
from sqlalchemy.orm import Mapped, mapped_column

from gift_certificates.infra.db.models.base import Base


class OrderRow(Base):
    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # Cost is a snapshot; the order survives deletion of its certificate
    certificate_id: Mapped[int | None] = mapped_column(
        ForeignKey("gift_certificates.id", ondelete="SET NULL"), nullable=True
    )
    cost: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2), nullable=False)
    order_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
