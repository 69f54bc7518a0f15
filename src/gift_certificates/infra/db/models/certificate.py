from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String, Table, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gift_certificates.infra.db.models.base import Base


certificate_tags = Table(
    "certificate_tags",
    Base.metadata,
    Column(
        "certificate_id",
        ForeignKey("gift_certificates.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("tag_id", ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class TagRow(Base):
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)

    certificates: Mapped[list[CertificateRow]] = relationship(
        secondary=certificate_tags,
        back_populates="tags",
    )


class CertificateRow(Base):
    __tablename__ = "gift_certificates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    description: Mapped[str] = mapped_column(String(1000), nullable=False, default="")
    price: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2), nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)  # days

    create_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    last_update_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    tags: Mapped[list[TagRow]] = relationship(
        secondary=certificate_tags,
        back_populates="certificates",
        lazy="selectin",
        order_by=TagRow.id,
    )
