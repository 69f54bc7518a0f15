from __future__ import annotations

from collections.abc import Iterator
from decimal import Decimal

import pytest
from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from gift_certificates.infra.db.models import Base, CertificateRow, TagRow, UserRow


@pytest.fixture
def engine() -> Iterator[Engine]:
    """In-memory SQLite engine shared by every connection of one test."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(test_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record) -> None:  # type: ignore[no-untyped-def]
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, class_=Session, expire_on_commit=False)


@pytest.fixture
def session(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    db = session_factory()
    yield db
    db.close()


@pytest.fixture
def seed_catalog(session: Session) -> dict[str, int]:
    """
    Three certificates and three tags:

    - Day Spa (50.00): wellness
    - Spa Retreat (120.00): wellness, luxury
    - Gym Pass (30.00): sport
    """
    wellness = TagRow(name="wellness")
    luxury = TagRow(name="luxury")
    sport = TagRow(name="sport")

    day_spa = CertificateRow(
        name="Day Spa",
        description="Full day access to the spa",
        price=Decimal("50.00"),
        duration=30,
        tags=[wellness],
    )
    retreat = CertificateRow(
        name="Spa Retreat",
        description="Weekend massage retreat",
        price=Decimal("120.00"),
        duration=60,
        tags=[wellness, luxury],
    )
    gym = CertificateRow(
        name="Gym Pass",
        description="Monthly gym membership",
        price=Decimal("30.00"),
        duration=31,
        tags=[sport],
    )
    session.add_all([day_spa, retreat, gym])
    session.commit()

    return {
        "day_spa": day_spa.id,
        "retreat": retreat.id,
        "gym": gym.id,
        "wellness": wellness.id,
        "luxury": luxury.id,
        "sport": sport.id,
    }


@pytest.fixture
def seed_user(session: Session) -> int:
    user = UserRow(name="alice")
    session.add(user)
    session.commit()
    return user.id
