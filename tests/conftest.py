"""
Shared test fixtures.

Uses an in-memory SQLite database (via aiosqlite) so tests run without
Docker / PostgreSQL / Redis.  PostGIS-specific features (Geometry columns)
are mocked by using plain String columns in the test models, and JSONB is
replaced by the generic JSON type.
"""

import uuid

import pytest
from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    String,
    Text,
    func,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase, relationship
from sqlalchemy.pool import StaticPool

from src.domain.entities import Beekeeper, GeoPoint, HoneyType


# ── Test DB (SQLite in-memory) ────────────────────────────────────────

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"

test_engine = create_async_engine(TEST_DB_URL, echo=False, poolclass=StaticPool)
TestSessionFactory = async_sessionmaker(
    test_engine, class_=AsyncSession, expire_on_commit=False
)


class TestBase(DeclarativeBase):
    pass


def _uuid() -> str:
    return str(uuid.uuid4())


# Mirror the production models but without PostGIS Geometry columns
# (SQLite doesn't support them).

class TestBeekeeperModel(TestBase):
    __tablename__ = "beekeepers"
    id = Column(String(36), primary_key=True, default=_uuid)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    location = Column(String, nullable=True)  # stub for Geometry
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    address = Column(String(200), nullable=False)
    city = Column(String(100), nullable=True)
    postal_code = Column(String(20), nullable=True)
    country = Column(String(100), nullable=True)
    phone = Column(String(50), nullable=True)
    website = Column(String(255), nullable=True)
    opening_hours = Column(JSON, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    is_verified = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    honey_types = relationship(
        "TestHoneyTypeModel",
        back_populates="beekeeper",
        cascade="all, delete-orphan",
        order_by="TestHoneyTypeModel.name",
    )


class TestHoneyTypeModel(TestBase):
    __tablename__ = "honey_types"
    id = Column(String(36), primary_key=True, default=_uuid)
    beekeeper_id = Column(String(36), ForeignKey("beekeepers.id"), nullable=False)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=True)
    unit = Column(String(50), nullable=True)
    available = Column(Boolean, default=True, nullable=False)

    beekeeper = relationship("TestBeekeeperModel", back_populates="honey_types")


# ── Well-known places ─────────────────────────────────────────────────

VIENNA = GeoPoint(48.2082, 16.3738)
PRATER = GeoPoint(48.2166, 16.3958)  # ~1.9 km from VIENNA
INNSBRUCK = GeoPoint(47.2692, 11.4041)  # ~380 km from VIENNA


def make_beekeeper(
    id: str, location: GeoPoint, name: str | None = None, **fields
) -> Beekeeper:
    return Beekeeper(id=id, name=name or f"Imkerei {id}", location=location, **fields)


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture
def directory() -> list[Beekeeper]:
    """A small in-memory directory around Vienna plus one in Tyrol."""
    return [
        make_beekeeper(
            "stephansplatz",
            VIENNA,
            name="Imkerei Donaublick",
            city="Wien",
            website="https://donaublick.example.at",
            opening_hours={"monday": "09:00-12:00, 14:00-18:00"},
            honey_types=(
                HoneyType("Blütenhonig", 8.5, "500g Glas"),
                HoneyType("Akazienhonig", 9.9, "500g Glas"),
            ),
        ),
        make_beekeeper(
            "prater",
            PRATER,
            name="Bienenhof Prater",
            city="Wien",
            opening_hours={"saturday": "08:00-12:00"},
            honey_types=(
                HoneyType("Lindenhonig", 10.5, "500g Glas"),
                HoneyType("Waldhonig", 4.0, "250g Glas", available=False),
            ),
        ),
        make_beekeeper(
            "innsbruck",
            INNSBRUCK,
            name="Alpenhonig Tirol",
            city="Innsbruck",
            website="  ",
            honey_types=(HoneyType("Alpenrosenhonig", None, "500g Glas"),),
        ),
    ]

