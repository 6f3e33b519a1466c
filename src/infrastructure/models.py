"""
SQLAlchemy ORM models  (maps to PostgreSQL + PostGIS).

Tables
------
* ``beekeepers``   -- directory entries with a fixed location
* ``honey_types``  -- honey offered by a beekeeper (price, jar size)

Indexes
-------
* **GIST** on ``beekeepers.location`` for map / admin queries.  The search
  endpoints themselves rank in Python over the plain float columns.
* **B-Tree** on ``is_active`` and ``honey_types.beekeeper_id``.
"""

import uuid

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Numeric,
    String,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from geoalchemy2 import Geometry

from .database import Base


def _uuid() -> str:
    return str(uuid.uuid4())


class BeekeeperModel(Base):
    __tablename__ = "beekeepers"

    id = Column(String(36), primary_key=True, default=_uuid)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)

    # Stored as PostGIS geometry for spatial indexing
    location = Column(Geometry("POINT", srid=4326), nullable=True)

    # Also stored as plain floats for fast reads (avoids ST_X / ST_Y)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)

    address = Column(String(200), nullable=False)
    city = Column(String(100), nullable=True)
    postal_code = Column(String(20), nullable=True)
    country = Column(String(100), nullable=True)

    phone = Column(String(50), nullable=True)
    website = Column(String(255), nullable=True)
    opening_hours = Column(JSONB, nullable=True)

    is_active = Column(Boolean, default=True, nullable=False)
    is_verified = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    honey_types = relationship(
        "HoneyTypeModel",
        back_populates="beekeeper",
        cascade="all, delete-orphan",
        order_by="HoneyTypeModel.name",
    )

    __table_args__ = (
        Index("idx_beekeepers_location", "location", postgresql_using="gist"),
        Index("idx_beekeepers_active", "is_active"),
    )


class HoneyTypeModel(Base):
    __tablename__ = "honey_types"

    id = Column(String(36), primary_key=True, default=_uuid)
    beekeeper_id = Column(
        String(36), ForeignKey("beekeepers.id", ondelete="CASCADE"), nullable=False
    )
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=True)
    unit = Column(String(50), nullable=True)
    available = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    beekeeper = relationship("BeekeeperModel", back_populates="honey_types")

    __table_args__ = (Index("idx_honey_types_beekeeper", "beekeeper_id"),)
