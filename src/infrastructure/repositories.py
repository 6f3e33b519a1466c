"""
Repository Pattern -- abstracts DB access so domain logic stays DB-agnostic.

Each repository receives an ``AsyncSession`` (unit-of-work) and exposes
directory queries only.  Rows are turned into domain ``Beekeeper`` values by
``to_beekeeper`` before they reach the proximity engine.
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from .models import BeekeeperModel, HoneyTypeModel
from src.domain.entities import Beekeeper, GeoPoint, HoneyType, InvalidArgument

logger = logging.getLogger(__name__)


class BeekeeperRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_beekeeper(
        self,
        *,
        name: str,
        latitude: float,
        longitude: float,
        address: str,
        honey_types: list[dict] | None = None,
        **fields,
    ) -> BeekeeperModel:
        """Create a beekeeper with its PostGIS point and honey types."""
        from geoalchemy2.functions import ST_SetSRID, ST_MakePoint

        beekeeper = BeekeeperModel(
            name=name,
            latitude=latitude,
            longitude=longitude,
            location=ST_SetSRID(ST_MakePoint(longitude, latitude), 4326),
            address=address,
            honey_types=[HoneyTypeModel(**h) for h in honey_types or []],
            **fields,
        )
        self.session.add(beekeeper)
        await self.session.flush()
        return beekeeper

    async def get_active(self) -> list[BeekeeperModel]:
        result = await self.session.execute(
            select(BeekeeperModel)
            .where(BeekeeperModel.is_active.is_(True))
            .options(selectinload(BeekeeperModel.honey_types))
            .order_by(BeekeeperModel.created_at, BeekeeperModel.id)
        )
        return list(result.scalars().all())

    async def get_by_id(self, beekeeper_id: str) -> Optional[BeekeeperModel]:
        result = await self.session.execute(
            select(BeekeeperModel)
            .where(
                BeekeeperModel.id == beekeeper_id,
                BeekeeperModel.is_active.is_(True),
            )
            .options(selectinload(BeekeeperModel.honey_types))
        )
        return result.scalar_one_or_none()

    async def get_honey_type_names(self) -> list[str]:
        result = await self.session.execute(
            select(HoneyTypeModel.name)
            .join(BeekeeperModel)
            .where(BeekeeperModel.is_active.is_(True))
            .distinct()
            .order_by(HoneyTypeModel.name)
        )
        return list(result.scalars().all())


def to_beekeeper(row) -> Beekeeper:
    """Map an ORM row to the immutable domain value.

    Raises ``InvalidArgument`` when the stored coordinates are out of range.
    """
    return Beekeeper(
        id=str(row.id),
        name=row.name,
        location=GeoPoint(float(row.latitude), float(row.longitude)),
        address=row.address or "",
        city=row.city,
        postal_code=row.postal_code,
        country=row.country,
        description=row.description,
        phone=row.phone,
        website=row.website,
        opening_hours=dict(row.opening_hours or {}),
        honey_types=tuple(
            HoneyType(
                name=h.name,
                price=float(h.price) if h.price is not None else None,
                unit=h.unit,
                available=bool(h.available),
            )
            for h in row.honey_types
        ),
        is_verified=bool(row.is_verified),
    )


def to_beekeepers(rows) -> list[Beekeeper]:
    """Map rows, skipping (and logging) rows with broken coordinates."""
    beekeepers = []
    for row in rows:
        try:
            beekeepers.append(to_beekeeper(row))
        except InvalidArgument as exc:
            logger.warning("Skipping beekeeper %s: %s", row.id, exc)
    return beekeepers
