"""FastAPI dependency injection helpers."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.config import settings
from src.domain.entities import GeoPoint
from src.domain.viewport import ViewportFramer
from src.infrastructure.cache import SearchCache
from src.infrastructure.database import async_session_factory
from src.infrastructure.redis_client import get_redis


async def get_db() -> AsyncSession:  # type: ignore[misc]
    """Yield an async DB session; commit on success, rollback on error."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_search_cache() -> SearchCache:
    return SearchCache(await get_redis(), settings.search_cache_ttl_seconds)


def get_framer() -> ViewportFramer:
    """Viewport framer configured for the service region."""
    return ViewportFramer(
        region_center=GeoPoint(settings.region_center_lat, settings.region_center_lng),
        region_zoom=settings.region_zoom,
        query_only_zoom=settings.query_only_zoom,
    )
