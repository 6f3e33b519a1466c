"""
Beekeeper directory endpoints
=============================

GET /api/v1/beekeepers                  -- all active beekeepers
GET /api/v1/beekeepers/search/nearby    -- radius search, nearest first
GET /api/v1/beekeepers/search/filtered  -- radius search + sidebar filters
GET /api/v1/beekeepers/viewport         -- map center / zoom for a location
GET /api/v1/beekeepers/honey-types      -- distinct honey types on offer
GET /api/v1/beekeepers/{beekeeper_id}   -- one beekeeper
"""

import logging
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.dependencies import get_db, get_framer, get_search_cache
from src.api.middleware import limiter
from src.api.schemas import (
    AppliedFilters,
    BeekeeperListResponse,
    BeekeeperResponse,
    ErrorResponse,
    FilteredSearchResponse,
    GeoPointResponse,
    NearbySearchResponse,
    NearestBeekeeper,
    SearchParams,
    ViewportResponse,
)
from src.config import settings
from src.domain import proximity
from src.domain.distance import format_distance
from src.domain.entities import GeoPoint, InvalidArgument
from src.domain.enums import SortBy
from src.domain.filters import ExploreFilters, sort_results
from src.domain.viewport import ViewportFramer
from src.infrastructure.cache import SearchCache
from src.infrastructure.repositories import (
    BeekeeperRepository,
    to_beekeeper,
    to_beekeepers,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/beekeepers",
    tags=["beekeepers"],
    responses={400: {"model": ErrorResponse}},
)


def _optional_point(
    latitude: Optional[float], longitude: Optional[float]
) -> Optional[GeoPoint]:
    if latitude is None and longitude is None:
        return None
    if latitude is None or longitude is None:
        raise InvalidArgument("latitude and longitude must be given together")
    return GeoPoint(latitude, longitude)


@router.get(
    "",
    response_model=BeekeeperListResponse,
    summary="List all active beekeepers",
)
@limiter.limit(settings.rate_limit)
async def list_beekeepers(
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    beekeepers = to_beekeepers(await BeekeeperRepository(db).get_active())
    return BeekeeperListResponse(
        count=len(beekeepers),
        data=[BeekeeperResponse.from_domain(bk) for bk in beekeepers],
    )


@router.get(
    "/search/nearby",
    response_model=NearbySearchResponse,
    summary="Beekeepers within a radius, nearest first",
)
@limiter.limit(settings.rate_limit)
async def search_nearby(
    request: Request,
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
    radius: float = Query(
        settings.default_search_radius_km,
        ge=settings.min_search_radius_km,
        le=settings.max_search_radius_km,
        description="Search radius in km.",
    ),
    db: AsyncSession = Depends(get_db),
    cache: SearchCache = Depends(get_search_cache),
):
    key = SearchCache.key(latitude, longitude, radius)
    cached = await cache.get(key)
    if cached is not None:
        return cached

    query = GeoPoint(latitude, longitude)
    candidates = to_beekeepers(await BeekeeperRepository(db).get_active())
    ranked = proximity.search(query, radius, candidates)
    logger.debug(
        "Nearby search (%.5f, %.5f) r=%.1f km: %d of %d",
        latitude, longitude, radius, len(ranked), len(candidates),
    )

    response = NearbySearchResponse(
        count=len(ranked),
        data=[BeekeeperResponse.from_ranked(r) for r in ranked],
        search_params=SearchParams(
            latitude=latitude, longitude=longitude, radius=radius
        ),
    )
    await cache.set(key, response.model_dump(mode="json"))
    return response


@router.get(
    "/search/filtered",
    response_model=FilteredSearchResponse,
    summary="Search with sidebar filters",
    description=(
        "Location is optional.  The radius is an advisory upper bound "
        "(the map sidebar allows up to 200 km); any positive finite value "
        "is accepted."
    ),
)
@limiter.limit(settings.rate_limit)
async def search_filtered(
    request: Request,
    latitude: Optional[float] = Query(None, ge=-90, le=90),
    longitude: Optional[float] = Query(None, ge=-180, le=180),
    radius: float = Query(
        settings.explore_default_radius_km, gt=0, allow_inf_nan=False
    ),
    honey_types: list[str] = Query(default=[]),
    min_price: Optional[float] = Query(None, ge=0),
    max_price: Optional[float] = Query(None, ge=0),
    jar_sizes: list[str] = Query(default=[]),
    open_now: bool = False,
    has_website: bool = False,
    city: Optional[str] = Query(None, max_length=100),
    sort_by: SortBy = SortBy.DISTANCE,
    db: AsyncSession = Depends(get_db),
):
    query = _optional_point(latitude, longitude)
    filters = ExploreFilters(
        honey_types=frozenset(honey_types),
        min_price=min_price,
        max_price=max_price,
        jar_sizes=frozenset(jar_sizes),
        open_now=open_now,
        has_website=has_website,
        city=city,
        max_distance_km=radius if query is not None else None,
    )

    now = datetime.now(ZoneInfo(settings.timezone))
    candidates = to_beekeepers(await BeekeeperRepository(db).get_active())
    if query is not None:
        ranked = sort_results(
            filters.apply(proximity.rank(query, candidates), at=now), sort_by
        )
        data = [BeekeeperResponse.from_ranked(r) for r in ranked]
    else:
        plain = sort_results(filters.apply(candidates, at=now), sort_by)
        data = [BeekeeperResponse.from_domain(bk) for bk in plain]

    return FilteredSearchResponse(
        count=len(data),
        data=data,
        filters=AppliedFilters(
            latitude=latitude,
            longitude=longitude,
            radius=radius if query is not None else None,
            honey_types=honey_types,
            min_price=min_price,
            max_price=max_price,
            jar_sizes=jar_sizes,
            open_now=open_now,
            has_website=has_website,
            city=city,
            sort_by=sort_by.value,
        ),
    )


@router.get(
    "/viewport",
    response_model=ViewportResponse,
    summary="Map center and zoom for a visitor location",
    description=(
        "Without a location the whole service region is shown.  With one, "
        "the map frames the location and the nearest beekeeper."
    ),
)
@limiter.limit(settings.rate_limit)
async def get_viewport(
    request: Request,
    latitude: Optional[float] = Query(None, ge=-90, le=90),
    longitude: Optional[float] = Query(None, ge=-180, le=180),
    db: AsyncSession = Depends(get_db),
    framer: ViewportFramer = Depends(get_framer),
):
    query = _optional_point(latitude, longitude)
    closest = None
    if query is not None:
        candidates = to_beekeepers(await BeekeeperRepository(db).get_active())
        closest = proximity.nearest(query, candidates)

    viewport = framer.frame_nearest(query, closest)
    return ViewportResponse(
        center=GeoPointResponse.from_domain(viewport.center),
        zoom=viewport.zoom,
        nearest=(
            NearestBeekeeper(
                id=closest.vendor.id,
                name=closest.vendor.name,
                distance_km=round(closest.distance_km, 2),
                distance_label=format_distance(closest.distance_km),
            )
            if closest is not None
            else None
        ),
    )


@router.get(
    "/honey-types",
    response_model=list[str],
    summary="Distinct honey types offered by active beekeepers",
)
@limiter.limit(settings.rate_limit)
async def list_honey_types(
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    return await BeekeeperRepository(db).get_honey_type_names()


@router.get(
    "/{beekeeper_id}",
    response_model=BeekeeperResponse,
    summary="Get one beekeeper",
    responses={404: {"model": ErrorResponse}},
)
@limiter.limit(settings.rate_limit)
async def get_beekeeper(
    request: Request,
    beekeeper_id: str,
    db: AsyncSession = Depends(get_db),
):
    row = await BeekeeperRepository(db).get_by_id(beekeeper_id)
    if not row:
        raise HTTPException(status_code=404, detail="Beekeeper not found")
    return BeekeeperResponse.from_domain(to_beekeeper(row))
