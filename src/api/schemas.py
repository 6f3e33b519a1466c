"""Pydantic response schemas for the REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from src.domain.distance import format_distance
from src.domain.entities import Beekeeper, GeoPoint, RankedVendor


# ── Building blocks ───────────────────────────────────────────────────


class GeoPointResponse(BaseModel):
    latitude: float
    longitude: float

    @classmethod
    def from_domain(cls, point: GeoPoint) -> GeoPointResponse:
        return cls(latitude=point.latitude, longitude=point.longitude)


class HoneyTypeResponse(BaseModel):
    name: str
    price: Optional[float] = None
    unit: Optional[str] = None
    available: bool = True


# ── Beekeepers ────────────────────────────────────────────────────────


class BeekeeperResponse(BaseModel):
    id: str
    name: str
    latitude: float
    longitude: float
    address: str
    city: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    description: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    opening_hours: dict[str, str] = {}
    honey_types: list[HoneyTypeResponse] = []
    is_verified: bool = False
    distance_km: Optional[float] = None
    distance_label: Optional[str] = None

    @classmethod
    def from_domain(
        cls, bk: Beekeeper, distance_km: Optional[float] = None
    ) -> BeekeeperResponse:
        return cls(
            id=bk.id,
            name=bk.name,
            latitude=bk.location.latitude,
            longitude=bk.location.longitude,
            address=bk.address,
            city=bk.city,
            postal_code=bk.postal_code,
            country=bk.country,
            description=bk.description,
            phone=bk.phone,
            website=bk.website,
            opening_hours=bk.opening_hours,
            honey_types=[
                HoneyTypeResponse(
                    name=h.name, price=h.price, unit=h.unit, available=h.available
                )
                for h in bk.honey_types
            ],
            is_verified=bk.is_verified,
            distance_km=round(distance_km, 2) if distance_km is not None else None,
            distance_label=(
                format_distance(distance_km) if distance_km is not None else None
            ),
        )

    @classmethod
    def from_ranked(cls, ranked: RankedVendor[Beekeeper]) -> BeekeeperResponse:
        return cls.from_domain(ranked.vendor, ranked.distance_km)


class SearchParams(BaseModel):
    latitude: float
    longitude: float
    radius: float


class NearbySearchResponse(BaseModel):
    count: int
    data: list[BeekeeperResponse]
    search_params: SearchParams


class AppliedFilters(BaseModel):
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    radius: Optional[float] = None
    honey_types: list[str] = []
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    jar_sizes: list[str] = []
    open_now: bool = False
    has_website: bool = False
    city: Optional[str] = None
    sort_by: str = "distance"


class FilteredSearchResponse(BaseModel):
    count: int
    data: list[BeekeeperResponse]
    filters: AppliedFilters


class BeekeeperListResponse(BaseModel):
    count: int
    data: list[BeekeeperResponse]


# ── Map ───────────────────────────────────────────────────────────────


class NearestBeekeeper(BaseModel):
    id: str
    name: str
    distance_km: float
    distance_label: str


class ViewportResponse(BaseModel):
    center: GeoPointResponse
    zoom: int
    nearest: Optional[NearestBeekeeper] = None


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
