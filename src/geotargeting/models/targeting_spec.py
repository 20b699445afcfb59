"""Wire-format targeting spec produced from a selection."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from ..domain.locations import DistanceUnit


class LocationKey(BaseModel):
    """Non-country location reference."""

    key: str = Field(..., description="Location key")
    name: str | None = Field(default=None, description="Display name")


class CityKey(LocationKey):
    """City reference with an optional radius."""

    radius: int | float | None = Field(default=None, description="Radius around the city")
    distance_unit: DistanceUnit | None = Field(default=None, description="Unit for radius")


class GeoLocations(BaseModel):
    """One targeting bucket (included or excluded), keyed by plural type name."""

    countries: list[str] | None = None
    regions: list[LocationKey] | None = None
    cities: list[CityKey] | None = None
    zips: list[LocationKey] | None = None
    geo_markets: list[LocationKey] | None = None
    electoral_districts: list[LocationKey] | None = None
    location_types: list[str] | None = None

    @property
    def is_empty(self) -> bool:
        return not any(
            getattr(self, name)
            for name in ("countries", "regions", "cities", "zips", "geo_markets", "electoral_districts")
        )


class TargetingSpec(BaseModel):
    """Included and excluded geo buckets for form submission."""

    geo_locations: GeoLocations = Field(default_factory=GeoLocations)
    excluded_geo_locations: GeoLocations = Field(default_factory=GeoLocations)

    def to_wire(self) -> dict[str, Any]:
        """Dump for the ads API; absent buckets and unset city fields are omitted."""
        return self.model_dump(mode="json", exclude_none=True)
