"""Location records and the selection snapshot type."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InvalidLocationItem


class LocationType(str, Enum):
    """Location kinds accepted by the ads platform."""

    country = "country"
    region = "region"
    city = "city"
    zip = "zip"
    geo_market = "geo_market"
    electoral_district = "electoral_district"


class DistanceUnit(str, Enum):
    mi = "mi"
    km = "km"


class LocationItem(BaseModel):
    """A resolved location selected for targeting.

    Parent links (``country_code``, ``region_id``, ``primary_city_id``) hold the
    ``key`` of another item; they are compared by value, never dereferenced.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    key: str = Field(..., min_length=1, description="Identifier unique within its type")
    type: LocationType = Field(..., description="Location kind")
    name: str | None = Field(default=None, description="Display name")
    country_code: str | None = Field(default=None, description="Key of the parent country")
    region_id: str | None = Field(default=None, description="Key of the parent region")
    primary_city_id: str | None = Field(default=None, description="Key of the parent city (zips)")
    radius: int | float | None = Field(default=None, description="Radius around a city (>= 0)")
    distance_unit: DistanceUnit | None = Field(default=None, description="Unit for radius")
    excluded: bool = Field(default=False, description="True = exclude, False = include")
    active: bool = Field(default=False, description="Most recently touched item")

    @field_validator("key", "country_code", "region_id", "primary_city_id", mode="before")
    @classmethod
    def _id_to_str(cls, value: Any) -> Any:
        # Upstream search results carry numeric region/city ids.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("radius")
    @classmethod
    def _non_negative_radius(cls, v: int | float | None) -> int | float | None:
        if v is not None and v < 0:
            raise ValueError(f"radius must be >= 0, got {v}")
        return v

    @property
    def display_name(self) -> str:
        return self.name or self.key


SelectionSet = tuple[LocationItem, ...]

LocationInput = Union[LocationItem, Mapping[str, Any]]


def coerce_item(value: LocationInput) -> LocationItem:
    """Return ``value`` as a LocationItem, failing fast on malformed records."""
    if isinstance(value, LocationItem):
        return value
    if not isinstance(value, Mapping):
        raise InvalidLocationItem(f"expected a location record, got {type(value).__name__}")
    try:
        return LocationItem.model_validate(dict(value))
    except ValidationError as exc:
        raise InvalidLocationItem(f"invalid location record: {exc}") from exc
