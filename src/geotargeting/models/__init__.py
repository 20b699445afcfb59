"""Wire-format models."""

from .targeting_spec import CityKey, GeoLocations, LocationKey, TargetingSpec

__all__ = [
    "CityKey",
    "GeoLocations",
    "LocationKey",
    "TargetingSpec",
]
