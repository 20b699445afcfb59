"""SpecBuilder: project a selection into the wire-format targeting spec."""

from __future__ import annotations

from collections.abc import Sequence

from ..models.targeting_spec import CityKey, GeoLocations, LocationKey, TargetingSpec
from .locations import LocationItem, LocationType, SelectionSet

PLURAL_TYPE_NAMES: dict[LocationType, str] = {
    LocationType.country: "countries",
    LocationType.region: "regions",
    LocationType.city: "cities",
    LocationType.zip: "zips",
    LocationType.geo_market: "geo_markets",
    LocationType.electoral_district: "electoral_districts",
}


def _entry(item: LocationItem) -> str | LocationKey:
    if item.type is LocationType.country:
        return item.key
    if item.type is LocationType.city:
        # Unset radius fields stay None and are dropped from the wire dump.
        return CityKey(
            key=item.key, name=item.name, radius=item.radius, distance_unit=item.distance_unit
        )
    return LocationKey(key=item.key, name=item.name)


class SpecBuilder:
    """Partition a selection into included/excluded buckets by location type."""

    def build(self, selection: SelectionSet, enabled_types: Sequence[str]) -> TargetingSpec:
        buckets: dict[bool, dict[str, list]] = {False: {}, True: {}}
        for item in selection:
            plural = PLURAL_TYPE_NAMES[item.type]
            buckets[item.excluded].setdefault(plural, []).append(_entry(item))

        return TargetingSpec(
            geo_locations=GeoLocations(**buckets[False], location_types=list(enabled_types)),
            excluded_geo_locations=GeoLocations(**buckets[True]),
        )
