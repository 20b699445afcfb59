"""HierarchyResolver tests — broader/narrower by key equality."""

from geotargeting.domain.hierarchy import HierarchyResolver
from geotargeting.domain.locations import LocationItem, LocationType

US = LocationItem(key="US", type=LocationType.country, name="United States")
CA = LocationItem(key="CA", type=LocationType.country, name="Canada")
CALIFORNIA = LocationItem(key="3847", type=LocationType.region, name="California", country_code="US")
SF = LocationItem(
    key="2421836", type=LocationType.city, name="San Francisco", country_code="US", region_id="3847"
)
ZIP = LocationItem(
    key="US:94103",
    type=LocationType.zip,
    name="94103",
    country_code="US",
    region_id="3847",
    primary_city_id="2421836",
)

SELECTION = (ZIP, SF, CALIFORNIA, US, CA)


class TestBroader:
    def test_zip_has_city_region_and_country_as_broader(self):
        broader = HierarchyResolver().broader(ZIP, SELECTION)
        assert [s.key for s in broader] == ["2421836", "3847", "US"]

    def test_country_has_no_broader(self):
        assert HierarchyResolver().broader(US, SELECTION) == ()

    def test_unrelated_country_not_broader(self):
        broader = HierarchyResolver().broader(CALIFORNIA, SELECTION)
        assert [s.key for s in broader] == ["US"]


class TestNarrower:
    def test_country_contains_everything_linked_to_it(self):
        narrower = HierarchyResolver().narrower(US, SELECTION)
        assert [s.key for s in narrower] == ["US:94103", "2421836", "3847"]

    def test_city_contains_its_zip(self):
        narrower = HierarchyResolver().narrower(SF, SELECTION)
        assert [s.key for s in narrower] == ["US:94103"]

    def test_zip_contains_nothing(self):
        assert HierarchyResolver().narrower(ZIP, SELECTION) == ()

    def test_relations_returns_both(self):
        broader, narrower = HierarchyResolver().relations(CALIFORNIA, SELECTION)
        assert [s.key for s in broader] == ["US"]
        assert [s.key for s in narrower] == ["US:94103", "2421836"]


class TestStructuralLinks:
    def test_numeric_region_id_matches_string_key(self):
        city = LocationItem.model_validate(
            {"key": 2421836, "type": "city", "name": "San Francisco", "country_code": "US", "region_id": 3847}
        )
        broader = HierarchyResolver().broader(city, (CALIFORNIA,))
        assert broader == (CALIFORNIA,)

    def test_relations_follow_current_keys(self):
        renamed = CALIFORNIA.model_copy(update={"key": "9999"})
        assert HierarchyResolver().narrower(renamed, (SF,)) == ()
