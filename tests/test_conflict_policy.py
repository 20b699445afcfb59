"""ConflictPolicy tests — admission, rejection and retirement rules."""

from geotargeting.domain.conflict_policy import Accepted, ConflictPolicy, Rejected, RejectionReason
from geotargeting.domain.hierarchy import HierarchyResolver
from geotargeting.domain.locations import LocationItem, LocationType


def _country(key: str, *, excluded: bool = False) -> LocationItem:
    return LocationItem(key=key, type=LocationType.country, name=key, excluded=excluded)


def _region(key: str, country: str, *, excluded: bool = False) -> LocationItem:
    return LocationItem(
        key=key, type=LocationType.region, name=f"Region {key}", country_code=country, excluded=excluded
    )


def _city(key: str, country: str, region: str | None = None, *, excluded: bool = False) -> LocationItem:
    return LocationItem(
        key=key,
        type=LocationType.city,
        name=f"City {key}",
        country_code=country,
        region_id=region,
        excluded=excluded,
    )


class TestRejections:
    def test_exclusion_over_included_narrower_rejected(self):
        selection = (_city("100", "US", "10"), _country("US"))
        result = ConflictPolicy().admit(_region("10", "US", excluded=True), selection)
        assert isinstance(result, Rejected)
        assert result.reason is RejectionReason.narrower_included_conflict
        assert [s.key for s in result.offending] == ["100"]
        assert result.accepted is False

    def test_exclusion_without_broader_inclusion_rejected(self):
        result = ConflictPolicy().admit(_city("100", "US", excluded=True), ())
        assert isinstance(result, Rejected)
        assert result.reason is RejectionReason.missing_broader_inclusion
        assert result.offending == ()

    def test_exclusion_under_excluded_broader_only_rejected(self):
        selection = (_region("10", "US", excluded=True),)
        result = ConflictPolicy().admit(_city("100", "US", "10", excluded=True), selection)
        assert isinstance(result, Rejected)
        assert result.reason is RejectionReason.missing_broader_inclusion

    def test_narrower_check_runs_before_broader_check(self):
        # No broader inclusion either, but the narrower conflict is reported.
        selection = (_city("100", "US", "10"),)
        result = ConflictPolicy().admit(_region("10", "US", excluded=True), selection)
        assert result.reason is RejectionReason.narrower_included_conflict


class TestAcceptance:
    def test_inclusion_into_empty_selection(self):
        result = ConflictPolicy().admit(_country("US"), ())
        assert isinstance(result, Accepted)
        assert [s.key for s in result.selection] == ["US"]
        assert result.retired == ()

    def test_exclusion_inside_included_country(self):
        selection = (_country("US"),)
        result = ConflictPolicy().admit(_region("CA-ON", "US", excluded=True), selection)
        assert isinstance(result, Accepted)
        assert [s.key for s in result.selection] == ["CA-ON", "US"]
        assert result.retired == ()

    def test_included_country_retires_included_cities(self):
        selection = (_city("100", "US"), _city("200", "CA"), _city("300", "US"))
        result = ConflictPolicy().admit(_country("US"), selection)
        assert [s.key for s in result.retired] == ["100", "300"]
        assert [s.key for s in result.selection] == ["US", "200"]

    def test_included_city_retires_included_country(self):
        selection = (_country("US"),)
        result = ConflictPolicy().admit(_city("100", "US"), selection)
        assert [s.key for s in result.retired] == ["US"]
        assert [s.key for s in result.selection] == ["100"]

    def test_opposite_mode_relatives_are_kept(self):
        selection = (_city("100", "US", "10", excluded=True), _country("US"))
        result = ConflictPolicy().admit(_region("10", "US"), selection)
        assert isinstance(result, Accepted)
        assert [s.key for s in result.retired] == ["US"]
        assert [s.key for s in result.selection] == ["10", "100"]

    def test_more_specific_exclusion_retires_broader_exclusion(self):
        selection = (_region("10", "US", excluded=True), _country("US"))
        result = ConflictPolicy().admit(_city("100", "US", "10", excluded=True), selection)
        assert isinstance(result, Accepted)
        assert [s.key for s in result.retired] == ["10"]
        assert [s.key for s in result.selection] == ["100", "US"]

    def test_same_key_replaces_itself_without_retirement(self):
        selection = (_country("US"),)
        result = ConflictPolicy().admit(_country("US"), selection)
        assert isinstance(result, Accepted)
        assert result.retired == ()
        assert [s.key for s in result.selection] == ["US"]

    def test_no_same_mode_relative_survives(self):
        selection = (
            _city("100", "US", "10"),
            _region("10", "US"),
            _city("200", "US", "20", excluded=True),
            _country("US"),
        )
        candidate = _region("20", "US")
        result = ConflictPolicy().admit(candidate, selection)
        rest = result.selection[1:]
        resolver = HierarchyResolver()
        relatives = resolver.broader(candidate, rest) + resolver.narrower(candidate, rest)
        assert all(s.excluded != candidate.excluded for s in relatives)
        assert [s.key for s in result.selection] == ["20", "100", "10", "200"]
