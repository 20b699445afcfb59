"""HierarchyResolver: selected ancestors and descendants of a location."""

from __future__ import annotations

from collections.abc import Iterable

from .locations import LocationItem, SelectionSet


def _links_to(child: LocationItem, parent_key: str) -> bool:
    """True if ``child`` links to ``parent_key`` through one of its parent keys."""
    if child.country_code and child.country_code == parent_key:
        return True
    if child.region_id and child.region_id == parent_key:
        return True
    if child.primary_city_id and child.primary_city_id == parent_key:
        return True
    return False


class HierarchyResolver:
    """Compute broader/narrower relations by key equality over a selection."""

    def broader(self, item: LocationItem, selection: Iterable[LocationItem]) -> SelectionSet:
        """Selected items that geographically contain ``item``."""
        return tuple(s for s in selection if _links_to(item, s.key))

    def narrower(self, item: LocationItem, selection: Iterable[LocationItem]) -> SelectionSet:
        """Selected items geographically contained by ``item``."""
        return self.narrower_of_key(item.key, selection)

    def narrower_of_key(self, key: str, selection: Iterable[LocationItem]) -> SelectionSet:
        """Selected items whose parent links point at ``key``; the parent need not be selected."""
        return tuple(s for s in selection if _links_to(s, key))

    def relations(
        self, item: LocationItem, selection: SelectionSet
    ) -> tuple[SelectionSet, SelectionSet]:
        return self.broader(item, selection), self.narrower(item, selection)
