"""SelectionStore: owns the selected locations of one targeting form."""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping, Sequence
from dataclasses import replace
from typing import Any, Union

from ..domain.conflict_policy import Admission, ConflictPolicy, Rejected
from ..domain.errors import InvalidLocationItem, ProtectedFieldPatch
from ..domain.hierarchy import HierarchyResolver
from ..domain.locations import LocationInput, LocationItem, SelectionSet, coerce_item
from ..domain.spec_builder import SpecBuilder
from ..models.targeting_spec import TargetingSpec
from ..observability import get_logger, log_operation
from ..ports.location_types import InMemoryLocationTypeRegistry, LocationTypeRegistry
from ..ports.notifications import LoggingNotificationSink, NotificationSink
from .notices import Notice, NoticeFormatter

Listener = Callable[[SelectionSet], None]

# Changing any of these could break the admission invariants, so update_item refuses them.
PROTECTED_FIELDS = ("key", "type", "excluded", "country_code", "region_id", "primary_city_id")


def _mark_active(selection: SelectionSet, key: str) -> SelectionSet:
    marked: list[LocationItem] = []
    for s in selection:
        is_target = s.key == key
        marked.append(s if s.active == is_target else s.model_copy(update={"active": is_target}))
    return tuple(marked)


class SelectionStore:
    """Current and previous selection plus the admission workflow.

    All mutation goes through ``update``; readers only ever see immutable
    tuples of frozen items. Calls must be serialized by the owner: the
    admission check and the commit in ``add`` are not atomic.
    """

    def __init__(
        self,
        policy: ConflictPolicy | None = None,
        resolver: HierarchyResolver | None = None,
        spec_builder: SpecBuilder | None = None,
        notifications: NotificationSink | None = None,
        location_types: LocationTypeRegistry | None = None,
        formatter: NoticeFormatter | None = None,
    ) -> None:
        self._resolver = resolver or HierarchyResolver()
        self._policy = policy or ConflictPolicy(self._resolver)
        self._spec_builder = spec_builder or SpecBuilder()
        self._notifications = notifications or LoggingNotificationSink()
        self._location_types = location_types or InMemoryLocationTypeRegistry()
        self._formatter = formatter or NoticeFormatter()
        self._items: SelectionSet = ()
        self._previous: SelectionSet = ()
        self._retired: SelectionSet = ()
        self._listeners: list[Listener] = []
        self._logger = get_logger()

    # --- snapshot reads ---

    def get(self) -> SelectionSet:
        return self._items

    def get_previous(self) -> SelectionSet:
        return self._previous

    def get_retired(self) -> SelectionSet:
        """Items retired by the most recent successful ``add``."""
        return self._retired

    def find(self, key: str) -> LocationItem | None:
        for s in self._items:
            if s.key == key:
                return s
        return None

    # --- observers ---

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; it immediately receives the current selection."""
        self._listeners.append(listener)
        listener(self._items)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self) -> None:
        for listener in list(self._listeners):
            listener(self._items)

    # --- mutation ---

    def update(self, selection: SelectionSet) -> None:
        """Replace the selection wholesale, keeping the old one as previous."""
        self._previous = self._items
        self._items = tuple(selection)
        self._publish()

    def add(self, item: LocationInput) -> Admission:
        t0 = time.monotonic()
        candidate = coerce_item(item)
        admission = self._policy.admit(candidate, self._items)

        if isinstance(admission, Rejected):
            self._notify(Notice.for_rejection(admission))
            log_operation(
                "add",
                admission.reason.value,
                (time.monotonic() - t0) * 1000,
                extra={"key": candidate.key, "offending": [s.key for s in admission.offending]},
            )
            return admission

        self._retired = admission.retired
        self._notifications.hide()
        if admission.retired:
            self._notify(Notice.replaced(admission.retired, candidate))

        committed = replace(admission, selection=_mark_active(admission.selection, candidate.key))
        self.update(committed.selection)
        log_operation(
            "add",
            "accepted",
            (time.monotonic() - t0) * 1000,
            extra={"key": candidate.key, "retired": [s.key for s in committed.retired]},
        )
        return committed

    def update_item(self, item: Union[LocationItem, Mapping[str, Any]]) -> LocationItem | None:
        """Patch the provided fields of the selected item with the same key.

        Only presentation fields (name, radius, distance_unit, active) may
        change; the mode and hierarchy links are fixed once admitted.
        Returns the patched item, or None when the key is not selected.
        """
        t0 = time.monotonic()
        if isinstance(item, LocationItem):
            patch = {name: getattr(item, name) for name in item.model_fields_set}
        elif isinstance(item, Mapping):
            patch = dict(item)
        else:
            raise InvalidLocationItem(f"expected a location record, got {type(item).__name__}")
        if "key" not in patch:
            raise InvalidLocationItem("patch is missing 'key'")

        key = str(patch["key"])
        existing = self.find(key)
        if existing is None:
            self._logger.warning("update_item for unselected location", extra={"key": key})
            log_operation("update_item", "not_found", (time.monotonic() - t0) * 1000, extra={"key": key})
            return None

        merged = existing.model_dump()
        merged.update(patch)
        merged["active"] = True
        patched = coerce_item(merged)

        changed = [f for f in PROTECTED_FIELDS if getattr(patched, f) != getattr(existing, f)]
        if changed:
            raise ProtectedFieldPatch(key, changed)

        selection = tuple(patched if s.key == key else s for s in self._items)
        self.update(_mark_active(selection, key))
        log_operation("update_item", "patched", (time.monotonic() - t0) * 1000, extra={"key": key})
        return patched

    def remove(self, item: LocationInput | str) -> SelectionSet:
        """Remove an item and every selected location inside it, in any mode.

        Accepts a key, a LocationItem or a mapping with at least ``key``.
        Descendants are matched by key, so they go even when the item itself
        is not selected. Returns the removed items.
        """
        t0 = time.monotonic()
        if isinstance(item, LocationItem):
            key = item.key
        elif isinstance(item, Mapping):
            if item.get("key") in (None, ""):
                raise InvalidLocationItem("remove needs a location 'key'")
            key = str(item["key"])
        elif isinstance(item, (str, int)) and not isinstance(item, bool):
            key = str(item)
        else:
            raise InvalidLocationItem(f"expected a location key or record, got {type(item).__name__}")

        descendants = self._resolver.narrower_of_key(key, self._items)
        dropped = {key} | {s.key for s in descendants}
        removed = tuple(s for s in self._items if s.key in dropped)

        self.update(tuple(s for s in self._items if s.key not in dropped))
        log_operation(
            "remove",
            "removed" if removed else "absent",
            (time.monotonic() - t0) * 1000,
            extra={"key": key, "removed": [s.key for s in removed]},
        )
        return removed

    def clear(self) -> None:
        self._retired = ()
        self.update(())
        log_operation("clear", "cleared", 0.0)

    # --- projection ---

    def get_enabled_types(self) -> Sequence[str]:
        return self._location_types.get_enabled_types()

    def build_spec(self) -> TargetingSpec:
        return self._spec_builder.build(self._items, self._location_types.get_enabled_types())

    def _notify(self, notice: Notice) -> None:
        self._notifications.show(notice.level, self._formatter.render(notice), notice.auto_hide)
