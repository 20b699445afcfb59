"""Tool registry for the geo-targeting MCP server.

Each tool returns a JSON string. Contract violations (malformed records,
protected patches) come back as ``{"error": ...}`` rather than raising.
"""

from __future__ import annotations

import json
import time
from typing import Any

from ...domain.conflict_policy import Rejected
from ...domain.errors import GeoTargetingError
from ...domain.locations import SelectionSet
from ...observability import get_logger, metrics_snapshot
from ...ports.notifications import RecordingNotificationSink
from ...services.selection_store import SelectionStore

GEO_TOOLS = frozenset({
    "geo_selection_add",
    "geo_selection_update",
    "geo_selection_remove",
    "geo_selection_get",
    "geo_selection_clear",
    "geo_targeting_spec",
    "geo_location_types",
    "geo_diagnostics",
})


def _dump(selection: SelectionSet) -> list[dict[str, Any]]:
    return [s.model_dump(mode="json", exclude_none=True) for s in selection]


def _state(store: SelectionStore, notifications: RecordingNotificationSink) -> dict[str, Any]:
    return {
        "selection": _dump(store.get()),
        "notice": notifications.current.to_dict() if notifications.current else None,
    }


def _error(exc: GeoTargetingError) -> str:
    return json.dumps({"error": str(exc), "error_type": type(exc).__name__})


def register_geo_tools(mcp, store: SelectionStore, notifications: RecordingNotificationSink):
    """Register selection tools bound to ``store``."""
    logger = get_logger()

    def _log(tool: str, t0: float, **extra: Any) -> None:
        latency_ms = (time.monotonic() - t0) * 1000
        logger.info("tool_invocation", extra={"tool": tool, "latency_ms": round(latency_ms, 2), **extra})

    @mcp.tool()
    def geo_selection_add(location: dict[str, Any]) -> str:
        """Add a resolved location to the selection (include or exclude).

        Args:
            location: Location record with key, type, name and optional
                country_code, region_id, primary_city_id, radius,
                distance_unit and excluded

        Returns:
            JSON with accepted, reason (when rejected), retired, selection and notice
        """
        t0 = time.monotonic()
        try:
            admission = store.add(location)
        except GeoTargetingError as exc:
            return _error(exc)
        result = _state(store, notifications)
        if isinstance(admission, Rejected):
            result.update(accepted=False, reason=admission.reason.value, offending=_dump(admission.offending))
        else:
            result.update(accepted=True, retired=_dump(admission.retired))
        _log("geo_selection_add", t0, accepted=result["accepted"])
        return json.dumps(result, indent=2)

    @mcp.tool()
    def geo_selection_update(patch: dict[str, Any]) -> str:
        """Patch display fields (name, radius, distance_unit) of a selected location.

        Args:
            patch: Fields to overwrite; must include the location key

        Returns:
            JSON with updated (bool), selection and notice
        """
        t0 = time.monotonic()
        try:
            patched = store.update_item(patch)
        except GeoTargetingError as exc:
            return _error(exc)
        result = _state(store, notifications)
        result["updated"] = patched is not None
        _log("geo_selection_update", t0, updated=result["updated"])
        return json.dumps(result, indent=2)

    @mcp.tool()
    def geo_selection_remove(key: str) -> str:
        """Remove a location and every selected location inside it.

        Args:
            key: Key of the selected location

        Returns:
            JSON with removed items, selection and notice
        """
        t0 = time.monotonic()
        removed = store.remove(key)
        result = _state(store, notifications)
        result["removed"] = _dump(removed)
        _log("geo_selection_remove", t0, removed_count=len(removed))
        return json.dumps(result, indent=2)

    @mcp.tool()
    def geo_selection_get() -> str:
        """Current, previous and last-retired selections."""
        result = _state(store, notifications)
        result["previous"] = _dump(store.get_previous())
        result["retired"] = _dump(store.get_retired())
        return json.dumps(result, indent=2)

    @mcp.tool()
    def geo_selection_clear() -> str:
        """Drop every selected location."""
        store.clear()
        return json.dumps(_state(store, notifications), indent=2)

    @mcp.tool()
    def geo_targeting_spec() -> str:
        """Targeting spec (geo_locations / excluded_geo_locations) for submission."""
        return json.dumps(store.build_spec().to_wire(), indent=2)

    @mcp.tool()
    def geo_location_types() -> str:
        """Location types sent with the included bucket."""
        return json.dumps({"location_types": list(store.get_enabled_types())})

    @mcp.tool()
    def geo_diagnostics() -> str:
        """Operation counters for this process."""
        return json.dumps(metrics_snapshot(), indent=2)
