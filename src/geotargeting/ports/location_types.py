"""Port: registry of enabled location types (home, recent, travel_in, ...)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class LocationTypeRegistry(Protocol):
    """Read-only view of the location types currently enabled on the form."""

    def get_enabled_types(self) -> Sequence[str]: ...


class InMemoryLocationTypeRegistry:
    """Holds the enabled types in memory; the form updates it on toggle."""

    def __init__(self, types: Iterable[str] = ()) -> None:
        self._types = tuple(types)

    def get_enabled_types(self) -> Sequence[str]:
        return self._types

    def set_enabled_types(self, types: Iterable[str]) -> None:
        self._types = tuple(types)
