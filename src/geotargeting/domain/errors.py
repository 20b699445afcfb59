"""Contract violations raised by the geo-targeting engine."""

from __future__ import annotations


class GeoTargetingError(Exception):
    """Base class for geo-targeting errors."""


class InvalidLocationItem(GeoTargetingError, ValueError):
    """A location record is missing ``key``/``type`` or carries invalid values."""


class ProtectedFieldPatch(GeoTargetingError, ValueError):
    """A patch tried to change the mode or hierarchy links of a selected item."""

    def __init__(self, key: str, fields: list[str]) -> None:
        self.key = key
        self.fields = fields
        super().__init__(
            f"cannot patch {', '.join(fields)} of location {key!r}; remove and add it instead"
        )
