"""Geo-targeting selection engine for ad campaign authoring."""

from .domain import (
    Accepted,
    InvalidLocationItem,
    LocationItem,
    LocationType,
    ProtectedFieldPatch,
    Rejected,
    RejectionReason,
)
from .models import TargetingSpec
from .services import SelectionStore

__version__ = "0.1.0"
__all__ = [
    "Accepted",
    "InvalidLocationItem",
    "LocationItem",
    "LocationType",
    "ProtectedFieldPatch",
    "Rejected",
    "RejectionReason",
    "SelectionStore",
    "TargetingSpec",
]
