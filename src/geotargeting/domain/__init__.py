"""Domain layer for geo-targeting selection."""

from .conflict_policy import Accepted, Admission, ConflictPolicy, Rejected, RejectionReason
from .errors import GeoTargetingError, InvalidLocationItem, ProtectedFieldPatch
from .hierarchy import HierarchyResolver
from .locations import DistanceUnit, LocationItem, LocationType, SelectionSet, coerce_item
from .spec_builder import PLURAL_TYPE_NAMES, SpecBuilder

__all__ = [
    "Accepted",
    "Admission",
    "ConflictPolicy",
    "DistanceUnit",
    "GeoTargetingError",
    "HierarchyResolver",
    "InvalidLocationItem",
    "LocationItem",
    "LocationType",
    "PLURAL_TYPE_NAMES",
    "ProtectedFieldPatch",
    "Rejected",
    "RejectionReason",
    "SelectionSet",
    "SpecBuilder",
    "coerce_item",
]
