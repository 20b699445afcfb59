"""ConflictPolicy: admission rules for a candidate location."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .hierarchy import HierarchyResolver
from .locations import LocationItem, SelectionSet


class RejectionReason(str, Enum):
    """Why a candidate cannot join the selection."""

    narrower_included_conflict = "narrower_included_conflict"
    missing_broader_inclusion = "missing_broader_inclusion"


@dataclass(frozen=True)
class Rejected:
    """Candidate refused; ``offending`` names the items that block it."""

    reason: RejectionReason
    offending: SelectionSet = field(default_factory=tuple)

    @property
    def accepted(self) -> bool:
        return False


@dataclass(frozen=True)
class Accepted:
    """Candidate admitted; ``selection`` is the full replacement set."""

    selection: SelectionSet
    retired: SelectionSet = field(default_factory=tuple)

    @property
    def accepted(self) -> bool:
        return True


Admission = Union[Accepted, Rejected]


class ConflictPolicy:
    """Decide whether a candidate is admitted and which items it retires.

    An exclusion is only valid when a selected, included ancestor covers it
    and no included descendant would be contradicted by it. Same-mode
    ancestors and descendants are redundant once the candidate is in and get
    retired.
    """

    def __init__(self, resolver: HierarchyResolver | None = None) -> None:
        self._resolver = resolver or HierarchyResolver()

    def admit(self, item: LocationItem, selection: SelectionSet) -> Admission:
        broader, narrower = self._resolver.relations(item, selection)

        if item.excluded:
            included_narrower = tuple(s for s in narrower if not s.excluded)
            if included_narrower:
                return Rejected(RejectionReason.narrower_included_conflict, included_narrower)
            if not any(not s.excluded for s in broader):
                return Rejected(RejectionReason.missing_broader_inclusion)

        retired_keys: set[str] = set()
        retired: list[LocationItem] = []
        for s in (*broader, *narrower):
            if s.excluded == item.excluded and s.key not in retired_keys:
                retired_keys.add(s.key)
                retired.append(s)

        kept = tuple(s for s in selection if s.key not in retired_keys and s.key != item.key)
        return Accepted(selection=(item, *kept), retired=tuple(retired))
