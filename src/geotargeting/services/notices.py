"""Notices: which message situation occurred and how it renders."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..config.runtime import RuntimeSettings, get_settings
from ..domain.conflict_policy import Rejected, RejectionReason
from ..domain.locations import LocationItem, SelectionSet
from ..ports.notifications import NoticeLevel


class NoticeKind(str, Enum):
    narrower_included_conflict = "narrower_included_conflict"
    missing_broader_inclusion = "missing_broader_inclusion"
    replaced = "replaced"


@dataclass(frozen=True)
class Notice:
    """A message situation plus the location names it mentions."""

    kind: NoticeKind
    level: NoticeLevel
    auto_hide: bool
    names: tuple[str, ...] = field(default_factory=tuple)
    to_name: str | None = None

    @classmethod
    def for_rejection(cls, rejection: Rejected) -> Notice:
        if rejection.reason is RejectionReason.narrower_included_conflict:
            kind = NoticeKind.narrower_included_conflict
        else:
            kind = NoticeKind.missing_broader_inclusion
        return cls(
            kind=kind,
            level="error",
            auto_hide=False,
            names=tuple(s.display_name for s in rejection.offending),
        )

    @classmethod
    def replaced(cls, retired: SelectionSet, item: LocationItem) -> Notice:
        return cls(
            kind=NoticeKind.replaced,
            level="info",
            auto_hide=True,
            names=tuple(s.display_name for s in retired),
            to_name=item.display_name,
        )


class NoticeFormatter:
    """Render notices from the configured templates."""

    def __init__(self, settings: RuntimeSettings | None = None) -> None:
        settings = settings or get_settings()
        self._templates = {
            NoticeKind.narrower_included_conflict: settings.message_narrower_included,
            NoticeKind.missing_broader_inclusion: settings.message_missing_broader,
            NoticeKind.replaced: settings.message_replaced,
        }

    def render(self, notice: Notice) -> str:
        return self._templates[notice.kind].format(
            names=", ".join(notice.names),
            to_name=notice.to_name or "",
        )
