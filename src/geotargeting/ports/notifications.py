"""Port: notification sink for accept/reject/replace messages."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Protocol, runtime_checkable

NoticeLevel = Literal["info", "error"]


@runtime_checkable
class NotificationSink(Protocol):
    """Surface a pre-rendered message to the user."""

    def show(self, level: NoticeLevel, message: str, auto_hide: bool) -> None: ...

    def hide(self) -> None: ...


# ---------------------------------------------------------------------------
# Default implementations (no UI deps)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ShownNotice:
    level: NoticeLevel
    message: str
    auto_hide: bool

    def to_dict(self) -> dict:
        return {"level": self.level, "message": self.message, "auto_hide": self.auto_hide}


class LoggingNotificationSink:
    """Writes notices to the ``geotargeting.notices`` logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("geotargeting.notices")

    def show(self, level: NoticeLevel, message: str, auto_hide: bool) -> None:
        log_level = logging.WARNING if level == "error" else logging.INFO
        self._logger.log(log_level, message, extra={"notice_level": level, "auto_hide": auto_hide})

    def hide(self) -> None:
        return None


class RecordingNotificationSink:
    """Keeps the visible notice and a history of everything shown."""

    def __init__(self) -> None:
        self.current: ShownNotice | None = None
        self.history: list[ShownNotice] = []

    def show(self, level: NoticeLevel, message: str, auto_hide: bool) -> None:
        notice = ShownNotice(level=level, message=message, auto_hide=auto_hide)
        self.current = notice
        self.history.append(notice)

    def hide(self) -> None:
        self.current = None
