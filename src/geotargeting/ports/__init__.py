"""Ports consumed by the selection store."""

from .location_types import InMemoryLocationTypeRegistry, LocationTypeRegistry
from .notifications import (
    LoggingNotificationSink,
    NoticeLevel,
    NotificationSink,
    RecordingNotificationSink,
    ShownNotice,
)

__all__ = [
    "InMemoryLocationTypeRegistry",
    "LocationTypeRegistry",
    "LoggingNotificationSink",
    "NoticeLevel",
    "NotificationSink",
    "RecordingNotificationSink",
    "ShownNotice",
]
