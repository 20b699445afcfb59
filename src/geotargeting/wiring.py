"""Composition root — single place where all wiring happens.

Each targeting form (or MCP session) calls ``build_selection_store()`` to
get its own store; there is no global selection.
"""

from __future__ import annotations

from .config.runtime import RuntimeSettings, get_settings
from .ports.location_types import InMemoryLocationTypeRegistry
from .ports.notifications import LoggingNotificationSink, NotificationSink
from .services.notices import NoticeFormatter
from .services.selection_store import SelectionStore


def build_selection_store(
    settings: RuntimeSettings | None = None,
    notifications: NotificationSink | None = None,
) -> SelectionStore:
    """Construct a SelectionStore with settings-backed collaborators."""
    settings = settings or get_settings()
    return SelectionStore(
        notifications=notifications or LoggingNotificationSink(),
        location_types=InMemoryLocationTypeRegistry(settings.enabled_location_types),
        formatter=NoticeFormatter(settings),
    )
