"""MCP server factory.

One server owns one selection session: the store and its notification
sink are created here and shared by every registered tool.
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from ...config.runtime import RuntimeSettings, get_settings
from ...ports.notifications import RecordingNotificationSink
from ...services.selection_store import SelectionStore
from ...wiring import build_selection_store
from .tools import register_geo_tools


def create_server(
    store: SelectionStore | None = None,
    notifications: RecordingNotificationSink | None = None,
    settings: RuntimeSettings | None = None,
) -> FastMCP:
    """Build and return a configured FastMCP server.

    Args:
        store: Selection session to expose. Built from settings when omitted.
        notifications: Sink the store reports to; tool responses echo its
            current notice. Must be the sink ``store`` was built with.
        settings: Runtime settings, defaults to ``get_settings()``.

    Returns:
        A FastMCP instance with the geo-targeting tools registered.
    """
    settings = settings or get_settings()
    notifications = notifications or RecordingNotificationSink()
    if store is None:
        store = build_selection_store(settings, notifications=notifications)

    server = FastMCP(settings.mcp_server_name)
    register_geo_tools(server, store, notifications)
    return server


def run_server() -> None:
    """Run the MCP server using stdio transport."""
    server = create_server()
    server.run(transport="stdio")


if __name__ == "__main__":
    run_server()
