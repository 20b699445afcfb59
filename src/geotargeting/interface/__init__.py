"""Outer surfaces: MCP server and CLI."""
