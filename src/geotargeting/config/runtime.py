"""Pydantic-based runtime settings for the geo-targeting engine.

Loads from environment variables (with optional .env file).
Invalid values fail fast on first ``get_settings()`` call.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class RuntimeSettings(BaseSettings):
    """All configuration for the engine and its outer surfaces."""

    model_config = {"env_prefix": "GEOTARGETING_", "env_file": ".env", "env_file_encoding": "utf-8"}

    # --- Location types ---
    enabled_location_types: list[str] = Field(
        default_factory=lambda: ["home", "recent"],
        description="Location types sent with geo_locations (JSON list in env)",
    )

    # --- Notice templates ---
    message_narrower_included: str = Field(
        default="You cannot exclude this location while {names} remain included.",
        description="Shown when an exclusion contains included locations; {names}",
    )
    message_missing_broader: str = Field(
        default="You can only exclude a location that lies inside an included location.",
        description="Shown when an exclusion has no included broader location",
    )
    message_replaced: str = Field(
        default="{names} replaced by {to_name}.",
        description="Shown when an added location retires others; {names}, {to_name}",
    )

    # --- Logging ---
    log_level: str = Field(default="INFO", description="Root log level for entry points")

    # --- MCP ---
    mcp_server_name: str = Field(default="geotargeting", description="FastMCP server name")

    @field_validator("message_narrower_included", "message_missing_broader", "message_replaced")
    @classmethod
    def _non_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("notice template must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {v!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> RuntimeSettings:
    """Return the singleton RuntimeSettings (cached after first call)."""
    return RuntimeSettings()
