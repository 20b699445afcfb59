"""Observability: structured logs (operation, outcome, latency_ms) and in-process counters."""

from __future__ import annotations

import logging
from typing import Any

_LOGGER = logging.getLogger("geotargeting.store")

# operations[name] = count, outcomes["name:outcome"] = count
METRICS: dict[str, dict[str, int]] = {"operations": {}, "outcomes": {}}


def get_logger() -> logging.Logger:
    return _LOGGER


def configure_logging(level: str = "INFO") -> None:
    """Basic stderr logging for the CLI and MCP entry points."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def log_operation(
    operation: str,
    outcome: str,
    latency_ms: float,
    extra: dict[str, Any] | None = None,
) -> None:
    """Emit structured log and update counters."""
    payload: dict[str, Any] = {
        "operation": operation,
        "outcome": outcome,
        "latency_ms": round(latency_ms, 2),
    }
    if extra:
        payload.update(extra)
    _LOGGER.info("store_operation", extra=payload)
    METRICS["operations"][operation] = METRICS["operations"].get(operation, 0) + 1
    outcome_key = f"{operation}:{outcome}"
    METRICS["outcomes"][outcome_key] = METRICS["outcomes"].get(outcome_key, 0) + 1


def metrics_snapshot() -> dict[str, dict[str, int]]:
    """Return current counters (for the MCP diagnostics tool)."""
    return {k: dict(v) for k, v in METRICS.items()}
