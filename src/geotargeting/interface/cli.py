"""CLI for replaying geo-targeting edits and printing the resulting spec."""

import argparse
import json
import sys
from pathlib import Path

from ..config.runtime import get_settings
from ..domain.conflict_policy import Rejected
from ..domain.errors import GeoTargetingError
from ..observability import configure_logging
from ..ports.notifications import RecordingNotificationSink
from ..services.selection_store import SelectionStore
from ..wiring import build_selection_store

_OPS = ("add", "update", "remove", "clear")


def load_operations(path: Path) -> list[dict]:
    """Load an edit script: a JSON list of {"op": ..., "item": {...}} objects."""
    if not path.exists():
        print(f"Error: operations file not found: {path}", file=sys.stderr)
        sys.exit(1)
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        print("Error: JSON file must contain a list of operations.", file=sys.stderr)
        sys.exit(1)
    for i, entry in enumerate(raw):
        if not isinstance(entry, dict) or entry.get("op") not in _OPS:
            print(f"Error: operation at index {i} must have op in {', '.join(_OPS)}", file=sys.stderr)
            sys.exit(1)
        if entry["op"] != "clear" and not isinstance(entry.get("item"), dict):
            print(f"Error: operation at index {i} is missing an item object", file=sys.stderr)
            sys.exit(1)
    return raw


def apply_operations(store: SelectionStore, operations: list[dict]) -> list[str]:
    """Run ``operations`` against ``store``; return one log line per operation."""
    lines: list[str] = []
    for entry in operations:
        op = entry["op"]
        item = entry.get("item") or {}
        if op == "add":
            admission = store.add(item)
            if isinstance(admission, Rejected):
                lines.append(f"add {item.get('key')}: rejected ({admission.reason.value})")
            else:
                retired = ", ".join(s.key for s in admission.retired) or "-"
                lines.append(f"add {item.get('key')}: accepted (retired: {retired})")
        elif op == "update":
            patched = store.update_item(item)
            lines.append(f"update {item.get('key')}: {'patched' if patched else 'not selected'}")
        elif op == "remove":
            removed = store.remove(str(item.get("key")))
            lines.append(f"remove {item.get('key')}: {len(removed)} removed")
        else:
            store.clear()
            lines.append("clear")
    return lines


def main():
    parser = argparse.ArgumentParser(description="Geo-targeting selection engine")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    apply_parser = subparsers.add_parser("apply", help="Replay an edit script and print the targeting spec")
    apply_parser.add_argument("--file", type=Path, required=True, help="Path to JSON list of operations")
    apply_parser.add_argument(
        "--types",
        nargs="*",
        default=None,
        help="Override enabled location types (default from settings)",
    )

    subparsers.add_parser("types", help="Show enabled location types")
    subparsers.add_parser("serve", help="Run the MCP server on stdio")

    args = parser.parse_args()
    settings = get_settings()
    configure_logging(settings.log_level)

    if args.command == "apply":
        operations = load_operations(args.file)
        if args.types is not None:
            settings = settings.model_copy(update={"enabled_location_types": args.types})
        notifications = RecordingNotificationSink()
        store = build_selection_store(settings, notifications=notifications)
        try:
            lines = apply_operations(store, operations)
        except GeoTargetingError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        for line in lines:
            print(line, file=sys.stderr)
        for notice in notifications.history:
            print(f"[{notice.level}] {notice.message}", file=sys.stderr)
        print(json.dumps(store.build_spec().to_wire(), indent=2))
    elif args.command == "types":
        print(json.dumps(settings.enabled_location_types))
    elif args.command == "serve":
        from .mcp.server import run_server

        run_server()
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
