"""Core command handlers: show and diff snapshots."""

from __future__ import annotations

import sys
from typing import Any

from report.ux import should_use_color
from typecov.coverage.printer import SnapshotPrinter

from .core_handlers_common import _clog, _load_snapshot


def handle_help(parser: Any) -> int:
    """Print high-level command overview and detailed argparse help."""
    print("typecov - typing coverage snapshots")
    print()
    print("Commands:")
    print("  show <snapshot.json>          report for one snapshot (--json for normalized JSON)")
    print("  diff <old.json> <new.json>    per-category changes between two snapshots")
    print()
    print("  --color/--no-color to force colors (default: auto from TTY).")
    print("  --help after any command for details.")
    print()
    parser.print_help()
    return 0


def handle_show(args: Any) -> int:
    path = args.snapshot.resolve()
    snapshot = _load_snapshot(path)
    if snapshot is None:
        return 1
    if getattr(args, "json", False):
        print(snapshot.to_json(indent=2, sort_keys=True))
        return 0
    colors = should_use_color(getattr(args, "color", None))
    printer = SnapshotPrinter(out=sys.stdout, colors=colors)
    printer.print_snapshot(snapshot)
    return 0


def handle_diff(args: Any) -> int:
    old_path = args.old.resolve()
    new_path = args.new.resolve()
    old = _load_snapshot(old_path)
    if old is None:
        return 1
    new = _load_snapshot(new_path)
    if new is None:
        return 1
    _clog().debug("typecov: diff %s -> %s", old_path, new_path)
    colors = should_use_color(getattr(args, "color", None))
    printer = SnapshotPrinter(out=sys.stdout, colors=colors)
    printer.print_diff(old, new)
    return 0
