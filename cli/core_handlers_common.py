"""Shared helpers for core CLI handlers."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from typecov.coverage.snapshot import Snapshot
from typecov.errors import ParseError


def _err(msg: str) -> None:
    """Log unified error message (via logger, respects --quiet)."""
    _clog().error("typecov: %s", msg)


def _clog() -> Any:
    from typecov.logging import get_logger

    return get_logger("cli")


def _check_file(path: Path) -> int:
    """Return 0 if path is an existing file, 1 and log error otherwise."""
    if not path.exists():
        _err(f"snapshot not found: {path}")
        return 1
    if not path.is_file():
        _err(f"not a file: {path}")
        return 1
    return 0


def _load_snapshot(path: Path) -> Optional[Snapshot]:
    """Load snapshot file; log error and return None when missing, unreadable or malformed."""
    if _check_file(path) != 0:
        return None
    try:
        return Snapshot.from_file(path)
    except ParseError as exc:
        _err(f"{path}: {exc}")
    except OSError as exc:
        _err(f"cannot read {path}: {exc}")
    return None
