"""Centralized logging helpers for the CLI and the snapshot loader."""

from __future__ import annotations

import logging
import os
import sys

_configured = False


def _resolve_level() -> int:
    raw = os.environ.get("TYPECOV_LOG_LEVEL", "").strip().upper()
    if raw:
        level = getattr(logging, raw, logging.INFO)
        return level if isinstance(level, int) else logging.INFO
    return logging.INFO


def configure_cli_logging(*, quiet: bool = False, verbose: bool = False) -> None:
    """Set typecov.* logger levels from CLI flags. --quiet/--verbose override env."""
    global _configured
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = _resolve_level()
    root = logging.getLogger("typecov")
    root.setLevel(level)
    if not root.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(h)
        root.propagate = False
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the typecov.<name> logger; messages reach stderr through the typecov logger."""
    logger = logging.getLogger(f"typecov.{name}")
    if not _configured:
        root = logging.getLogger("typecov")
        if root.level == logging.NOTSET:
            root.setLevel(_resolve_level())
    return logger
