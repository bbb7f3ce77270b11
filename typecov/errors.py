"""Errors raised while building snapshots from external input."""

from __future__ import annotations


class SnapshotError(Exception):
    """Base class for snapshot loading failures."""


class ParseError(SnapshotError, ValueError):
    """Snapshot input is not valid JSON or does not have the expected shape."""
