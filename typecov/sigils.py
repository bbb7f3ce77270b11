"""Strictness levels a file can declare through its typing sigil."""

from __future__ import annotations

from typing import List

STRICTNESS_IGNORE = "ignore"
STRICTNESS_FALSE = "false"
STRICTNESS_TRUE = "true"
STRICTNESS_STRICT = "strict"
STRICTNESS_STRONG = "strong"
# Only the checker itself uses this level (stdlib payloads); users never see it.
STRICTNESS_INTERNAL = "__STDLIB_INTERNAL"

VALID_STRICTNESS = (
    STRICTNESS_IGNORE,
    STRICTNESS_FALSE,
    STRICTNESS_TRUE,
    STRICTNESS_STRICT,
    STRICTNESS_STRONG,
    STRICTNESS_INTERNAL,
)


def diff_strictnesses() -> List[str]:
    """Strictness rows shown when comparing two snapshots, in display order."""
    return [s for s in VALID_STRICTNESS if s != STRICTNESS_INTERNAL]
