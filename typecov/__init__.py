"""typecov: summarize and compare static-typing adoption snapshots."""

from typecov.coverage.printer import SnapshotPrinter
from typecov.coverage.snapshot import STRICTNESSES, Snapshot
from typecov.errors import ParseError, SnapshotError

__version__ = "0.4.0"

__all__ = [
    "ParseError",
    "STRICTNESSES",
    "Snapshot",
    "SnapshotError",
    "SnapshotPrinter",
    "__version__",
]
