"""Text rendering of one snapshot, or of the difference between two."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from typecov.printer import Printer
from typecov.sigils import diff_strictnesses

if TYPE_CHECKING:
    from typecov.coverage.snapshot import Snapshot


class SnapshotPrinter(Printer):
    def print_snapshot(self, snapshot: "Snapshot") -> None:
        methods = snapshot.methods
        calls = snapshot.calls

        if snapshot.version_static is not None or snapshot.version_runtime is not None:
            if snapshot.version_static is not None:
                self.printl(f"Checker static: {snapshot.version_static}")
            if snapshot.version_runtime is not None:
                self.printl(f"Checker runtime: {snapshot.version_runtime}")
            self.printn()
        self.printl("Content:")
        with self.indented():
            self.printl(f"files: {snapshot.files}")
            self.printl(f"modules: {snapshot.modules}")
            self.printl(f"classes: {snapshot.classes - snapshot.singleton_classes}")
            self.printl(f"methods: {methods}")
        self.printn()
        self.printl("Sigils:")
        self._print_map(snapshot.sigils, snapshot.files)
        self.printn()
        self.printl("Methods:")
        self._print_map(
            {
                "with signature": snapshot.methods_with_sig,
                "without signature": snapshot.methods_without_sig,
            },
            methods,
        )
        self.printn()
        self.printl("Calls:")
        self._print_map(
            {
                "typed": snapshot.calls_typed,
                "untyped": snapshot.calls_untyped,
            },
            calls,
        )

    def print_diff(self, a: "Snapshot", b: "Snapshot") -> None:
        """Compare a (before) with b (after); every row is shown, zero deltas included."""
        self.printn()
        self.printl("Sigils:")
        self._diff_sigils(a.sigils, b.sigils)
        self.printn()
        self.printl("Methods:")
        self._diff_rows(
            [
                ("with signature   ", a.methods_with_sig, b.methods_with_sig),
                ("without signature", a.methods_without_sig, b.methods_without_sig),
            ]
        )
        self.printn()
        self.printl("Calls:")
        self._diff_rows(
            [
                ("typed  ", a.calls_typed, b.calls_typed),
                ("untyped", a.calls_untyped, b.calls_untyped),
            ]
        )

    def percent(self, value: Optional[int], total: Optional[int]) -> str:
        """Share of total as "(NN%)", rounded half up; empty when it cannot be computed."""
        if value is None or total is None or total == 0:
            return ""
        return f"({math.floor(value * 100.0 / total + 0.5)}%)"

    def diff_line(self, title: str, a: int, b: int) -> None:
        diff = b - a
        if diff > 0:
            delta = self.colorize(f"+{diff}", "green")
        elif diff < 0:
            delta = self.colorize(str(diff), "red")
        else:
            delta = self.colorize(str(diff), "light_black")
        self.printl(f"{title}\t{a}\t{b}\t{delta}")

    def _print_map(self, counts: Dict[str, int], total: int) -> None:
        with self.indented():
            for key, value in counts.items():
                if value <= 0:
                    continue
                pct = self.percent(value, total)
                self.printl(f"{key}: {value} {pct}" if pct else f"{key}: {value}")

    def _diff_sigils(self, a: Dict[str, int], b: Dict[str, int]) -> None:
        rows: List[Tuple[str, int, int]] = []
        for strictness in diff_strictnesses():
            title = strictness
            if len(title) < 6:
                title = f"{title}\t"
            rows.append((title, a.get(strictness, 0), b.get(strictness, 0)))
        self._diff_rows(rows)

    def _diff_rows(self, rows: List[Tuple[str, int, int]]) -> None:
        with self.indented():
            for title, before, after in rows:
                self.diff_line(title, before, after)
