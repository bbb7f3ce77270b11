"""Tests for SnapshotPrinter: single snapshot report and snapshot diff."""

import io
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from report.ux import colorize
from typecov.coverage.printer import SnapshotPrinter
from typecov.coverage.snapshot import Snapshot


def _render_snapshot(snapshot: Snapshot, colors: bool = False) -> str:
    buf = io.StringIO()
    SnapshotPrinter(out=buf, colors=colors).print_snapshot(snapshot)
    return buf.getvalue()


def _render_diff(a: Snapshot, b: Snapshot, colors: bool = False) -> str:
    buf = io.StringIO()
    SnapshotPrinter(out=buf, colors=colors).print_diff(a, b)
    return buf.getvalue()


def test_print_snapshot_end_to_end() -> None:
    snap = Snapshot.from_json(
        '{"files":10,"methods_with_sig":7,"methods_without_sig":3,"sigils":{"true":10}}'
    )

    out = _render_snapshot(snap)

    assert out == (
        "Content:\n"
        "  files: 10\n"
        "  modules: 0\n"
        "  classes: 0\n"
        "  methods: 10\n"
        "\n"
        "Sigils:\n"
        "  true: 10 (100%)\n"
        "\n"
        "Methods:\n"
        "  with signature: 7 (70%)\n"
        "  without signature: 3 (30%)\n"
        "\n"
        "Calls:\n"
    )


def test_print_snapshot_versions_first() -> None:
    out = _render_snapshot(Snapshot(version_static="0.5.1", version_runtime="0.5.2"))
    lines = out.splitlines()
    assert lines[0] == "Checker static: 0.5.1"
    assert lines[1] == "Checker runtime: 0.5.2"
    assert lines[2] == ""
    assert lines[3] == "Content:"


def test_print_snapshot_single_version() -> None:
    out = _render_snapshot(Snapshot(version_runtime="0.5.2"))
    assert out.startswith("Checker runtime: 0.5.2\n\nContent:\n")
    assert "Checker static" not in out


def test_print_snapshot_without_versions_starts_with_content() -> None:
    assert _render_snapshot(Snapshot()).startswith("Content:\n")


def test_print_snapshot_excludes_singleton_classes() -> None:
    snap = Snapshot(classes=10, singleton_classes=4)
    out = _render_snapshot(snap)
    assert "  classes: 6\n" in out
    assert snap.classes == 10


def test_print_snapshot_hides_zero_rows() -> None:
    snap = Snapshot(files=4, sigils={"false": 0, "strict": 4}, calls_typed=3)
    out = _render_snapshot(snap)
    assert "false" not in out
    assert "  strict: 4 (100%)\n" in out
    assert "  typed: 3 (100%)\n" in out
    assert "untyped" not in out


def test_print_snapshot_without_files_has_no_percent() -> None:
    out = _render_snapshot(Snapshot(files=0, sigils={"true": 2}))
    assert "  true: 2\n" in out


def test_print_snapshot_indent_level() -> None:
    buf = io.StringIO()
    SnapshotPrinter(out=buf, colors=False, indent_level=2).print_snapshot(Snapshot(files=1))
    lines = buf.getvalue().splitlines()
    assert lines[0] == "  Content:"
    assert lines[1] == "    files: 1"


@pytest.mark.parametrize(
    "value,total,expected",
    [
        (5, 10, "(50%)"),
        (1, 3, "(33%)"),
        (2, 3, "(67%)"),
        (1, 8, "(13%)"),
        (0, 10, "(0%)"),
        (10, 10, "(100%)"),
        (5, 0, ""),
        (None, 10, ""),
        (5, None, ""),
    ],
)
def test_percent(value, total, expected) -> None:
    assert SnapshotPrinter(out=io.StringIO()).percent(value, total) == expected


def test_diff_line_signs_and_colors() -> None:
    buf = io.StringIO()
    printer = SnapshotPrinter(out=buf, colors=True)
    printer.diff_line("files", 10, 15)
    printer.diff_line("files", 15, 10)
    printer.diff_line("files", 7, 7)

    lines = buf.getvalue().splitlines()
    assert lines[0] == "files\t10\t15\t" + colorize("+5", "green")
    assert lines[1] == "files\t15\t10\t" + colorize("-5", "red")
    assert lines[2] == "files\t7\t7\t" + colorize("0", "light_black")


def test_diff_line_without_colors() -> None:
    buf = io.StringIO()
    SnapshotPrinter(out=buf, colors=False).diff_line("typed", 1, 4)
    assert buf.getvalue() == "typed\t1\t4\t+3\n"


def test_print_diff_full_output() -> None:
    a = Snapshot(methods_with_sig=10, methods_without_sig=5, calls_typed=20, calls_untyped=4,
                 sigils={"false": 3, "true": 2})
    b = Snapshot(methods_with_sig=12, methods_without_sig=5, calls_typed=18, calls_untyped=4,
                 sigils={"true": 4, "strict": 1})

    out = _render_diff(a, b)

    assert out == (
        "\n"
        "Sigils:\n"
        "  ignore\t0\t0\t0\n"
        "  false\t\t3\t0\t-3\n"
        "  true\t\t2\t4\t+2\n"
        "  strict\t0\t1\t+1\n"
        "  strong\t0\t0\t0\n"
        "\n"
        "Methods:\n"
        "  with signature   \t10\t12\t+2\n"
        "  without signature\t5\t5\t0\n"
        "\n"
        "Calls:\n"
        "  typed  \t20\t18\t-2\n"
        "  untyped\t4\t4\t0\n"
    )


def test_print_diff_shows_rows_hidden_by_print_snapshot() -> None:
    a = Snapshot(files=2, sigils={"strict": 0, "true": 2})
    b = Snapshot(files=2, sigils={"true": 2})

    assert "strict" not in _render_snapshot(a)
    assert "  strict\t0\t0\t0\n" in _render_diff(a, b)


def test_print_diff_never_shows_internal_strictness_or_percent() -> None:
    a = Snapshot(files=4, sigils={"stdlib": 3, "true": 1})
    b = Snapshot(files=4, sigils={"stdlib": 5, "true": 4})
    out = _render_diff(a, b)
    assert "stdlib" not in out
    assert "STDLIB" not in out
    assert "%" not in out


def test_snapshot_print_wrappers() -> None:
    a = Snapshot(files=1, sigils={"true": 1})
    b = Snapshot(files=2, sigils={"true": 2})

    buf = io.StringIO()
    a.print(out=buf, colors=False)
    assert buf.getvalue() == _render_snapshot(a)

    buf = io.StringIO()
    a.print_diff(b, out=buf, colors=False)
    assert buf.getvalue() == _render_diff(a, b)


def test_print_snapshot_empty_version_still_printed() -> None:
    out = _render_snapshot(Snapshot.from_obj({"version_static": ""}))
    assert out.startswith("Checker static: \n\nContent:\n")
    assert "Checker runtime" not in out
