"""
Typing coverage snapshot.

A Snapshot is one point-in-time measurement of static-typing adoption:
file/class/method counts, call-site typing and the number of files per
strictness sigil. Snapshots are built from parsed JSON (a metrics file or a
previously saved snapshot) and serialize back to the same keys.
"""

from __future__ import annotations

import json
import time
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import IO, Any, Callable, Dict, Mapping, Optional, Union

from typecov.coverage.printer import SnapshotPrinter
from typecov.errors import ParseError
from typecov.logging import get_logger

# Strictness names as found in the type checker metrics file.
STRICTNESSES = ("ignore", "false", "true", "strict", "strong", "stdlib")

_INT_FIELDS = (
    "duration",
    "files",
    "modules",
    "classes",
    "singleton_classes",
    "methods_without_sig",
    "methods_with_sig",
    "calls_untyped",
    "calls_typed",
)
_OPTIONAL_STR_FIELDS = ("version_static", "version_runtime", "commit_sha")


def _log():
    return get_logger("coverage.snapshot")


def utc_timestamp() -> int:
    """Current UTC time in whole seconds since the epoch."""
    return int(time.time())


@dataclass
class Snapshot:
    timestamp: int = field(default_factory=utc_timestamp)
    version_static: Optional[str] = None
    version_runtime: Optional[str] = None
    duration: int = 0
    commit_sha: Optional[str] = None
    commit_timestamp: Optional[int] = None
    files: int = 0
    modules: int = 0
    classes: int = 0
    singleton_classes: int = 0
    methods_without_sig: int = 0
    methods_with_sig: int = 0
    calls_untyped: int = 0
    calls_typed: int = 0
    sigils: Dict[str, int] = field(default_factory=dict)

    @property
    def methods(self) -> int:
        return self.methods_with_sig + self.methods_without_sig

    @property
    def calls(self) -> int:
        return self.calls_typed + self.calls_untyped

    def sigil_count(self, strictness: str) -> int:
        return self.sigils.get(strictness, 0)

    def print(self, out: Optional[IO[str]] = None, colors: bool = True, indent_level: int = 0) -> None:
        printer = SnapshotPrinter(out=out, colors=colors, indent_level=indent_level)
        printer.print_snapshot(self)

    def print_diff(
        self,
        other: "Snapshot",
        out: Optional[IO[str]] = None,
        colors: bool = True,
        indent_level: int = 0,
    ) -> None:
        printer = SnapshotPrinter(out=out, colors=colors, indent_level=indent_level)
        printer.print_diff(self, other)

    def serialize(self) -> Dict[str, Any]:
        """Every field, defaults included, keyed like the input accepted by from_obj."""
        data: Dict[str, Any] = {f.name: getattr(self, f.name) for f in fields(self)}
        data["sigils"] = dict(self.sigils)
        return data

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.serialize(), **kwargs)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Snapshot":
        path = Path(path)
        _log().debug("typecov: loading snapshot from %s", path)
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(f"snapshot file is not valid UTF-8: {exc}") from exc
        return cls.from_json(text)

    @classmethod
    def from_json(cls, text: str) -> "Snapshot":
        try:
            obj = json.loads(text)
        except (json.JSONDecodeError, RecursionError) as exc:
            raise ParseError(f"invalid snapshot JSON: {exc}") from exc
        if not isinstance(obj, dict):
            raise ParseError(f"snapshot JSON must be an object, got {type(obj).__name__}")
        return cls.from_obj(obj)

    @classmethod
    def from_obj(
        cls,
        obj: Mapping[str, Any],
        clock: Callable[[], int] = utc_timestamp,
    ) -> "Snapshot":
        """Build a fully defaulted snapshot. Unknown keys and unknown sigils are ignored."""
        if not isinstance(obj, Mapping):
            raise ParseError(f"snapshot must be a mapping, got {type(obj).__name__}")
        timestamp = _int_field(obj, "timestamp", None)
        snapshot = cls(timestamp=clock() if timestamp is None else timestamp)
        for name in _INT_FIELDS:
            setattr(snapshot, name, _int_field(obj, name, 0))
        for name in _OPTIONAL_STR_FIELDS:
            setattr(snapshot, name, _str_field(obj, name))
        snapshot.commit_timestamp = _int_field(obj, "commit_timestamp", None)

        sigils = obj.get("sigils")
        if sigils is not None:
            if not isinstance(sigils, Mapping):
                raise ParseError("field 'sigils' must be an object")
            for strictness in STRICTNESSES:
                if strictness in sigils:
                    snapshot.sigils[strictness] = _int_value("sigils." + strictness, sigils[strictness], 0)
        return snapshot


def _int_value(name: str, value: Any, default: Optional[int]) -> Optional[int]:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise ParseError(f"field {name!r} must be an integer, got {value!r}")
    return value


def _int_field(obj: Mapping[str, Any], name: str, default: Optional[int]) -> Optional[int]:
    return _int_value(name, obj.get(name), default)


def _str_field(obj: Mapping[str, Any], name: str) -> Optional[str]:
    value = obj.get(name)
    if value is not None and not isinstance(value, str):
        raise ParseError(f"field {name!r} must be a string, got {value!r}")
    return value
