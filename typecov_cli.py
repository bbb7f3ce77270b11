"""
typecov CLI

Entry point: argument parsing and dispatch only.
All command logic lives in cli.handlers.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from cli import handlers
from typecov import __version__
from typecov.logging import configure_cli_logging


def _load_environment(env_file: Optional[Path] = None) -> None:
    """Load .env (cwd by default) without overriding exported variables."""
    if env_file is None:
        found = find_dotenv(usecwd=True)
        if not found:
            return
        env_file = Path(found)
    load_dotenv(dotenv_path=env_file, override=False)


def _add_color_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--color",
        action="store_true",
        default=None,
        dest="color",
        help="Force color output (default: auto from TTY)",
    )
    parser.add_argument(
        "--no-color",
        action="store_false",
        dest="color",
        help="Disable color output",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Configure top-level CLI parser and subcommands."""
    parser = argparse.ArgumentParser(
        prog="typecov",
        description="typecov - summarize and compare typing coverage snapshots",
    )
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only log warnings and errors")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug messages")
    subparsers = parser.add_subparsers(dest="command")

    show_parser = subparsers.add_parser("show", help="Print the report for one snapshot")
    show_parser.add_argument("snapshot", type=Path, help="Snapshot JSON file")
    show_parser.add_argument("--json", action="store_true", help="Print normalized snapshot JSON instead")
    _add_color_flags(show_parser)

    diff_parser = subparsers.add_parser("diff", help="Compare two snapshots")
    diff_parser.add_argument("old", type=Path, help="Older snapshot JSON file")
    diff_parser.add_argument("new", type=Path, help="Newer snapshot JSON file")
    _add_color_flags(diff_parser)

    subparsers.add_parser("help", help="Show typecov command overview")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    _load_environment()
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_cli_logging(quiet=args.quiet, verbose=args.verbose)

    if args.command is None:
        return handlers.handle_help(parser)

    dispatch = {
        "help": lambda: handlers.handle_help(parser),
        "show": lambda: handlers.handle_show(args),
        "diff": lambda: handlers.handle_diff(args),
    }
    return dispatch[args.command]()


if __name__ == "__main__":
    sys.exit(main())
