"""Command line interface for Bruno."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from . import __version__
from .config import ProjectConfig
from .errors import ScaffoldError
from .scaffold import ProjectScaffolder


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bruno", description="Scaffold Bruno projects")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every step to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", help="initialize a new Bruno project")
    init_parser.add_argument("project_name", help="Name of the project")
    init_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Parent directory for the project (defaults to the current directory)",
    )
    init_parser.add_argument(
        "--cargo",
        default="cargo",
        help="Executable used to run 'init --name <project_name>'",
    )
    init_parser.add_argument(
        "--with-modules",
        action="store_true",
        help="Also create models, controllers, views and utils modules",
    )

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _success_mark(stream) -> str:
    encoding = getattr(stream, "encoding", None) or "utf-8"
    try:
        "\u2705".encode(encoding)
    except (LookupError, UnicodeEncodeError):
        return "[ok]"
    return "\u2705"


def _handle_init(args: argparse.Namespace) -> int:
    config = ProjectConfig.from_name(
        args.project_name,
        directory=args.directory,
        cargo=args.cargo,
        with_modules=args.with_modules,
    )
    print(f"Initializing new Bruno project: {config.name}")
    ProjectScaffolder(config).create()
    print(f"{_success_mark(sys.stdout)} Bruno project '{config.name}' initialized successfully!")
    print("Run the following commands to get started:")
    print(f"  cd {config.name}")
    print("  cargo build")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    try:
        if args.command == "init":
            return _handle_init(args)
    except ScaffoldError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
