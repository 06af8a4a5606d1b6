"""Command line interface for spminit."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import InitSettings
from .errors import InitError
from .io.adapters.local import LocalFileSystem
from .io.adapters.overlay import OverlayFileSystem
from .io.interfaces import FileSystem
from .kinds import PackageKind
from .scaffold import PackageInitializer
from .tools_version import ToolsVersion


def _parse_kind(value: str) -> PackageKind:
    try:
        return PackageKind.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _parse_tools_version(value: str) -> ToolsVersion:
    try:
        return ToolsVersion.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--log-level", help="Logging level (defaults to $SPMINIT_LOG_LEVEL or WARNING)")

    parser = argparse.ArgumentParser(description="Create skeleton Swift packages")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", parents=[common], help="initialize a new package")
    init_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Directory to create the package in (defaults to the current directory)",
    )
    init_parser.add_argument(
        "-t",
        "--type",
        dest="kind",
        type=_parse_kind,
        default=PackageKind.LIBRARY,
        metavar="{" + ",".join(kind.value for kind in PackageKind) + "}",
        help="Package type (default: library)",
    )
    init_parser.add_argument(
        "--tools-version",
        type=_parse_tools_version,
        help="Tools version to stamp onto the manifest (defaults to $SPMINIT_TOOLS_VERSION)",
    )
    init_parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Report what would be created without touching the disk",
    )

    subparsers.add_parser("kinds", parents=[common], help="list the supported package types")

    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _handle_init(args: argparse.Namespace, settings: InitSettings) -> int:
    destination = (args.directory or Path.cwd()).expanduser().resolve()
    tools_version = args.tools_version or settings.tools_version

    fs: FileSystem | None = None
    if args.dry_run:
        fs = OverlayFileSystem(LocalFileSystem())
    else:
        destination.mkdir(parents=True, exist_ok=True)

    initializer = PackageInitializer(
        destination,
        args.kind,
        fs=fs,
        progress=print,
        tools_version=tools_version,
    )
    try:
        initializer.write_package_structure()
    except (InitError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def _handle_kinds(args: argparse.Namespace, settings: InitSettings) -> int:
    for kind in PackageKind:
        print(kind)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = InitSettings.from_env()
        if args.log_level:
            settings = InitSettings(tools_version=settings.tools_version, log_level=args.log_level)
    except ValueError as exc:
        parser.error(str(exc))
    _configure_logging(settings.log_level)

    if args.command == "init":
        return _handle_init(args, settings)
    if args.command == "kinds":
        return _handle_kinds(args, settings)
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
