#!/usr/bin/env python3
"""
Command line front-end for change sources.

Examples:
    change-tracking git /path/to/repo main --since 4f2c9e1
    change-tracking files /path/to/dir --count 3 --interval 5
"""

import argparse
import asyncio
import sys

from loguru import logger

from .config import settings
from .errors import ChangeTrackingError
from .file_source import open_file_source
from .git_source import open_git_source
from .logging_setup import configure_logging


async def cmd_git(args) -> None:
    """Print git changes for a branch."""
    source = open_git_source(args.path, args.branch)
    changes = await source.query(args.since)
    print(changes.to_json(sort_keys=True))


async def cmd_files(args) -> None:
    """Scan a directory repeatedly and print each scan's changes."""
    source = open_file_source(args.path)
    for i in range(args.count):
        if i:
            await asyncio.sleep(args.interval)
        changes = await source.query()
        logger.info(
            f"Scan {i + 1}/{args.count}: {len(changes.active())} active, "
            f"{len(changes.deleted())} deleted"
        )
        print(changes.to_json(sort_keys=True), flush=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="change-tracking",
        description="Report file changes from a git repository or a directory",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Console log level (default: {settings.log_level})",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # git command
    git_parser = subparsers.add_parser("git", help="Changes on a git branch")
    git_parser.add_argument("path", help="Repository root")
    git_parser.add_argument("branch", help="Branch (or any ref) to report on")
    git_parser.add_argument(
        "--since",
        help="Reference commit; when omitted every file on the branch is listed",
    )
    git_parser.set_defaults(func=cmd_git)

    # files command
    files_parser = subparsers.add_parser("files", help="Changes in a directory")
    files_parser.add_argument("path", help="Directory to scan")
    files_parser.add_argument(
        "--count",
        type=int,
        default=1,
        help="Number of scans to run (default: 1)",
    )
    files_parser.add_argument(
        "--interval",
        type=float,
        default=5.0,
        help="Seconds between scans (default: 5)",
    )
    files_parser.set_defaults(func=cmd_files)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    configure_logging(args.log_level, settings.log_file)

    try:
        asyncio.run(args.func(args))
    except ChangeTrackingError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
