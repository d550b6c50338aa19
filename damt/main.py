"""damt command line entry point."""

from __future__ import annotations

import argparse
import locale
import logging
import sys
from contextlib import closing
from datetime import timezone, tzinfo
from typing import Iterator
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from damt.config import AppConfig
from damt.db.connection import Database
from damt.db.locator import locate_database
from damt.db.models import AcronymRecord
from damt.errors import DamtError
from damt.formatting import format_large_integer
from damt.report import render_help, render_record, render_summary, render_version

logger = logging.getLogger(__name__)


class UsageErrorParser(argparse.ArgumentParser):
    """Prints the usage table and exits 1 on a bad command line."""

    help_text = ""

    def error(self, message: str):
        print(f"\nERROR: {message}", file=sys.stderr)
        print(self.help_text)
        self.exit(1)


def build_parser(config: AppConfig) -> UsageErrorParser:
    parser = UsageErrorParser(prog=config.app.name, add_help=False)
    parser.help_text = render_help(config.app, config.latest_limit)
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("-v", "--version", action="store_true")
    parser.add_argument(
        "-l", "--latest", nargs="?", type=int, const=config.latest_limit, metavar="COUNT"
    )
    parser.add_argument("-s", "--search", metavar="ACRONYM")
    parser.add_argument("term", nargs="?")
    return parser


def resolve_timezone(name: str) -> tzinfo:
    if name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, showing times in UTC", name)
        return timezone.utc


def print_records(records: Iterator[AcronymRecord], tz: tzinfo) -> int:
    """Print each record block and return how many were printed."""
    count = 0
    with closing(records):
        for record in records:
            print(render_record(record, tz))
            print()
            count += 1
    return count


def main(argv: list[str] | None = None, config: AppConfig | None = None) -> int:
    if config is None:
        config = AppConfig.from_yaml()

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    parser = build_parser(config)
    args = parser.parse_args(argv)
    if args.latest is not None and args.latest < 0:
        parser.error("--latest COUNT must not be negative")

    if args.help:
        print(parser.help_text)
        return 0

    if args.version:
        print(render_version(config.app))
        return 0

    try:
        location = locate_database(config)
    except DamtError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        print("Set ACRODB to the path of an acronyms database.", file=sys.stderr)
        return 1

    tz = resolve_timezone(config.timezone)
    term = args.search if args.search is not None else args.term

    try:
        with Database.open(location, table=config.database.table) as db:
            if args.latest is not None:
                print(f"Showing the {args.latest} most recently added acronyms:\n")
                shown = print_records(db.latest(args.latest), tz)
                print(f"Displayed {format_large_integer(shown)} records")
            elif term is not None:
                print(f"Searching for: '{term}'\n")
                found = print_records(db.search(term), tz)
                print(f"Found {format_large_integer(found)} matching records")
            else:
                print(render_summary(location, db, tz))
    except DamtError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0


def cli_entry() -> None:
    """Console script entry point."""
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error as e:
        logger.debug("Keeping default locale: %s", e)
    sys.exit(main())


if __name__ == "__main__":
    cli_entry()
