"""Text rendering for records, the database summary, help and version output."""

from __future__ import annotations

import platform
import sqlite3
import sys
from datetime import tzinfo

from damt.config import AppInfo
from damt.db.connection import Database
from damt.db.locator import DatabaseLocation
from damt.db.models import AcronymRecord
from damt.formatting import format_byte_size, format_large_integer, format_timestamp


def render_record(record: AcronymRecord, tz: tzinfo | None = None) -> str:
    """One acronym as a labelled block."""
    return "\n".join(
        [
            f"ID:           {record.id}",
            f"ACRONYM:      '{record.acronym}' is: '{record.definition}'.",
            f"SOURCE:       '{record.source}'",
            f"LAST UPDATED: {format_timestamp(record.last_changed, tz)}",
            f"DESCRIPTION:  {record.description}",
        ]
    )


def render_summary(location: DatabaseLocation, db: Database, tz: tzinfo | None = None) -> str:
    """Database location, file details and table statistics."""
    return "\n".join(
        [
            "Database Summary:",
            f"  Location:       {location.path}",
            f"  File name:      {location.name}",
            f"  File size:      {format_byte_size(location.size)}",
            f"  Last modified:  {format_timestamp(location.modified, tz)}",
            f"  Record count:   {format_large_integer(db.record_count())}",
            f"  SQLite version: {db.sqlite_version()}",
            f"  Newest acronym: {db.newest_acronym()}",
        ]
    )


def render_version(app: AppInfo) -> str:
    return "\n".join(
        [
            f"'{app.name}' is version {app.version}, "
            f"copyright (c) {app.copyright_year} {app.copyright_name}.",
            f"Licensed under the MIT License, see: {app.license_url}",
            f"Built with Python {platform.python_version()} and SQLite {sqlite3.sqlite_version}.",
            f"Running on {platform.system()} ({platform.machine()}) as '{sys.executable}'.",
        ]
    )


def render_help(app: AppInfo, latest_limit: int) -> str:
    return f"""
Look up acronyms stored in a SQLite database.

Usage: {app.name} [switches] [arguments]

[Switches]       [Arguments]   [Default Value]   [Description]
-h, --help                          false        display help information
-l, --latest     count              {latest_limit:<13}display the most recently added acronyms
-s, --search     acronym            false        acronym to search the database for
-v, --version                       false        display program version

A single argument with no switch is searched for as an acronym. Use '%' and
'_' as wildcards. Set ACRODB to the database path to override the default
of 'acronyms.db' next to the program.
"""
