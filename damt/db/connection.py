"""Read-only SQLite session over the acronym database."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Any, Iterator

from damt.db.locator import DatabaseLocation
from damt.db.models import AcronymRecord
from damt.errors import DatabaseOpenError

logger = logging.getLogger(__name__)

ERROR = "ERROR"

DEFAULT_TABLE = "ACRONYMS"
DEFAULT_LATEST_LIMIT = 5

_RECORD_COLUMNS = """rowid AS id,
       IFNULL(Acronym, '') AS acronym,
       IFNULL(Definition, '') AS definition,
       IFNULL(Source, '') AS source,
       IFNULL(Description, '') AS description,
       Changed AS changed"""


def _quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


class Database:
    """An open, read-only handle on the acronym database.

    Use as a context manager so the connection is released on every path::

        with Database.open(path) as db:
            print(db.record_count())

    ``search`` and ``latest`` return generators that hold a cursor until they
    are exhausted or closed; finish with them before the session closes.
    """

    def __init__(self, location: DatabaseLocation | Path | str, table: str = DEFAULT_TABLE):
        if isinstance(location, DatabaseLocation):
            path = location.path
        else:
            path = Path(location)
        self.path = path.resolve()
        self.table = _quote_identifier(table)
        self._conn: sqlite3.Connection | None = self._connect()

    @classmethod
    def open(cls, location: DatabaseLocation | Path | str, table: str = DEFAULT_TABLE) -> Database:
        return cls(location, table=table)

    def _connect(self) -> sqlite3.Connection:
        if not self.path.is_file():
            raise DatabaseOpenError(self.path, "not a regular file")
        uri = self.path.as_uri() + "?mode=ro"
        try:
            conn = sqlite3.connect(uri, uri=True)
        except sqlite3.Error as e:
            raise DatabaseOpenError(self.path, str(e)) from e
        conn.row_factory = sqlite3.Row
        try:
            # sqlite opens lazily; touch the schema so bad files fail here
            conn.execute("SELECT name FROM sqlite_master LIMIT 1").fetchall()
        except sqlite3.Error as e:
            conn.close()
            raise DatabaseOpenError(self.path, str(e)) from e
        logger.debug("Opened database %s", self.path)
        return conn

    @property
    def closed(self) -> bool:
        return self._conn is None

    def _require_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise sqlite3.ProgrammingError("Cannot operate on a closed database session")
        return self._conn

    def close(self) -> None:
        """Release the connection. Safe to call more than once."""
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.debug("Closed database %s", self.path)

    def __enter__(self) -> Database:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # -- summary scalars: failures become the ERROR sentinel --

    def _scalar(self, sql: str, params: tuple = (), what: str = "query") -> Any:
        try:
            row = self._require_conn().execute(sql, params).fetchone()
        except sqlite3.Error as e:
            logger.warning("Failed to read %s from %s: %s", what, self.path, e)
            return ERROR
        if row is None:
            return ERROR
        return row[0]

    def record_count(self) -> int | str:
        """Total number of acronyms, or ``"ERROR"``."""
        return self._scalar(f"SELECT COUNT(*) FROM {self.table}", what="record count")

    def sqlite_version(self) -> str:
        return str(self._scalar("SELECT sqlite_version()", what="sqlite version"))

    def newest_acronym(self) -> str:
        """Acronym of the most recently added row, or ``"ERROR"``."""
        value = self._scalar(
            f"SELECT IFNULL(Acronym, '') FROM {self.table} ORDER BY rowid DESC LIMIT 1",
            what="newest acronym",
        )
        return str(value)

    # -- record streams --

    def _records(self, sql: str, params: tuple) -> Iterator[AcronymRecord]:
        cursor = self._require_conn().execute(sql, params)
        try:
            for row in cursor:
                yield AcronymRecord.from_row(row)
        finally:
            cursor.close()

    def search(self, pattern: str) -> Iterator[AcronymRecord]:
        """Case-insensitive LIKE match on the acronym, ordered by source.

        ``pattern`` is bound as a parameter; ``%`` and ``_`` act as wildcards.
        """
        sql = (
            f"SELECT {_RECORD_COLUMNS} FROM {self.table} "
            "WHERE Acronym LIKE ? COLLATE NOCASE ORDER BY Source"
        )
        return self._records(sql, (pattern,))

    def latest(self, limit: int = DEFAULT_LATEST_LIMIT) -> Iterator[AcronymRecord]:
        """The ``limit`` most recently added records, newest first."""
        if limit < 0:
            raise ValueError(f"limit must not be negative: {limit}")
        sql = f"SELECT {_RECORD_COLUMNS} FROM {self.table} ORDER BY rowid DESC LIMIT ?"
        return self._records(sql, (limit,))
