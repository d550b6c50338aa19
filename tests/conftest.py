"""Shared fixtures: throwaway acronym databases and a clean environment."""

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from damt.config import AppConfig, DatabaseConfig

SCHEMA = """
CREATE TABLE ACRONYMS (
    Acronym TEXT NOT NULL,
    Definition TEXT NOT NULL,
    Description TEXT,
    Source TEXT,
    Changed INTEGER
);
"""

# (acronym, definition, description, source, changed), inserted in rowid order
SAMPLE_ROWS = [
    ("API", "Application Programming Interface", "Contract between programs", "Computing", 1710315965),
    ("NATO", "North Atlantic Treaty Organisation", None, "Military", 1600000000),
    ("API", "Active Pharmaceutical Ingredient", "Drug component", "Biology", 1650000000),
    ("RAM", "Random Access Memory", "Volatile storage", "Computing", 1700000000),
    ("BBC", "British Broadcasting Corporation", "UK broadcaster", "Media", 1690000000),
    ("TLA", "Three Letter Acronym", None, None, 1720000000),
]


def create_acronym_db(path: Path, rows: list[tuple] = SAMPLE_ROWS) -> Path:
    """Write an ACRONYMS database at ``path`` holding ``rows``."""
    conn = sqlite3.connect(path)
    try:
        conn.executescript(SCHEMA)
        conn.executemany(
            "INSERT INTO ACRONYMS (Acronym, Definition, Description, Source, Changed) VALUES (?, ?, ?, ?, ?)",
            rows,
        )
        conn.commit()
    finally:
        conn.close()
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's own ACRODB / DAMT_* settings out of the tests."""
    for name in (
        "ACRODB",
        "DAMT_DB_PATH",
        "DAMT_TIMEZONE",
        "DAMT_LOG_LEVEL",
        "DAMT_LATEST_LIMIT",
        "DAMT_APP_VERSION",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def db_path(tmp_path) -> Path:
    return create_acronym_db(tmp_path / "acronyms.db")


@pytest.fixture
def config(db_path) -> AppConfig:
    """Config pointing straight at the sample database."""
    return AppConfig(database=DatabaseConfig(path=str(db_path)))


@pytest.fixture
def make_db():
    """Factory for extra databases: ``make_db(path, rows=...)``."""
    return create_acronym_db
