"""Database layer: locate, open and query the acronym SQLite file."""

from damt.db.connection import Database
from damt.db.locator import DatabaseLocation, locate_database
from damt.db.models import AcronymRecord

__all__ = ["Database", "DatabaseLocation", "locate_database", "AcronymRecord"]
