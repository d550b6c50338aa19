"""Exceptions raised while locating and opening the acronym database."""

from __future__ import annotations

from pathlib import Path


class DamtError(Exception):
    """Base class for all damt failures."""


class DatabaseNotFoundError(DamtError):
    """No usable database file was found in any candidate location."""

    def __init__(self, candidates: list[Path]):
        self.candidates = candidates
        checked = ", ".join(str(p) for p in candidates) or "(none)"
        super().__init__(f"unable to locate an acronym database; checked: {checked}")


class DatabaseOpenError(DamtError):
    """The database file exists but could not be opened as SQLite."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"unable to open database '{path}': {reason}")
