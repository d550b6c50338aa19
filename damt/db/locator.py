"""Find the acronym database file to use.

Two candidates are checked, in order:

1. the path named by the ``ACRODB`` environment variable (``DatabaseConfig.path``)
2. ``acronyms.db`` in the directory holding the running program

The first one that is an existing regular file wins. Nothing is opened here;
only ``stat`` calls are made.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from damt.config import AppConfig
from damt.errors import DatabaseNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DatabaseLocation:
    path: Path
    name: str
    modified: int
    size: int

    @classmethod
    def from_path(cls, path: Path) -> DatabaseLocation:
        st = path.stat()
        return cls(path=path, name=path.name, modified=int(st.st_mtime), size=st.st_size)


def program_dir() -> Path:
    """Directory containing the running program."""
    if sys.argv and sys.argv[0]:
        script = Path(sys.argv[0])
        if script.is_file():
            return script.resolve().parent
    return Path(__file__).resolve().parent.parent


def _usable(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError as e:
        logger.debug("Cannot stat %s: %s", path, e)
        return False


def candidate_paths(config: AppConfig, base_dir: Path | None = None) -> list[Path]:
    """Return the candidate database paths in priority order."""
    candidates: list[Path] = []
    override = config.database.path.strip()
    if override:
        candidates.append(Path(override).expanduser())
    if base_dir is None:
        base_dir = program_dir()
    candidates.append(base_dir / config.database.filename)
    return candidates


def locate_database(config: AppConfig, base_dir: Path | None = None) -> DatabaseLocation:
    """Resolve the database file, raising DatabaseNotFoundError if none is usable."""
    candidates = candidate_paths(config, base_dir)
    for path in candidates:
        if _usable(path):
            location = DatabaseLocation.from_path(path.resolve())
            logger.debug("Using database %s", location.path)
            return location
        logger.debug("Skipping database candidate %s: not a regular file", path)
    raise DatabaseNotFoundError(candidates)
