"""Acronym row model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class AcronymRecord:
    id: int
    acronym: str = ""
    definition: str = ""
    source: str = ""
    description: str = ""
    last_changed: int | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> AcronymRecord:
        """Build a record from an ACRONYMS row, treating NULL text as empty."""
        return cls(
            id=row["id"],
            acronym=row["acronym"] or "",
            definition=row["definition"] or "",
            source=row["source"] or "",
            description=row["description"] or "",
            last_changed=row["changed"],
        )
