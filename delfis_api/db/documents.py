"""Document shapes kept in the document store."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional


def _parse_datetime(value: Any) -> Optional[datetime]:
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


@dataclass
class Sudoku:
    puzzle: list[list[int]]
    solution: Optional[list[list[int]]] = None
    difficulty: Optional[str] = None
    id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_document(self) -> dict:
        return {
            "_id": self.id,
            "puzzle": self.puzzle,
            "solution": self.solution,
            "difficulty": self.difficulty,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_document(cls, doc: dict) -> "Sudoku":
        return cls(
            id=doc.get("_id"),
            puzzle=doc.get("puzzle") or [],
            solution=doc.get("solution"),
            difficulty=doc.get("difficulty"),
            created_at=_parse_datetime(doc.get("created_at")) or datetime.now(timezone.utc),
        )
