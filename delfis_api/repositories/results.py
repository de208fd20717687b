"""Typed outcomes of repository writes."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from sqlalchemy.exc import IntegrityError

T = TypeVar("T")

_UNIQUE_SQLSTATE = "23505"
_FOREIGN_KEY_SQLSTATE = "23503"


class WriteStatus(str, enum.Enum):
    OK = "ok"
    UNIQUE_VIOLATION = "unique_violation"
    REFERENCE_VIOLATION = "reference_violation"


@dataclass(frozen=True)
class WriteResult(Generic[T]):
    status: WriteStatus
    entity: Optional[T] = None
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is WriteStatus.OK

    @classmethod
    def success(cls, entity: Optional[T] = None) -> "WriteResult[T]":
        return cls(WriteStatus.OK, entity)


def classify_integrity_error(exc: IntegrityError) -> WriteStatus:
    """
    Map a driver integrity error to a WriteStatus.

    Postgres drivers expose the SQLSTATE (``pgcode``/``sqlstate``); SQLite only
    gives a message. Anything that is neither a unique nor a foreign key
    violation (e.g. NOT NULL) is re-raised.
    """
    orig = exc.orig
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    message = str(orig).lower()
    if code == _UNIQUE_SQLSTATE or "unique" in message or "duplicate" in message:
        return WriteStatus.UNIQUE_VIOLATION
    if code == _FOREIGN_KEY_SQLSTATE or "foreign key" in message:
        return WriteStatus.REFERENCE_VIOLATION
    raise exc
