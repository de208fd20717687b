"""
JSON-file document store.

Holds named collections of documents in a single file
(``{"sudokus": {"<id>": {...}}}``). Documents are plain dicts carrying their
own ``_id``.
"""

from __future__ import annotations

import json
import secrets
import threading
from copy import deepcopy
from functools import lru_cache
from pathlib import Path
from typing import Optional

from delfis_api.core.config import get_settings


class DocumentStore:
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def _load(self) -> dict:
        if self.path.exists():
            with self.path.open("r", encoding="utf-8") as f:
                return json.load(f)
        return {}

    def _save(self, db: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(db, ensure_ascii=False, indent=2), encoding="utf-8")

    def find_all(self, collection: str) -> list[dict]:
        with self._lock:
            docs = self._load().get(collection, {})
        return [deepcopy(doc) for doc in docs.values()]

    def find_by_id(self, collection: str, doc_id: str) -> Optional[dict]:
        with self._lock:
            doc = self._load().get(collection, {}).get(doc_id)
        return deepcopy(doc) if doc is not None else None

    def save(self, collection: str, doc: dict) -> dict:
        """Insert or replace ``doc``; a missing ``_id`` gets a new one."""
        stored = deepcopy(doc)
        if not stored.get("_id"):
            stored["_id"] = secrets.token_hex(12)
        with self._lock:
            db = self._load()
            db.setdefault(collection, {})[stored["_id"]] = stored
            self._save(db)
        return deepcopy(stored)

    def delete_by_id(self, collection: str, doc_id: str) -> bool:
        with self._lock:
            db = self._load()
            docs = db.get(collection, {})
            if doc_id not in docs:
                return False
            del docs[doc_id]
            self._save(db)
        return True


@lru_cache
def get_document_store() -> DocumentStore:
    return DocumentStore(get_settings().sudoku_store_path)
