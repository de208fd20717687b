"""Sudoku persistence on top of the JSON document store."""
from __future__ import annotations

import logging
from typing import Optional

from delfis_api.db.documents import Sudoku
from delfis_api.repositories.json_storage import get_document_store
from delfis_api.repositories.results import WriteResult

logger = logging.getLogger(__name__)


class SudokuRepository:
    collection = "sudokus"

    def find_all(self) -> list[Sudoku]:
        docs = get_document_store().find_all(self.collection)
        return [Sudoku.from_document(doc) for doc in docs]

    def find_by_id(self, sudoku_id: str) -> Optional[Sudoku]:
        doc = get_document_store().find_by_id(self.collection, sudoku_id)
        return Sudoku.from_document(doc) if doc else None

    def save(self, sudoku: Sudoku) -> WriteResult[Sudoku]:
        doc = get_document_store().save(self.collection, sudoku.to_document())
        logger.info(f"Sudoku {doc['_id']} salvo.")
        return WriteResult.success(Sudoku.from_document(doc))

    def delete_by_id(self, sudoku_id: str) -> WriteResult[None]:
        get_document_store().delete_by_id(self.collection, sudoku_id)
        return WriteResult.success()
