"""Sudoku use cases, backed by the document store."""

from __future__ import annotations

from delfis_api.db.documents import Sudoku
from delfis_api.repositories.document_repository import SudokuRepository
from delfis_api.schemas import SudokuIn, SudokuPatch
from delfis_api.services.base import EntityMessages, EntityService


class SudokuService(EntityService[Sudoku]):
    messages = EntityMessages(
        label="Sudoku",
        list_empty="Nenhum sudoku encontrado.",
        not_found="Sudoku não encontrado.",
    )
    schema = SudokuIn
    patch_model = SudokuPatch

    def __init__(self) -> None:
        super().__init__(SudokuRepository())

    def insert(self, data: SudokuIn) -> Sudoku:
        return self._persist(Sudoku(puzzle=data.puzzle, solution=data.solution, difficulty=data.difficulty))

    def update(self, sudoku_id: str, data: SudokuIn) -> Sudoku:
        sudoku = self.get_by_id(sudoku_id)
        sudoku.puzzle = data.puzzle
        sudoku.solution = data.solution
        sudoku.difficulty = data.difficulty
        return self._persist(sudoku)

    def _as_payload(self, sudoku: Sudoku) -> dict:
        return {"puzzle": sudoku.puzzle, "solution": sudoku.solution, "difficulty": sudoku.difficulty}
