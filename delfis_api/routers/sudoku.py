from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, status

from delfis_api.schemas import SudokuIn, SudokuOut
from delfis_api.services.sudoku_service import SudokuService

router = APIRouter(prefix="/api/sudoku", tags=["sudoku"])
sudoku_service = SudokuService()


@router.get("/get-all", response_model=list[SudokuOut])
def get_sudokus():
    return sudoku_service.get_all()


@router.get("/get-by-id/{sudoku_id}", response_model=SudokuOut)
def get_sudoku_by_id(sudoku_id: str):
    return sudoku_service.get_by_id(sudoku_id)


@router.post("/insert", response_model=SudokuOut, status_code=status.HTTP_201_CREATED)
def insert_sudoku(sudoku: SudokuIn):
    return sudoku_service.insert(sudoku)


@router.delete("/delete/{sudoku_id}")
def delete_sudoku(sudoku_id: str) -> str:
    return sudoku_service.delete(sudoku_id)


@router.put("/update/{sudoku_id}", response_model=SudokuOut)
def update_sudoku(sudoku_id: str, sudoku: SudokuIn):
    return sudoku_service.update(sudoku_id, sudoku)


@router.patch("/update/{sudoku_id}")
def update_sudoku_partially(sudoku_id: str, updates: dict[str, Any] = Body(...)) -> str:
    return sudoku_service.patch(sudoku_id, updates)
