from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, status

from delfis_api.schemas import ThemeIn, ThemeOut
from delfis_api.services.theme_service import ThemeService

router = APIRouter(prefix="/api/theme", tags=["theme"])
theme_service = ThemeService()


@router.get("/get-all", response_model=list[ThemeOut])
def get_themes():
    return theme_service.get_all()


@router.get("/get-by-id/{theme_id}", response_model=ThemeOut)
def get_theme_by_id(theme_id: int):
    return theme_service.get_by_id(theme_id)


@router.get("/get-by-name/{name}", response_model=ThemeOut)
def get_theme_by_name(name: str):
    return theme_service.get_by_name(name)


@router.post("/insert", response_model=ThemeOut, status_code=status.HTTP_201_CREATED)
def insert_theme(theme: ThemeIn):
    return theme_service.insert(theme)


@router.delete("/delete/{theme_id}")
def delete_theme(theme_id: int) -> str:
    return theme_service.delete(theme_id)


@router.put("/update/{theme_id}", response_model=ThemeOut)
def update_theme(theme_id: int, theme: ThemeIn):
    return theme_service.update(theme_id, theme)


@router.patch("/update/{theme_id}")
def update_theme_partially(theme_id: int, updates: dict[str, Any] = Body(...)) -> str:
    return theme_service.patch(theme_id, updates)
