from __future__ import annotations

from datetime import date
from typing import Any

from fastapi import APIRouter, Body, status

from delfis_api.schemas import StreakIn, StreakOut
from delfis_api.services.streak_service import StreakService

router = APIRouter(prefix="/api/streak", tags=["streak"])
streak_service = StreakService()


@router.get("/get-all", response_model=list[StreakOut])
def get_streaks():
    return streak_service.get_all()


@router.get("/get-by-id/{streak_id}", response_model=StreakOut)
def get_streak_by_id(streak_id: int):
    return streak_service.get_by_id(streak_id)


@router.post("/get-by-initial-date-before", response_model=list[StreakOut])
def get_streaks_by_initial_date_before(initial_date: date = Body(...)):
    """Streaks started strictly before the date sent as the JSON body."""
    return streak_service.get_by_initial_date_before(initial_date)


@router.get("/get-by-app-user/{app_user_id}", response_model=list[StreakOut])
def get_streaks_by_app_user(app_user_id: int):
    return streak_service.get_by_app_user_id(app_user_id)


@router.post("/insert", response_model=StreakOut, status_code=status.HTTP_201_CREATED)
def insert_streak(streak: StreakIn):
    return streak_service.insert(streak)


@router.delete("/delete/{streak_id}")
def delete_streak(streak_id: int) -> str:
    return streak_service.delete(streak_id)


@router.put("/update/{streak_id}", response_model=StreakOut)
def update_streak(streak_id: int, streak: StreakIn):
    return streak_service.update(streak_id, streak)


@router.patch("/update/{streak_id}")
def update_streak_partially(streak_id: int, updates: dict[str, Any] = Body(...)) -> str:
    return streak_service.patch(streak_id, updates)
