from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, status

from delfis_api.schemas import AppUserIn, AppUserOut
from delfis_api.services.app_user_service import AppUserService

router = APIRouter(prefix="/api/app-user", tags=["app-user"])
app_user_service = AppUserService()


@router.get("/get-all", response_model=list[AppUserOut])
def get_app_users():
    return app_user_service.get_all()


@router.get("/get-by-id/{user_id}", response_model=AppUserOut)
def get_app_user_by_id(user_id: int):
    return app_user_service.get_by_id(user_id)


@router.get("/get-by-username/{username}", response_model=AppUserOut)
def get_app_user_by_username(username: str):
    return app_user_service.get_by_username(username)


@router.get("/get-by-email/{email}", response_model=AppUserOut)
def get_app_user_by_email(email: str):
    return app_user_service.get_by_email(email)


@router.get("/get-by-plan/{plan_id}", response_model=list[AppUserOut])
def get_app_users_by_plan_id(plan_id: int):
    return app_user_service.get_by_plan_id(plan_id)


@router.get("/get-by-user-role/{user_role_id}", response_model=list[AppUserOut])
def get_app_users_by_user_role_id(user_role_id: int):
    return app_user_service.get_by_user_role_id(user_role_id)


@router.get("/leaderboard", response_model=list[AppUserOut])
def get_leaderboard():
    """Users ordered by points, then level."""
    return app_user_service.get_leaderboard()


@router.post("/insert", response_model=AppUserOut, status_code=status.HTTP_201_CREATED)
def insert_app_user(app_user: AppUserIn):
    return app_user_service.insert(app_user)


@router.delete("/delete/{user_id}")
def delete_app_user(user_id: int) -> str:
    return app_user_service.delete(user_id)


@router.put("/update/{user_id}", response_model=AppUserOut)
def update_app_user(user_id: int, app_user: AppUserIn):
    return app_user_service.update(user_id, app_user)


@router.patch("/update/{user_id}")
def update_app_user_partially(user_id: int, updates: dict[str, Any] = Body(...)) -> str:
    return app_user_service.patch(user_id, updates)
