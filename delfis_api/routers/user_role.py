from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, status

from delfis_api.schemas import UserRoleIn, UserRoleOut
from delfis_api.services.user_role_service import UserRoleService

router = APIRouter(prefix="/api/user-role", tags=["user-role"])
user_role_service = UserRoleService()


@router.get("/get-all", response_model=list[UserRoleOut])
def get_user_roles():
    return user_role_service.get_all()


@router.get("/get-by-id/{role_id}", response_model=UserRoleOut)
def get_user_role_by_id(role_id: int):
    return user_role_service.get_by_id(role_id)


@router.get("/get-by-name/{name}", response_model=UserRoleOut)
def get_user_role_by_name(name: str):
    return user_role_service.get_by_name(name)


@router.post("/insert", response_model=UserRoleOut, status_code=status.HTTP_201_CREATED)
def insert_user_role(user_role: UserRoleIn):
    return user_role_service.insert(user_role)


@router.delete("/delete/{role_id}")
def delete_user_role(role_id: int) -> str:
    return user_role_service.delete(role_id)


# Reaproveita o fluxo de inserção e por isso responde 201, como a API sempre fez.
@router.put("/update/{role_id}", response_model=UserRoleOut, status_code=status.HTTP_201_CREATED)
def update_user_role(role_id: int, user_role: UserRoleIn):
    return user_role_service.update(role_id, user_role)


@router.patch("/update/{role_id}")
def update_user_role_partially(role_id: int, updates: dict[str, Any] = Body(...)) -> str:
    return user_role_service.patch(role_id, updates)
