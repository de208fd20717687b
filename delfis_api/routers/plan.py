from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, status

from delfis_api.schemas import PlanIn, PlanOut
from delfis_api.services.plan_service import PlanService

router = APIRouter(prefix="/api/plan", tags=["plan"])
plan_service = PlanService()


@router.get("/get-all", response_model=list[PlanOut])
def get_plans():
    return plan_service.get_all()


@router.get("/get-by-id/{plan_id}", response_model=PlanOut)
def get_plan_by_id(plan_id: int):
    return plan_service.get_by_id(plan_id)


@router.get("/get-by-name/{name}", response_model=PlanOut)
def get_plan_by_name(name: str):
    return plan_service.get_by_name(name)


@router.post("/insert", response_model=PlanOut, status_code=status.HTTP_201_CREATED)
def insert_plan(plan: PlanIn):
    return plan_service.insert(plan)


@router.delete("/delete/{plan_id}")
def delete_plan(plan_id: int) -> str:
    return plan_service.delete(plan_id)


@router.put("/update/{plan_id}", response_model=PlanOut)
def update_plan(plan_id: int, plan: PlanIn):
    return plan_service.update(plan_id, plan)


@router.patch("/update/{plan_id}")
def update_plan_partially(plan_id: int, updates: dict[str, Any] = Body(...)) -> str:
    return plan_service.patch(plan_id, updates)
