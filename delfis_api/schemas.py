"""Pydantic schemas for request validation, responses and partial updates.

Every schema speaks camelCase on the wire (``birthDate``, ``userRole``).
``*In`` models carry the declared constraints and are reused to revalidate an
entity after a PATCH; ``*Patch`` models only check names and types.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, field_validator
from pydantic.alias_generators import to_camel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
GRID_SIZE = 9


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OutModel(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class PatchModel(BaseModel):
    """Only the camelCase names are accepted; anything else is rejected."""

    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")


def _iso_date(value: Any) -> Any:
    """Dates in a patch must be ISO strings; numbers are not read as timestamps."""
    if value is None or isinstance(value, (str, date)):
        return value
    raise ValueError("a data deve estar no formato AAAA-MM-DD")


class EntityRef(CamelModel):
    """Reference to another entity by id (``{"id": 3}``)."""

    id: StrictInt


# --- UserRole ---

class UserRoleIn(CamelModel):
    name: str = Field(..., min_length=1, max_length=50)


class UserRoleOut(OutModel):
    id: int
    name: str


class UserRolePatch(PatchModel):
    name: Optional[StrictStr] = None


# --- Plan ---

class PlanIn(CamelModel):
    name: str = Field(..., min_length=1, max_length=50)
    description: Optional[str] = None
    price: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    is_active: bool = True


class PlanOut(OutModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Decimal
    is_active: bool


class PlanPatch(PatchModel):
    name: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    price: Optional[Decimal] = None
    is_active: Optional[StrictBool] = None


# --- Theme ---

class ThemeIn(CamelModel):
    name: str = Field(..., min_length=1, max_length=50)
    description: Optional[str] = None


class ThemeOut(OutModel):
    id: int
    name: str
    description: Optional[str] = None


class ThemePatch(PatchModel):
    name: Optional[StrictStr] = None
    description: Optional[StrictStr] = None


# --- AppUser ---

class AppUserIn(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    username: str = Field(..., min_length=3, max_length=50)
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=1)
    level: int = Field(1, ge=1)
    points: int = Field(0, ge=0)
    coins: int = Field(0, ge=0)
    birth_date: Optional[date] = None
    picture_url: Optional[str] = None
    plan: Optional[EntityRef] = None
    user_role: Optional[EntityRef] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("o nome não pode ser vazio")
        return value

    @field_validator("birth_date")
    @classmethod
    def _birth_date_in_past(cls, value: Optional[date]) -> Optional[date]:
        if value is not None and value >= date.today():
            raise ValueError("a data de nascimento deve estar no passado")
        return value


class AppUserOut(OutModel):
    id: int
    name: str
    username: str
    email: str
    level: int
    points: int
    coins: int
    birth_date: Optional[date] = None
    picture_url: Optional[str] = None
    plan: Optional[PlanOut] = None
    user_role: Optional[UserRoleOut] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AppUserPatch(PatchModel):
    name: Optional[StrictStr] = None
    username: Optional[StrictStr] = None
    email: Optional[StrictStr] = None
    password: Optional[StrictStr] = None
    level: Optional[StrictInt] = None
    points: Optional[StrictInt] = None
    coins: Optional[StrictInt] = None
    birth_date: Optional[date] = None
    picture_url: Optional[StrictStr] = None
    plan: Optional[EntityRef] = None
    user_role: Optional[EntityRef] = None

    _birth_date_iso = field_validator("birth_date", mode="before")(_iso_date)


# --- Streak ---

class StreakIn(CamelModel):
    initial_date: date
    final_date: Optional[date] = None
    app_user: EntityRef


class StreakOut(OutModel):
    id: int
    initial_date: date
    final_date: Optional[date] = None
    app_user: Optional[AppUserOut] = None


class StreakPatch(PatchModel):
    initial_date: Optional[date] = None
    final_date: Optional[date] = None

    _dates_iso = field_validator("initial_date", "final_date", mode="before")(_iso_date)


# --- Sudoku ---

def _check_grid(grid: Optional[list[list[int]]], low: int) -> Optional[list[list[int]]]:
    if grid is None:
        return grid
    if len(grid) != GRID_SIZE or any(len(row) != GRID_SIZE for row in grid):
        raise ValueError(f"o tabuleiro deve ter {GRID_SIZE}x{GRID_SIZE} casas")
    if any(cell < low or cell > GRID_SIZE for row in grid for cell in row):
        raise ValueError(f"as casas devem estar entre {low} e {GRID_SIZE}")
    return grid


class SudokuIn(CamelModel):
    puzzle: list[list[int]]
    solution: Optional[list[list[int]]] = None
    difficulty: Optional[str] = Field(None, max_length=20)

    @field_validator("puzzle")
    @classmethod
    def _puzzle_grid(cls, value: list[list[int]]) -> list[list[int]]:
        return _check_grid(value, 0)

    @field_validator("solution")
    @classmethod
    def _solution_grid(cls, value: Optional[list[list[int]]]) -> Optional[list[list[int]]]:
        return _check_grid(value, 1)


class SudokuOut(OutModel):
    id: str
    puzzle: list[list[int]]
    solution: Optional[list[list[int]]] = None
    difficulty: Optional[str] = None
    created_at: Optional[datetime] = None


class SudokuPatch(PatchModel):
    puzzle: Optional[list[list[StrictInt]]] = None
    solution: Optional[list[list[StrictInt]]] = None
    difficulty: Optional[StrictStr] = None
