"""
AppUser use cases: lookups, leaderboard and the normalized writes
(name trimmed and upper-cased, password stored only as a hash).
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel

from delfis_api.core.security import hash_password
from delfis_api.db.models import AppUser
from delfis_api.repositories.sql_repository import AppUserRepository
from delfis_api.schemas import AppUserIn, AppUserPatch
from delfis_api.services.base import EntityMessages, EntityService, ref, ref_id

NO_USERS = "Nenhum usuário encontrado."


def normalize_name(name: Optional[str]) -> Optional[str]:
    return name.strip().upper() if name is not None else None


class AppUserService(EntityService[AppUser]):
    messages = EntityMessages(
        label="Usuário",
        list_empty=NO_USERS,
        not_found="Usuário não encontrado.",
        duplicate="Usuário com esse nome já existente.",
        reference="Plano ou role informado não existe.",
        delete_blocked="Existem dependências para esse usuário. Mude-as para excluir esse usuário.",
    )
    schema = AppUserIn
    patch_model = AppUserPatch

    def __init__(self) -> None:
        super().__init__(AppUserRepository())

    def _now(self) -> datetime:
        return datetime.now(timezone.utc)

    # -------------------------------------- lookups --------------------------------------
    def get_by_username(self, username: str) -> AppUser:
        return self._require(self.repository.find_by_username(username), NO_USERS)

    def get_by_email(self, email: str) -> AppUser:
        return self._require(self.repository.find_by_email(email), NO_USERS)

    def get_by_plan_id(self, plan_id: int) -> list[AppUser]:
        return self._require_any(self.repository.find_by_plan_id(plan_id))

    def get_by_user_role_id(self, user_role_id: int) -> list[AppUser]:
        return self._require_any(self.repository.find_by_user_role_id(user_role_id))

    def get_leaderboard(self) -> list[AppUser]:
        return self._require_any(self.repository.find_leaderboard())

    # -------------------------------------- writes --------------------------------------
    def insert(self, data: AppUserIn) -> AppUser:
        now = self._now()
        user = AppUser(created_at=now, updated_at=now)
        self._assign(user, data)
        return self._persist(user)

    def update(self, user_id: int, data: AppUserIn) -> AppUser:
        user = self.get_by_id(user_id)
        self._assign(user, data)
        user.updated_at = self._now()
        return self._persist(user)

    def _assign(self, user: AppUser, data: AppUserIn) -> None:
        user.name = normalize_name(data.name)
        user.username = data.username
        user.email = data.email
        user.password = hash_password(data.password)
        user.level = data.level
        user.points = data.points
        user.coins = data.coins
        user.birth_date = data.birth_date
        user.picture_url = data.picture_url
        user.plan_id = ref_id(data.plan)
        user.user_role_id = ref_id(data.user_role)

    # ---------------------------------- partial update ----------------------------------
    def _apply_patch(self, user: AppUser, patch: BaseModel) -> None:
        for name in patch.model_fields_set:
            value = getattr(patch, name)
            if name == "name":
                user.name = normalize_name(value)
            elif name in ("plan", "user_role"):
                setattr(user, f"{name}_id", ref_id(value))
            else:
                setattr(user, name, value)

    def _before_patch_save(self, user: AppUser, patch: BaseModel) -> None:
        # A senha chega aqui em texto puro, já validada.
        if "password" in patch.model_fields_set:
            user.password = hash_password(user.password)
        user.updated_at = self._now()

    def _as_payload(self, user: AppUser) -> dict:
        return {
            "name": user.name,
            "username": user.username,
            "email": user.email,
            "password": user.password,
            "level": user.level,
            "points": user.points,
            "coins": user.coins,
            "birthDate": user.birth_date,
            "pictureUrl": user.picture_url,
            "plan": ref(user.plan_id),
            "userRole": ref(user.user_role_id),
        }
