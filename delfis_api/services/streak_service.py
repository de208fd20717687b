"""Streak use cases."""

from __future__ import annotations

from datetime import date

from delfis_api.db.models import Streak
from delfis_api.repositories.sql_repository import StreakRepository
from delfis_api.schemas import StreakIn, StreakPatch
from delfis_api.services.base import EntityMessages, EntityService, ref


class StreakService(EntityService[Streak]):
    messages = EntityMessages(
        label="Streak",
        list_empty="Nenhum streak encontrado.",
        not_found="Streak não encontrado.",
        duplicate="Streak já existente.",
        reference="Usuário informado não existe.",
        delete_blocked="Existem usuários cadastrados com esse streak. Mude-os para excluir esse streak.",
    )
    schema = StreakIn
    patch_model = StreakPatch

    def __init__(self) -> None:
        super().__init__(StreakRepository())

    def get_by_initial_date_before(self, initial_date: date) -> list[Streak]:
        return self._require_any(
            self.repository.find_by_initial_date_before(initial_date),
            "Nenhum streak encontrado com a data inicial fornecida.",
        )

    def get_by_app_user_id(self, app_user_id: int) -> list[Streak]:
        return self._require_any(
            self.repository.find_by_app_user_id(app_user_id),
            "Nenhum streak encontrado para o usuário fornecido.",
        )

    def insert(self, data: StreakIn) -> Streak:
        streak = Streak()
        self._assign(streak, data)
        return self._persist(streak)

    def update(self, streak_id: int, data: StreakIn) -> Streak:
        streak = self.get_by_id(streak_id)
        self._assign(streak, data)
        return self._persist(streak)

    def _assign(self, streak: Streak, data: StreakIn) -> None:
        streak.initial_date = data.initial_date
        streak.final_date = data.final_date
        streak.app_user_id = data.app_user.id

    def _as_payload(self, streak: Streak) -> dict:
        return {
            "initialDate": streak.initial_date,
            "finalDate": streak.final_date,
            "appUser": ref(streak.app_user_id),
        }
