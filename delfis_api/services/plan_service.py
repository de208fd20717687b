"""Plan use cases."""

from __future__ import annotations

from delfis_api.db.models import Plan
from delfis_api.repositories.sql_repository import PlanRepository
from delfis_api.schemas import PlanIn, PlanPatch
from delfis_api.services.base import EntityMessages, EntityService


class PlanService(EntityService[Plan]):
    messages = EntityMessages(
        label="Plano",
        list_empty="Nenhum plano encontrado.",
        not_found="Plano não encontrado.",
        duplicate="Plano com esse nome já existente.",
        delete_blocked="Existem usuários cadastrados com esse plano. Mude-os para excluir esse plano.",
    )
    schema = PlanIn
    patch_model = PlanPatch

    def __init__(self) -> None:
        super().__init__(PlanRepository())

    def get_by_name(self, name: str) -> Plan:
        return self._require(self.repository.find_by_name(name))

    def insert(self, data: PlanIn) -> Plan:
        plan = Plan()
        self._assign(plan, data)
        return self._persist(plan)

    def update(self, plan_id: int, data: PlanIn) -> Plan:
        plan = self.get_by_id(plan_id)
        self._assign(plan, data)
        return self._persist(plan)

    def _assign(self, plan: Plan, data: PlanIn) -> None:
        plan.name = data.name
        plan.description = data.description
        plan.price = data.price
        plan.is_active = data.is_active

    def _as_payload(self, plan: Plan) -> dict:
        return {
            "name": plan.name,
            "description": plan.description,
            "price": plan.price,
            "isActive": plan.is_active,
        }
