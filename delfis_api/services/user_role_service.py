"""UserRole use cases."""

from __future__ import annotations

from delfis_api.db.models import UserRole
from delfis_api.repositories.sql_repository import UserRoleRepository
from delfis_api.schemas import UserRoleIn, UserRolePatch
from delfis_api.services.base import EntityMessages, EntityService


class UserRoleService(EntityService[UserRole]):
    messages = EntityMessages(
        label="Role",
        list_empty="Nenhuma role encontrada.",
        not_found="Role não encontrado.",
        duplicate="Role com esse nome já existente.",
        delete_blocked="Existem usuários cadastrados com essa role. Mude-os para excluir essa role.",
    )
    schema = UserRoleIn
    patch_model = UserRolePatch

    def __init__(self) -> None:
        super().__init__(UserRoleRepository())

    def get_by_name(self, name: str) -> UserRole:
        return self._require(self.repository.find_by_name(name))

    def insert(self, data: UserRoleIn) -> UserRole:
        return self._persist(UserRole(name=data.name))

    def update(self, role_id: int, data: UserRoleIn) -> UserRole:
        """Full replace; goes through the same path as ``insert`` once the id is known to exist."""
        self.get_by_id(role_id)
        return self._persist(UserRole(id=role_id, name=data.name))

    def _as_payload(self, role: UserRole) -> dict:
        return {"name": role.name}
