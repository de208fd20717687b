"""Theme use cases."""

from __future__ import annotations

from delfis_api.db.models import Theme
from delfis_api.repositories.sql_repository import ThemeRepository
from delfis_api.schemas import ThemeIn, ThemePatch
from delfis_api.services.base import EntityMessages, EntityService


class ThemeService(EntityService[Theme]):
    messages = EntityMessages(
        label="Tema",
        list_empty="Nenhum tema encontrado.",
        not_found="Tema não encontrado.",
        duplicate="Tema com esse nome já existente.",
        delete_blocked="Existem registros associados a esse tema. Mude-os para excluir esse tema.",
    )
    schema = ThemeIn
    patch_model = ThemePatch

    def __init__(self) -> None:
        super().__init__(ThemeRepository())

    def get_by_name(self, name: str) -> Theme:
        """Case-insensitive lookup: "Puzzles" and "puzzles" are the same theme."""
        return self._require(self.repository.find_by_name_ignore_case(name))

    def insert(self, data: ThemeIn) -> Theme:
        return self._persist(Theme(name=data.name, description=data.description))

    def update(self, theme_id: int, data: ThemeIn) -> Theme:
        theme = self.get_by_id(theme_id)
        theme.name = data.name
        theme.description = data.description
        return self._persist(theme)

    def _as_payload(self, theme: Theme) -> dict:
        return {"name": theme.name, "description": theme.description}
