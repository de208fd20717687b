"""Shared plumbing for the entity services: lookups, writes and partial updates."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, Mapping, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from delfis_api.core.validation import verify_object
from delfis_api.repositories.results import WriteResult, WriteStatus
from delfis_api.services.errors import (
    ConflictError,
    EntityNotFoundError,
    FieldValidationError,
    InvalidArgumentError,
)

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")
PatchT = TypeVar("PatchT", bound=BaseModel)


@dataclass(frozen=True)
class EntityMessages:
    """User-facing messages (pt-BR) for one entity."""

    label: str
    list_empty: str
    not_found: str
    duplicate: str = "Registro já existente."
    reference: str = "Registro referenciado não existe."
    delete_blocked: str = "Existem registros que dependem deste. Mude-os antes de excluir."

    @property
    def deleted(self) -> str:
        return f"{self.label} deletado com sucesso."

    @property
    def updated(self) -> str:
        return f"{self.label} atualizado com sucesso."


def parse_patch(model: type[PatchT], updates: Mapping[str, Any]) -> PatchT:
    """Validate a sparse update map; unknown names and wrong types become InvalidArgumentError."""
    try:
        return model.model_validate(dict(updates))
    except ValidationError as exc:
        error = exc.errors()[0]
        field = str(error["loc"][0]) if error.get("loc") else "?"
        if error["type"] == "extra_forbidden":
            raise InvalidArgumentError(f"Campo {field} não é atualizável.") from exc
        raise InvalidArgumentError(f"Valor inválido para o campo {field}: {error['msg']}") from exc


def touched_fields(patch: BaseModel) -> list[str]:
    """Public (camelCase) names of the fields present in the patch body."""
    fields = type(patch).model_fields
    return [fields[name].alias or name for name in patch.model_fields_set]


class EntityService(ABC, Generic[EntityT]):
    messages: EntityMessages
    schema: type[BaseModel]
    patch_model: type[BaseModel]

    def __init__(self, repository) -> None:
        self.repository = repository

    # -------------------------------------- lookups --------------------------------------
    def _require(self, entity: Optional[EntityT], message: Optional[str] = None) -> EntityT:
        if entity is None:
            logger.warning(message or self.messages.not_found)
            raise EntityNotFoundError(message or self.messages.not_found)
        return entity

    def _require_any(self, entities: list[EntityT], message: Optional[str] = None) -> list[EntityT]:
        if not entities:
            logger.warning(message or self.messages.list_empty)
            raise EntityNotFoundError(message or self.messages.list_empty)
        return entities

    def get_all(self) -> list[EntityT]:
        return self._require_any(self.repository.find_all())

    def get_by_id(self, entity_id) -> EntityT:
        return self._require(self.repository.find_by_id(entity_id))

    # -------------------------------------- writes --------------------------------------
    def _unwrap(self, result: WriteResult, *, deleting: bool = False):
        if result.ok:
            return result.entity
        if result.status is WriteStatus.UNIQUE_VIOLATION:
            raise ConflictError(self.messages.duplicate)
        raise ConflictError(self.messages.delete_blocked if deleting else self.messages.reference)

    def _persist(self, entity: EntityT) -> EntityT:
        return self._unwrap(self.repository.save(entity))

    def delete(self, entity_id) -> str:
        self.get_by_id(entity_id)
        self._unwrap(self.repository.delete_by_id(entity_id), deleting=True)
        return self.messages.deleted

    # ---------------------------------- partial update ----------------------------------
    def _apply_patch(self, entity: EntityT, patch: BaseModel) -> None:
        for name in patch.model_fields_set:
            setattr(entity, name, getattr(patch, name))

    @abstractmethod
    def _as_payload(self, entity: EntityT) -> dict:
        """State of ``entity`` keyed by the camelCase names of its ``*In`` schema."""

    def _before_patch_save(self, entity: EntityT, patch: BaseModel) -> None:
        """Runs once the merged entity passed validation, right before it is persisted."""

    def patch(self, entity_id, updates: Mapping[str, Any]) -> str:
        """
        Merge ``updates`` onto the stored entity, revalidate the touched fields
        and persist only when everything is valid.
        """
        entity = self.get_by_id(entity_id)
        patch = parse_patch(self.patch_model, updates)
        self._apply_patch(entity, patch)

        errors = verify_object(self.schema, self._as_payload(entity), touched_fields(patch))
        if errors:
            logger.warning(f"{self.messages.label} {entity_id}: atualização parcial rejeitada {errors}")
            raise FieldValidationError(errors)

        self._before_patch_save(entity, patch)
        self._persist(entity)
        return self.messages.updated


def ref(entity_id: Optional[int]) -> Optional[dict]:
    return {"id": entity_id} if entity_id is not None else None


def ref_id(value: Optional[Any]) -> Optional[int]:
    return value.id if value is not None else None
