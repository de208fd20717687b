"""Field-level revalidation used after a partial update."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from pydantic import BaseModel, ValidationError


def format_errors(exc, fields: Iterable[str] | None = None) -> dict[str, str]:
    """
    Converte os erros do pydantic (ou do FastAPI) em um mapa campo -> mensagem.

    Quando ``fields`` é informado, apenas erros localizados nesses campos entram
    no resultado. Apenas a primeira mensagem de cada campo é mantida.
    """
    wanted = set(fields) if fields is not None else None
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = [part for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = str(loc[0]) if loc else "__root__"
        if wanted is not None and field not in wanted:
            continue
        errors.setdefault(field, error.get("msg", "valor inválido"))
    return errors


def verify_object(schema: type[BaseModel], payload: Mapping[str, Any], fields: Iterable[str]) -> dict[str, str]:
    """
    Revalida ``payload`` contra ``schema`` e devolve as violações dos ``fields``.

    ``payload`` deve estar indexado pelos nomes públicos (camelCase) do schema,
    os mesmos usados em ``fields``. Um dicionário vazio significa que a
    validação passou.
    """
    try:
        schema.model_validate(dict(payload))
    except ValidationError as exc:
        return format_errors(exc, fields)
    return {}
