from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Garante que o pacote delfis_api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from delfis_api.app import create_app  # noqa: E402
from delfis_api.core import config as core_config  # noqa: E402
from delfis_api.db import create_tables  # noqa: E402
from delfis_api.db import session as db_session  # noqa: E402
from delfis_api.repositories import json_storage  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]
    json_storage.get_document_store.cache_clear()


@pytest.fixture()
def db_env(tmp_path, monkeypatch):
    """Configura um SQLite e um arquivo de documentos temporários e reseta caches de settings/engine."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("SUDOKU_STORE_PATH", str(tmp_path / "sudoku.json"))
    _clear_caches()

    create_tables.drop_all()
    create_tables.create_all()

    yield tmp_path

    engine = db_session.get_engine()
    create_tables.drop_all()
    engine.dispose()
    _clear_caches()


@pytest.fixture()
def client(db_env):
    with TestClient(create_app()) as test_client:
        yield test_client


def user_payload(**overrides) -> dict:
    payload = {
        "name": "  maria silva ",
        "username": "maria",
        "email": "maria@delfis.com",
        "password": "segredo123",
        "level": 1,
        "points": 0,
        "coins": 0,
        "birthDate": "2000-05-10",
        "pictureUrl": None,
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def make_role(client):
    def _make(name: str = "ADMIN") -> dict:
        resp = client.post("/api/user-role/insert", json={"name": name})
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make


@pytest.fixture()
def make_plan(client):
    def _make(name: str = "PREMIUM", price: str = "19.90") -> dict:
        resp = client.post("/api/plan/insert", json={"name": name, "price": price})
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make


@pytest.fixture()
def make_user(client):
    def _make(**overrides) -> dict:
        resp = client.post("/api/app-user/insert", json=user_payload(**overrides))
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make
