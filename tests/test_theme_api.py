from __future__ import annotations


def _insert(client, name, description=None):
    return client.post("/api/theme/insert", json={"name": name, "description": description})


def test_lookup_ignores_case(client):
    theme = _insert(client, "Puzzles", "jogos de logica").json()
    for name in ("Puzzles", "puzzles", "PUZZLES"):
        resp = client.get(f"/api/theme/get-by-name/{name}")
        assert resp.status_code == 200
        assert resp.json()["id"] == theme["id"]
    assert client.get("/api/theme/get-by-name/outro").json() == {"detail": "Tema não encontrado."}


def test_names_differing_in_case_collide(client):
    assert _insert(client, "Puzzles").status_code == 201
    resp = _insert(client, "puzzles")
    assert resp.status_code == 409
    assert resp.json() == {"detail": "Tema com esse nome já existente."}


def test_patch_description_keeps_name(client):
    theme = _insert(client, "Puzzles").json()
    resp = client.patch(f"/api/theme/update/{theme['id']}", json={"description": "novo"})
    assert resp.status_code == 200
    stored = client.get(f"/api/theme/get-by-id/{theme['id']}").json()
    assert stored == {"id": theme["id"], "name": "Puzzles", "description": "novo"}


def test_patch_into_existing_name_conflicts(client):
    _insert(client, "Puzzles")
    other = _insert(client, "Cores").json()
    resp = client.patch(f"/api/theme/update/{other['id']}", json={"name": "PUZZLES"})
    assert resp.status_code == 409
    assert client.get(f"/api/theme/get-by-id/{other['id']}").json()["name"] == "Cores"


def test_delete(client):
    theme = _insert(client, "Puzzles").json()
    assert client.delete(f"/api/theme/delete/{theme['id']}").json() == "Tema deletado com sucesso."
    assert client.get("/api/theme/get-all").status_code == 404
