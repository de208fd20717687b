from __future__ import annotations

import json

EMPTY = [[0] * 9 for _ in range(9)]
SOLUTION = [[(row * 3 + row // 3 + col) % 9 + 1 for col in range(9)] for row in range(9)]


def _insert(client, **overrides):
    body = {"puzzle": EMPTY, "solution": SOLUTION, "difficulty": "facil"}
    body.update(overrides)
    resp = client.post("/api/sudoku/insert", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_get_all_empty(client):
    resp = client.get("/api/sudoku/get-all")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Nenhum sudoku encontrado."}


def test_insert_assigns_string_id(client, db_env):
    sudoku = _insert(client)
    assert isinstance(sudoku["id"], str) and len(sudoku["id"]) == 24
    assert sudoku["solution"] == SOLUTION
    assert client.get(f"/api/sudoku/get-by-id/{sudoku['id']}").json()["difficulty"] == "facil"

    stored = json.loads((db_env / "sudoku.json").read_text(encoding="utf-8"))
    assert list(stored["sudokus"]) == [sudoku["id"]]


def test_invalid_grid_rejected(client):
    resp = client.post("/api/sudoku/insert", json={"puzzle": [[0] * 9] * 8})
    assert resp.status_code == 400
    assert "puzzle" in resp.json()

    bad_solution = client.post("/api/sudoku/insert", json={"puzzle": EMPTY, "solution": EMPTY})
    assert bad_solution.status_code == 400
    assert "solution" in bad_solution.json()


def test_put_and_patch(client):
    sudoku = _insert(client)
    puzzle = [row[:] for row in SOLUTION]
    puzzle[0][0] = 0
    resp = client.put(f"/api/sudoku/update/{sudoku['id']}", json={"puzzle": puzzle, "difficulty": "medio"})
    assert resp.status_code == 200
    assert resp.json()["id"] == sudoku["id"]
    assert resp.json()["solution"] is None

    patched = client.patch(f"/api/sudoku/update/{sudoku['id']}", json={"difficulty": "dificil"})
    assert patched.json() == "Sudoku atualizado com sucesso."
    stored = client.get(f"/api/sudoku/get-by-id/{sudoku['id']}").json()
    assert stored["difficulty"] == "dificil"
    assert stored["puzzle"] == puzzle


def test_patch_invalid_grid_is_field_error(client):
    sudoku = _insert(client)
    resp = client.patch(f"/api/sudoku/update/{sudoku['id']}", json={"solution": EMPTY})
    assert resp.status_code == 400
    assert list(resp.json()) == ["solution"]


def test_delete(client):
    sudoku = _insert(client)
    assert client.delete(f"/api/sudoku/delete/{sudoku['id']}").json() == "Sudoku deletado com sucesso."
    assert client.get(f"/api/sudoku/get-by-id/{sudoku['id']}").status_code == 404
    assert client.delete(f"/api/sudoku/delete/{sudoku['id']}").status_code == 404
