from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services import session_store


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("BAOYAN_SIM_ADMIN_TOKEN", raising=False)
    session_store.reset_store(max_sessions=4)
    return TestClient(app)


def _new_game(client: TestClient, seed: int = 7) -> str:
    resp = client.post("/api/game/new", json={"seed": seed})
    assert resp.status_code == 200
    body = resp.json()
    assert body["state"]["phase"] == "start"
    return body["session_id"]


def test_new_game_and_fetch(client):
    sid = _new_game(client)
    resp = client.get(f"/api/game/{sid}")
    assert resp.status_code == 200
    assert resp.json()["state"]["money"] == 1000


def test_intent_round_trip(client):
    sid = _new_game(client)
    resp = client.post(f"/api/game/{sid}/intent", json={"type": "START_GAME", "background": "竞赛选手"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["accepted"] is True
    assert body["state"]["phase"] == "gaokao"
    assert body["state"]["stats"]["competition"] == 30.0

    resp = client.post(f"/api/game/{sid}/intent", json={"type": "proceed_to_university_selection"})
    state = resp.json()["state"]
    assert state["phase"] == "university_selection"
    assert state["choices"]["universities"]


def test_soft_rejection_is_200(client):
    sid = _new_game(client)
    resp = client.post(f"/api/game/{sid}/intent", json={"type": "ADVANCE_WEEK"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["accepted"] is False
    assert body["rejection"] == "WRONG_PHASE"


def test_bad_intent_is_400(client):
    sid = _new_game(client)
    resp = client.post(f"/api/game/{sid}/intent", json={"type": "FLY"})
    assert resp.status_code == 400
    assert resp.json()["detail"]["code"] == "BAD_INTENT"

    resp = client.post(f"/api/game/{sid}/intent", json={"type": "START_GAME"})
    assert resp.status_code == 400
    assert resp.json()["detail"]["details"] == {"field": "background"}


def test_unknown_session_is_404(client):
    resp = client.get("/api/game/missing")
    assert resp.status_code == 404
    assert resp.json()["detail"]["code"] == "SESSION_NOT_FOUND"
    resp = client.post("/api/game/missing/intent", json={"type": "ADVANCE_WEEK"})
    assert resp.status_code == 404


def test_sessions_are_bounded(client):
    first = _new_game(client)
    for seed in range(4):
        _new_game(client, seed)
    assert client.get(f"/api/game/{first}").status_code == 404


def test_same_seed_replays_same_game(client):
    rolls = []
    for _ in range(2):
        sid = _new_game(client, seed=99)
        body = client.post(f"/api/game/{sid}/intent", json={"type": "START_GAME", "background": "小镇做题家"}).json()
        rolls.append(body["state"]["gaokao_score"])
    assert rolls[0] == rolls[1]


def test_drop_session(client):
    sid = _new_game(client)
    assert client.delete(f"/api/game/{sid}").status_code == 200
    assert client.delete(f"/api/game/{sid}").status_code == 404


def test_content_endpoints(client):
    unis = client.get("/api/content/universities").json()["universities"]
    assert any(u["name"] == "清华大学" for u in unis)
    reachable = client.get("/api/content/universities", params={"min_score": 520}).json()["universities"]
    assert all(u["min_score"] <= 530 for u in reachable)
    assert client.get("/api/content/majors").json()["majors"]
    assert len(client.get("/api/content/backgrounds").json()["backgrounds"]) == 14
    names = {i["name"] for i in client.get("/api/content/shop").json()["items"]}
    assert "红牛" in names


def test_admin_token_guard(client, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("BAOYAN_SIM_ADMIN_TOKEN", "secret")
    assert client.post("/api/game/new", json={}).status_code == 401
    resp = client.post("/api/game/new", json={}, headers={"X-Admin-Token": "secret"})
    assert resp.status_code == 200
    # Reads stay open.
    assert client.get("/api/content/majors").status_code == 200
