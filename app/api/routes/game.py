from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from app.schemas.game import IntentRequest, NewGameRequest
from app.services.session_store import get_store
from game import GameSessionError, state_to_json
from game.errors import SESSION_NOT_FOUND

logger = logging.getLogger(__name__)

router = APIRouter()


def _http_error(e: GameSessionError) -> HTTPException:
    status = 404 if e.code == SESSION_NOT_FOUND else 400
    return HTTPException(status_code=status, detail={"code": e.code, "message": e.message, "details": e.details})


@router.post("/api/game/new")
async def api_game_new(req: NewGameRequest):
    session = get_store().create(seed=req.seed)
    return {"session_id": session.session_id, "state": state_to_json(session.state)}


@router.get("/api/game/{session_id}")
async def api_game_state(session_id: str):
    try:
        session = get_store().get(session_id)
    except GameSessionError as e:
        raise _http_error(e)
    return {"session_id": session_id, "state": state_to_json(session.state)}


@router.post("/api/game/{session_id}/intent")
async def api_game_intent(session_id: str, req: IntentRequest):
    try:
        result = get_store().apply(session_id, req.to_payload())
    except GameSessionError as e:
        raise _http_error(e)
    return {
        "session_id": session_id,
        "accepted": result.accepted,
        "rejection": result.rejection,
        "logs": list(result.logs),
        "state": state_to_json(result.state),
    }


@router.delete("/api/game/{session_id}")
async def api_game_drop(session_id: str):
    if not get_store().drop(session_id):
        raise HTTPException(status_code=404, detail={"code": SESSION_NOT_FOUND, "message": "session not found"})
    return {"ok": True}
