"""REST service to play Scoundrel through the rules engine."""

from __future__ import annotations

import logging
import uuid
from dataclasses import asdict
from typing import Dict

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from scoundrel.config import GameConfig
from scoundrel.room import InvalidPlay
from scoundrel.service import GameService

logger = logging.getLogger(__name__)


class StartRequest(GameConfig):
    """Session options; fields and limits come from GameConfig."""


class PlayRequest(BaseModel):
    index: int
    use_weapon: bool = True


sessions: Dict[str, GameService] = {}


app = FastAPI(title="Scoundrel Play Service")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def ensure_session(session_id: str) -> GameService:
    service = sessions.get(session_id)
    if service is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return service


def rejected(exc: InvalidPlay) -> HTTPException:
    return HTTPException(status_code=400, detail={"reason": str(exc.reason), "message": str(exc)})


@app.post("/session/start")
def start_session(request: StartRequest) -> Dict[str, object]:
    service = GameService(GameConfig.model_validate(request.model_dump()))
    state = service.start_new_game()
    session_id = uuid.uuid4().hex
    sessions[session_id] = service
    logger.info("Opened session %s", session_id)
    return {"session_id": session_id, "state": asdict(state)}


@app.get("/session/{session_id}")
def get_state(session_id: str) -> Dict[str, object]:
    service = ensure_session(session_id)
    return {"state": asdict(service.view())}


@app.post("/session/{session_id}/play")
def play_card(session_id: str, request: PlayRequest) -> Dict[str, object]:
    service = ensure_session(session_id)
    try:
        outcome = service.play(request.index, use_weapon=request.use_weapon)
    except InvalidPlay as exc:
        raise rejected(exc) from exc
    return {"state": asdict(service.view()), "outcome": asdict(outcome)}


@app.post("/session/{session_id}/skip")
def skip_room(session_id: str) -> Dict[str, object]:
    service = ensure_session(session_id)
    try:
        outcome = service.skip()
    except InvalidPlay as exc:
        raise rejected(exc) from exc
    return {"state": asdict(service.view()), "outcome": asdict(outcome)}


@app.delete("/session/{session_id}")
def close_session(session_id: str) -> Dict[str, object]:
    ensure_session(session_id)
    del sessions[session_id]
    return {"closed": session_id}
