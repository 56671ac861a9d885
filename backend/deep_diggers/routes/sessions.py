"""Lobby and gameplay REST API: create, join, poll state, post actions."""

import logging
import uuid
from typing import Any

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, ValidationError

from deep_diggers.config import get_settings
from deep_diggers.models import GameState, Player
from deep_diggers.models.actions import action_adapter
from deep_diggers.services import store
from deep_diggers.services.actions import add_player, apply_action
from deep_diggers.services.errors import (
    InvalidAction,
    LobbyCodeExhausted,
    PlayerNotFound,
    SessionNotFound,
)
from deep_diggers.services.lobby_codes import allocate_code, normalize_code
from deep_diggers.services.mapgen import generate_map

router = APIRouter(tags=["sessions"])
logger = logging.getLogger(__name__)


class SessionCreateRequest(BaseModel):
    name: str | None = None


class SessionJoinRequest(BaseModel):
    name: str | None = None
    code: str | None = None


class SessionActionRequest(BaseModel):
    code: str | None = None
    action: dict[str, Any] | None = None


class SessionResponse(BaseModel):
    code: str
    state: GameState


class StateResponse(BaseModel):
    state: GameState


@router.post("/session/create", response_model=SessionResponse)
def create_session(body: SessionCreateRequest) -> SessionResponse:
    """Open a new lobby with the caller as its first player."""
    name = (body.name or "").strip()
    if not name:
        raise HTTPException(status_code=400, detail="Name is required")
    settings = get_settings()
    seed = str(uuid.uuid4())
    state = GameState(
        map=generate_map(seed, width=settings.map_width, height=settings.map_height),
        players=[Player(name=name, x=0, y=0, inventory={})],
        chat=[],
    )
    try:
        # The unique code column arbitrates between concurrent creates.
        session = allocate_code(
            lambda code: store.try_create(code, seed, state),
            length=settings.code_length,
        )
    except LobbyCodeExhausted:
        raise HTTPException(status_code=503, detail="Could not allocate a lobby code") from None
    logger.info("[sessions] Session created code=%s by name=%r", session.code, name)
    return SessionResponse(code=session.code, state=session.state)


@router.post("/session/join", response_model=SessionResponse)
def join_session(body: SessionJoinRequest) -> SessionResponse:
    """Join an existing lobby. Joining twice under one name is a no-op."""
    name = (body.name or "").strip()
    code = normalize_code(body.code or "")
    if not name or not code:
        raise HTTPException(status_code=400, detail="Name and code are required")
    try:
        session = store.mutate(code, lambda state: add_player(state, name))
    except SessionNotFound:
        raise HTTPException(status_code=404, detail="Session not found") from None
    logger.info("[sessions] name=%r joined code=%s (%d players)", name, code, len(session.state.players))
    return SessionResponse(code=code, state=session.state)


@router.get("/session/state", response_model=StateResponse)
def get_session_state(
    code: str | None = Query(None, description="Lobby code"),
) -> StateResponse:
    """Current game state, polled by the client about once a second."""
    code = normalize_code(code or "")
    if not code:
        raise HTTPException(status_code=400, detail="Session code is required")
    session = store.get(code)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return StateResponse(state=session.state)


@router.post("/session/action", response_model=StateResponse)
def post_action(body: SessionActionRequest) -> StateResponse:
    """Apply one mine / move / chat action and return the new state."""
    code = normalize_code(body.code or "")
    if not code or not body.action:
        raise HTTPException(status_code=400, detail="Missing code or action")
    try:
        action = action_adapter.validate_python(body.action)
    except ValidationError as e:
        logger.info("[sessions] Rejected action for code=%s: %s", code, e.errors()[:1])
        raise HTTPException(status_code=400, detail="Invalid action") from None

    def _apply(state: GameState) -> None:
        apply_action(state, action)

    try:
        session = store.mutate(code, _apply)
    except SessionNotFound:
        raise HTTPException(status_code=404, detail="Session not found") from None
    except PlayerNotFound:
        raise HTTPException(status_code=404, detail="Player not found") from None
    except InvalidAction as e:
        logger.info("[sessions] Rejected action for code=%s: %s", code, e)
        raise HTTPException(status_code=400, detail="Invalid action") from None
    return StateResponse(state=session.state)
