"""State mutations for join, mine, move and chat."""

from __future__ import annotations

import logging
import time

from deep_diggers.models import (
    ChatAction,
    ChatMessage,
    Direction,
    GameState,
    MineAction,
    MoveAction,
    Player,
    Tile,
    tile_key,
)
from deep_diggers.models.actions import Action

from .errors import InvalidAction, PlayerNotFound

logger = logging.getLogger(__name__)

DIRECTION_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


def now_ms() -> int:
    return int(time.time() * 1000)


def add_player(state: GameState, name: str) -> bool:
    """Add ``name`` at the spawn point unless already present. Returns True if state changed."""
    if state.find_player(name) is not None:
        return False
    state.players.append(Player(name=name, x=0, y=0, inventory={}))
    return True


def _require_player(state: GameState, name: str) -> Player:
    player = state.find_player(name)
    if player is None:
        raise PlayerNotFound(name)
    return player


def mine(state: GameState, action: MineAction) -> None:
    player = _require_player(state, action.name)
    key = tile_key(action.x, action.y)
    tile = state.map.get(key)
    if tile is None or tile is Tile.EMPTY:
        return
    state.map[key] = Tile.EMPTY
    player.inventory[tile.value] = player.inventory.get(tile.value, 0) + 1
    logger.debug("[actions] %s mined %s at %s", player.name, tile.value, key)


def move(state: GameState, action: MoveAction) -> None:
    player = _require_player(state, action.name)
    dx, dy = DIRECTION_DELTAS[action.direction]
    player.x += dx
    player.y += dy


def chat(state: GameState, action: ChatAction) -> None:
    message = action.message.strip()
    if not message:
        raise InvalidAction("Message is empty")
    state.chat.append(ChatMessage(name=action.name, message=message, timestamp=now_ms()))


def apply_action(state: GameState, action: Action) -> None:
    if isinstance(action, MineAction):
        mine(state, action)
    elif isinstance(action, MoveAction):
        move(state, action)
    elif isinstance(action, ChatAction):
        chat(state, action)
    else:
        raise InvalidAction(f"Unsupported action {action!r}")
