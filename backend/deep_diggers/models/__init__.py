from .actions import Action, ChatAction, Direction, MineAction, MoveAction
from .session import GameSession
from .state import ChatMessage, GameState, Player, Tile, tile_key

__all__ = [
    "Action",
    "ChatAction",
    "ChatMessage",
    "Direction",
    "GameSession",
    "GameState",
    "MineAction",
    "MoveAction",
    "Player",
    "Tile",
    "tile_key",
]
