from .errors import GameError, InvalidAction, LobbyCodeExhausted, PlayerNotFound, SessionNotFound
from .store import SessionStore, store

__all__ = [
    "GameError",
    "InvalidAction",
    "LobbyCodeExhausted",
    "PlayerNotFound",
    "SessionNotFound",
    "SessionStore",
    "store",
]
