from dataclasses import dataclass

from .state import GameState


@dataclass
class GameSession:
    code: str                  # lobby code, e.g. "K7QX"
    seed: str                  # uuid4, drives map generation
    state: GameState
