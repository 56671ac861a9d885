"""Game state stored as one JSON blob per session."""

from enum import Enum

from pydantic import BaseModel, Field


class Tile(str, Enum):
    GRASS = "grass"
    DIRT = "dirt"
    STONE = "stone"
    ORE = "ore"
    EMPTY = "empty"


def tile_key(x: int, y: int) -> str:
    return f"{x},{y}"


class Player(BaseModel):
    name: str
    x: int = 0
    y: int = 0
    inventory: dict[str, int] = Field(default_factory=dict)


class ChatMessage(BaseModel):
    name: str
    message: str
    timestamp: int             # epoch milliseconds


class GameState(BaseModel):
    map: dict[str, Tile] = Field(default_factory=dict)   # "x,y" -> tile
    players: list[Player] = Field(default_factory=list)
    chat: list[ChatMessage] = Field(default_factory=list)

    def find_player(self, name: str) -> Player | None:
        for player in self.players:
            if player.name == name:
                return player
        return None
