"""Player actions posted to /api/session/action, tagged by ``type``."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter, field_validator


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class PlayerAction(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        # Join and create store names stripped; match them here.
        value = value.strip()
        if not value:
            raise ValueError("name is required")
        return value


class MineAction(PlayerAction):
    type: Literal["mine"]
    x: int
    y: int


class MoveAction(PlayerAction):
    type: Literal["move"]
    direction: Direction


class ChatAction(PlayerAction):
    type: Literal["chat"]
    message: str


Action = Annotated[MineAction | MoveAction | ChatAction, Field(discriminator="type")]

action_adapter: TypeAdapter[MineAction | MoveAction | ChatAction] = TypeAdapter(Action)
