from unittest.mock import patch

import pytest

from deep_diggers.models import ChatAction, GameState, MineAction, MoveAction, Player, Tile
from deep_diggers.services.actions import add_player, apply_action
from deep_diggers.services.errors import InvalidAction, PlayerNotFound


def _state() -> GameState:
    return GameState(
        map={"0,0": Tile.GRASS, "0,1": Tile.ORE, "1,0": Tile.EMPTY},
        players=[Player(name="ada")],
    )


def test_add_player_is_idempotent() -> None:
    state = _state()
    assert add_player(state, "bob") is True
    assert add_player(state, "bob") is False
    assert [p.name for p in state.players] == ["ada", "bob"]
    bob = state.find_player("bob")
    assert (bob.x, bob.y, bob.inventory) == (0, 0, {})


def test_mine_empties_tile_and_counts_once() -> None:
    state = _state()
    apply_action(state, MineAction(type="mine", name="ada", x=0, y=1))
    apply_action(state, MineAction(type="mine", name="ada", x=0, y=1))
    assert state.map["0,1"] is Tile.EMPTY
    assert state.find_player("ada").inventory == {"ore": 1}


@pytest.mark.parametrize(("x", "y"), [(1, 0), (40, 40)])
def test_mine_empty_or_missing_tile_is_noop(x: int, y: int) -> None:
    state = _state()
    apply_action(state, MineAction(type="mine", name="ada", x=x, y=y))
    assert state.find_player("ada").inventory == {}
    assert "40,40" not in state.map


def test_mine_requires_known_player() -> None:
    with pytest.raises(PlayerNotFound):
        apply_action(_state(), MineAction(type="mine", name="ghost", x=0, y=0))


@pytest.mark.parametrize(
    ("direction", "expected"),
    [("up", (0, -1)), ("down", (0, 1)), ("left", (-1, 0)), ("right", (1, 0))],
)
def test_move_by_unit_delta(direction: str, expected: tuple[int, int]) -> None:
    state = _state()
    apply_action(state, MoveAction(type="move", name="ada", direction=direction))
    ada = state.find_player("ada")
    assert (ada.x, ada.y) == expected


def test_move_has_no_bounds() -> None:
    state = _state()
    for _ in range(100):
        apply_action(state, MoveAction(type="move", name="ada", direction="left"))
    assert state.find_player("ada").x == -100


def test_move_requires_known_player() -> None:
    with pytest.raises(PlayerNotFound):
        apply_action(_state(), MoveAction(type="move", name="ghost", direction="up"))


def test_chat_appends_with_timestamp() -> None:
    state = _state()
    with patch("deep_diggers.services.actions.now_ms", return_value=1_700_000_000_000):
        apply_action(state, ChatAction(type="chat", name="ada", message="  found ore!  "))
    assert len(state.chat) == 1
    entry = state.chat[0]
    assert (entry.name, entry.message, entry.timestamp) == ("ada", "found ore!", 1_700_000_000_000)


def test_chat_rejects_blank_message() -> None:
    with pytest.raises(InvalidAction):
        apply_action(_state(), ChatAction(type="chat", name="ada", message="   "))
