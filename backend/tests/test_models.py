import pytest
from pydantic import ValidationError

from deep_diggers.models import ChatMessage, GameSession, GameState, Player, Tile, tile_key
from deep_diggers.models.actions import ChatAction, Direction, MineAction, MoveAction, action_adapter


def test_game_state_defaults() -> None:
    state = GameState()
    assert state.map == {}
    assert state.players == []
    assert state.chat == []


def test_player_defaults_to_spawn_with_empty_inventory() -> None:
    player = Player(name="ada")
    assert (player.x, player.y) == (0, 0)
    assert player.inventory == {}


def test_find_player_by_name() -> None:
    state = GameState(players=[Player(name="ada"), Player(name="bob", x=3)])
    assert state.find_player("bob").x == 3
    assert state.find_player("carol") is None


def test_tile_key_format() -> None:
    assert tile_key(-3, 12) == "-3,12"


def test_state_serializes_tiles_as_strings() -> None:
    state = GameState(
        map={"0,0": Tile.GRASS, "0,1": Tile.EMPTY},
        chat=[ChatMessage(name="ada", message="hi", timestamp=1)],
    )
    dumped = state.model_dump(mode="json")
    assert dumped["map"] == {"0,0": "grass", "0,1": "empty"}
    restored = GameState.model_validate_json(state.model_dump_json())
    assert restored.map["0,0"] is Tile.GRASS


def test_game_session_holds_state() -> None:
    session = GameSession(code="K7QX", seed="seed", state=GameState())
    session.state.players.append(Player(name="ada"))
    assert len(session.state.players) == 1


def test_action_adapter_dispatches_on_type() -> None:
    assert isinstance(action_adapter.validate_python({"type": "mine", "name": "a", "x": 1, "y": 2}), MineAction)
    move = action_adapter.validate_python({"type": "move", "name": "a", "direction": "left"})
    assert isinstance(move, MoveAction)
    assert move.direction is Direction.LEFT
    assert isinstance(action_adapter.validate_python({"type": "chat", "name": "a", "message": "yo"}), ChatAction)


def test_action_name_is_stripped() -> None:
    action = action_adapter.validate_python({"type": "move", "name": "  bob ", "direction": "up"})
    assert action.name == "bob"


def test_action_blank_name_is_rejected() -> None:
    with pytest.raises(ValidationError):
        action_adapter.validate_python({"type": "chat", "name": "   ", "message": "hi"})
