from __future__ import annotations

from blockfall.config import EngineConfig
from blockfall.controls import KEY_BINDINGS, Action, action_for_key, handle_key
from blockfall.engine import GameEngine, GameSession


def _session() -> GameSession:
    return GameSession(GameEngine(EngineConfig(seed=2)))


def test_bindings_cover_documented_keys() -> None:
    assert action_for_key("ArrowLeft") is Action.MOVE_LEFT
    assert action_for_key("ArrowRight") is Action.MOVE_RIGHT
    assert action_for_key("ArrowDown") is Action.MOVE_DOWN
    assert action_for_key("ArrowUp") is Action.ROTATE
    assert action_for_key(" ") is Action.HARD_DROP
    assert action_for_key("p") is Action.TOGGLE_PAUSE
    assert action_for_key("P") is Action.TOGGLE_PAUSE
    assert action_for_key("q") is None


def test_every_action_is_a_session_method() -> None:
    for action in Action:
        assert callable(getattr(GameSession, action.value))
    assert set(KEY_BINDINGS.values()) <= set(Action)


def test_handle_key_moves_piece() -> None:
    session = _session()
    x = session.state.current_piece.position.x
    state = handle_key(session, "ArrowLeft")
    assert state.current_piece.position.x == x - 1
    assert session.state is state


def test_unmapped_key_is_ignored() -> None:
    session = _session()
    before = session.state
    assert handle_key(session, "Escape") is before


def test_pause_key_toggles() -> None:
    session = _session()
    assert handle_key(session, "P").is_paused
    paused = session.state
    assert handle_key(session, "ArrowDown") is paused
    assert not handle_key(session, "p").is_paused
