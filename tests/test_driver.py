from __future__ import annotations

from dataclasses import replace
import asyncio

import pytest

from blockfall.config import EngineConfig
from blockfall.driver import TickDriver
from blockfall.engine import GameEngine, GameSession


class FakeClock:
    def __init__(self, step: float) -> None:
        self.current = 0.0
        self.step = step

    def __call__(self) -> float:
        self.current += self.step
        return self.current


def _session() -> GameSession:
    return GameSession(GameEngine(EngineConfig(seed=4, tick_interval_ms=500)))


def test_ticks_fire_per_full_interval() -> None:
    session = _session()
    driver = TickDriver(session)
    y = session.state.current_piece.position.y

    assert driver.advance(499) == 0
    assert session.state.current_piece.position.y == y
    assert driver.advance(1) == 1
    assert session.state.current_piece.position.y == y + 1
    assert driver.advance(1000) == 2
    assert driver.ticks == 3


def test_paused_session_does_not_fall() -> None:
    session = _session()
    driver = TickDriver(session)
    driver.advance(400)
    session.toggle_pause()
    before = session.state
    assert driver.advance(5000) == 0
    assert session.state is before
    assert driver.drop_accum == 0


def test_game_over_stops_ticks_and_resets_timer() -> None:
    session = _session()
    driver = TickDriver(session)
    driver.drop_accum = 250.0
    session.state = replace(session.state, is_game_over=True)
    assert driver.advance(1000) == 0
    assert driver.drop_accum == 0


def test_invalid_interval_rejected() -> None:
    with pytest.raises(ValueError):
        TickDriver(_session(), 0)


def test_async_loop_ticks_until_stopped() -> None:
    session = _session()
    driver = TickDriver(session, 10, clock=FakeClock(0.01))

    async def scenario() -> None:
        stop = asyncio.Event()
        task = asyncio.create_task(driver.run(stop))
        await asyncio.sleep(0.1)
        stop.set()
        await task

    asyncio.run(scenario())
    assert driver.ticks >= 1
