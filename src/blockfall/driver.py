"""Periodic gravity for a :class:`~blockfall.engine.GameSession`.

The engine itself has no notion of time.  :class:`TickDriver` accumulates
elapsed milliseconds and calls ``move_down`` once per full interval, but only
while the game is running: paused or finished sessions do not fall, and the
accumulator is dropped so resuming does not release a burst of queued ticks.
"""

from __future__ import annotations

from typing import Callable, Optional
import asyncio
import logging
import time

from .engine import GameSession


LOGGER = logging.getLogger(__name__)


class TickDriver:
    """Drive ``session.move_down`` at a fixed cadence."""

    def __init__(
        self,
        session: GameSession,
        interval_ms: Optional[float] = None,
        *,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.session = session
        self.interval_ms = float(
            interval_ms if interval_ms is not None else session.config.tick_interval_ms
        )
        if self.interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self._clock = clock or time.monotonic
        self.drop_accum = 0.0
        self.ticks = 0

    @property
    def active(self) -> bool:
        state = self.session.state
        return not state.is_paused and not state.is_game_over

    def reset_timer(self) -> None:
        self.drop_accum = 0.0

    def advance(self, elapsed_ms: float) -> int:
        """Account for ``elapsed_ms`` and return how many ticks fired."""

        if not self.active:
            self.reset_timer()
            return 0
        self.drop_accum += elapsed_ms
        fired = 0
        while self.drop_accum >= self.interval_ms and self.active:
            self.drop_accum -= self.interval_ms
            self.session.move_down()
            fired += 1
        if not self.active:
            self.reset_timer()
        self.ticks += fired
        return fired

    async def run(self, stop: asyncio.Event) -> None:
        """Tick until ``stop`` is set.

        Cancelling the task or setting ``stop`` ends the loop; no tick is ever
        left half-applied because each engine call completes synchronously.
        """

        LOGGER.debug("Tick driver started (interval=%.0fms)", self.interval_ms)
        last = self._clock()
        while not stop.is_set():
            try:
                await asyncio.wait_for(stop.wait(), timeout=self.interval_ms / 1000.0)
            except asyncio.TimeoutError:
                pass
            now = self._clock()
            self.advance((now - last) * 1000.0)
            last = now
        LOGGER.debug("Tick driver stopped after %d tick(s)", self.ticks)
