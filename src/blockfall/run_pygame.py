"""Simple pygame front-end for the falling-block engine.

This module glues a :class:`~blockfall.engine.GameSession` to ``pygame`` for
rendering and input.  Gravity comes from :class:`~blockfall.driver.TickDriver`
fed with the frame clock; key presses go through the bindings in
:mod:`blockfall.controls`, with ``R`` added to restart after a game over.
"""

from __future__ import annotations

from typing import Dict, Optional
import argparse
import asyncio
import logging

import pygame

from .config import EngineConfig, HEIGHT, TICK_INTERVAL_MS, WIDTH
from .controls import handle_key
from .driver import TickDriver
from .engine import GameEngine, GameSession, GameState
from .field import Field
from .piece import Piece
from .shapes import CELL_COLORS


LOGGER = logging.getLogger(__name__)

# Size of a single field cell in pixels
CELL_SIZE = 30
# Width of the side panel showing score and the next piece
PANEL_WIDTH = 6 * CELL_SIZE
# Frames per second to run the game loop at
FPS = 60

BACKGROUND = (0, 0, 0)
GRID_LINE = (50, 50, 50)
TEXT_COLOR = (220, 220, 220)

# pygame key codes translated to the DOM-style names used by ``controls``
PYGAME_KEYS: Dict[int, str] = {
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_UP: "ArrowUp",
    pygame.K_SPACE: " ",
    pygame.K_p: "p",
}


def _rgb(color: str) -> pygame.Color:
    return pygame.Color(color)


def draw_cell(screen: pygame.Surface, x: int, y: int, color, origin=(0, 0)) -> None:
    ox, oy = origin
    rect = pygame.Rect(ox + x * CELL_SIZE, oy + y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)
    pygame.draw.rect(screen, GRID_LINE, rect, 1)


def draw_field(screen: pygame.Surface, field: Field) -> None:
    """Render the locked cells of the field."""

    for y, row in enumerate(field.rows()):
        for x, value in enumerate(row):
            color = _rgb(CELL_COLORS[value]) if value else BACKGROUND
            draw_cell(screen, x, y, color)


def draw_piece(screen: pygame.Surface, piece: Optional[Piece], origin=(0, 0)) -> None:
    """Render ``piece``; blocks above the top edge are not drawn."""

    if piece is None:
        return
    color = _rgb(piece.color)
    for x, y in piece.cells():
        if y >= 0:
            draw_cell(screen, x, y, color, origin)


def draw_panel(screen: pygame.Surface, font: pygame.font.Font, state: GameState, width: int) -> None:
    left = width * CELL_SIZE + CELL_SIZE // 2
    lines = [f"Score: {state.score}", f"Lines: {state.lines}", "Next:"]
    if state.is_game_over:
        lines.append("GAME OVER - R")
    elif state.is_paused:
        lines.append("PAUSED")
    for i, text in enumerate(lines):
        screen.blit(font.render(text, True, TEXT_COLOR), (left, 10 + i * 24))
    if state.next_piece is not None:
        preview = state.next_piece.moved(-state.next_piece.position.x, 0)
        draw_piece(screen, preview, origin=(left, 10 + len(lines) * 24 + 8))


class GameRunner:
    """Own the session, the tick driver and the pygame window."""

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.session = GameSession(GameEngine(config))
        self.driver = TickDriver(self.session)
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def on_key(self, key: int) -> None:
        if key == pygame.K_r:
            self.session.reset()
            self.driver.reset_timer()
            return
        name = PYGAME_KEYS.get(key)
        if name is not None:
            handle_key(self.session, name)

    async def run(self) -> None:
        config = self.session.config
        pygame.init()
        screen = pygame.display.set_mode(
            (config.width * CELL_SIZE + PANEL_WIDTH, config.height * CELL_SIZE)
        )
        pygame.display.set_caption("Blockfall")
        clock = pygame.time.Clock()
        font = pygame.font.Font(None, 24)
        LOGGER.info("Game started")

        self._running = True
        try:
            while self._running:
                dt = clock.tick(FPS)
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self._running = False
                    elif event.type == pygame.KEYDOWN:
                        self.on_key(event.key)

                self.driver.advance(dt)
                self.render(screen, font)

                # Yield to the host event loop to keep other tasks responsive
                await asyncio.sleep(0)
        finally:
            pygame.quit()
        LOGGER.info("Game stopped. Score: %d", self.session.state.score)

    def render(self, screen: pygame.Surface, font) -> bool:
        """Draw the current state; a pygame error is logged and skipped.

        Returns ``False`` when the frame could not be drawn.
        """

        state = self.session.state
        try:
            screen.fill(BACKGROUND)
            draw_field(screen, state.field)
            if not state.is_game_over:
                draw_piece(screen, state.current_piece)
            draw_panel(screen, font, state, self.session.config.width)
            pygame.display.flip()
        except pygame.error:
            LOGGER.exception("Frame render failed; continuing")
            return False
        return True

    def stop(self) -> None:
        self._running = False


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play blockfall with pygame.")
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--height", type=int, default=HEIGHT)
    parser.add_argument("--tick-ms", type=int, default=TICK_INTERVAL_MS)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(message)s")
    config = EngineConfig(
        width=args.width,
        height=args.height,
        tick_interval_ms=args.tick_ms,
        seed=args.seed,
    )
    asyncio.run(GameRunner(config).run())


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
