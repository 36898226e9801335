"""Simple ASCII demo for the falling-block engine.

Run with: `python -m blockfall`

Plays a short game by hard-dropping pieces (optionally nudged sideways at
random) and prints the final frame, which makes a handy smoke test for the
engine without a graphical front-end.
"""

from __future__ import annotations

import argparse
import logging
import random

from . import EngineConfig, GameEngine, GameSession, render_ascii
from .config import HEIGHT, WIDTH


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a scripted blockfall game.")
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--height", type=int, default=HEIGHT)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--pieces", type=int, default=30, help="number of pieces to drop")
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s %(message)s")
    config = EngineConfig(width=args.width, height=args.height, seed=args.seed)
    session = GameSession(GameEngine(config))
    moves = random.Random(args.seed)

    for _ in range(args.pieces):
        if session.state.is_game_over:
            break
        for _ in range(moves.randrange(4)):
            session.rotate()
        shift = moves.randint(-config.width // 2, config.width // 2)
        step = session.move_right if shift > 0 else session.move_left
        for _ in range(abs(shift)):
            step()
        session.hard_drop()

    print(render_ascii(session.state))


if __name__ == "__main__":
    main()
