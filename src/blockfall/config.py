"""Configuration constants for the falling-block engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Dimensions of the standard playfield.
WIDTH = 10
HEIGHT = 20

# Milliseconds between automatic downward moves.
TICK_INTERVAL_MS = 500

# Widest canonical bitmap (the ``I`` piece); narrower fields cannot spawn it.
MIN_WIDTH = 4

# Every canonical bitmap fills its second row, so shorter fields cannot spawn.
MIN_HEIGHT = 2


@dataclass(frozen=True)
class EngineConfig:
    """Settings fixed for the lifetime of a game session.

    Raises:
        ValueError: If the dimensions or tick interval are unusable.
    """

    width: int = WIDTH
    height: int = HEIGHT
    tick_interval_ms: int = TICK_INTERVAL_MS
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width < MIN_WIDTH:
            raise ValueError(f"width must be at least {MIN_WIDTH}, got {self.width}")
        if self.height < MIN_HEIGHT:
            raise ValueError(f"height must be at least {MIN_HEIGHT}, got {self.height}")
        if self.tick_interval_ms <= 0:
            raise ValueError(
                f"tick_interval_ms must be positive, got {self.tick_interval_ms}"
            )
