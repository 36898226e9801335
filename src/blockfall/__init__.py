"""Rules engine for a falling-block puzzle game."""

from .config import EngineConfig
from .shapes import PieceKind, shape_bitmap, shape_color
from .piece import Piece, Position, rotate, spawn
from .field import Field, clear_full_rows, collides, create_empty, merge
from .engine import GameEngine, GameSession, GameState, GameStatus, SCORE_TABLE, score_for_lines
from .controls import Action, action_for_key, handle_key
from .driver import TickDriver
from .utils import overlay, render_ascii

__all__ = [
    "EngineConfig",
    "PieceKind",
    "shape_bitmap",
    "shape_color",
    "Piece",
    "Position",
    "rotate",
    "spawn",
    "Field",
    "clear_full_rows",
    "collides",
    "create_empty",
    "merge",
    "GameEngine",
    "GameSession",
    "GameState",
    "GameStatus",
    "SCORE_TABLE",
    "score_for_lines",
    "Action",
    "action_for_key",
    "handle_key",
    "TickDriver",
    "overlay",
    "render_ascii",
]
