"""Game module for Tetromino Game.

Exports the core game engine and supporting classes:
- Color: Block colors and their display triples
- Rotation, PieceType, Piece: Tetromino geometry and immutable transforms
- GameField: Board storage, collision queries and row clearing
- TetrisManager: Tick-driven state machine for the active piece
"""

from .color import Color
from .pieces import Piece, PieceType, Rotation, base_coordinates
from .grid import GameField
from .core import Action, GameConfig, TetrisManager
from .types import RandomSource

__all__ = [
    "Color",
    "Piece",
    "PieceType",
    "Rotation",
    "base_coordinates",
    "GameField",
    "Action",
    "GameConfig",
    "RandomSource",
    "TetrisManager",
]
