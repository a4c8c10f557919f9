from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Tuple

from .color import Color
from .grid import GameField
from .pieces import Piece
from .types import RandomSource


LOG = logging.getLogger(__name__)


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE_CW = 2
    ROTATE_CCW = 3
    SOFT_DROP = 4
    HARD_DROP = 5
    NONE = 6


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None
    gravity_ms: int = 600


class TetrisManager:
    """Drives one falling piece against one GameField.

    All commands validate a candidate piece against the field before
    committing it; rejected moves leave the active piece unchanged.
    """

    def __init__(self, width: int = 10, height: int = 20, rng: Optional[RandomSource] = None) -> None:
        self.field = GameField(width, height)
        self.rng: RandomSource = rng if rng is not None else random.Random()
        self.game_over = False
        self.piece = self._spawn_piece()

    @classmethod
    def from_config(cls, config: GameConfig, rng: Optional[RandomSource] = None) -> "TetrisManager":
        if rng is None:
            rng = random.Random(config.random_seed)
        return cls(config.width, config.height, rng=rng)

    def reset(self) -> None:
        self.field.reset()
        self.game_over = False
        self.piece = self._spawn_piece()

    def _spawn_piece(self) -> Piece:
        piece = Piece.random(self.rng, anchor=(self.field.width // 2, 0))
        LOG.debug("spawned %s %s at %s", piece.kind.name, piece.color.name, piece.anchor)
        # Only an overlap with locked blocks tops out; walls are not checked here.
        if self.field.contains_any(piece.coordinates()):
            self.game_over = True
            LOG.warning("topped out: %s overlaps the stack at %s", piece.kind.name, piece.anchor)
        return piece

    def _lock_piece(self) -> List[int]:
        coords = self.piece.coordinates()
        self.field.insert_blocks(coords, self.piece.color)
        # Ascending order is safe: deleting a row only shifts rows above it.
        cleared: List[int] = []
        for row in sorted({y for _, y in coords}):
            if self.field.is_row_full(row):
                self.field.delete_row(row)
                cleared.append(row)
        LOG.debug("locked %s at %s, cleared rows %s", self.piece.kind.name, self.piece.anchor, cleared)
        return cleared

    def step(self) -> bool:
        """Move the piece one row down, or lock it if it cannot descend.

        Returns True if the piece kept falling and False if it was locked.
        The active piece is not replaced on lock; ``tick`` spawns the next one.
        """
        down_one = self.piece.move_down()
        new_coords = down_one.coordinates()
        if self.field.hits_floor(new_coords) or self.field.contains_any(new_coords):
            self._lock_piece()
            return False
        self.piece = down_one
        return True

    def tick(self) -> None:
        if self.game_over:
            return
        if not self.step():
            self.piece = self._spawn_piece()

    def hard_drop(self) -> None:
        if self.game_over:
            return
        while self.step():
            pass
        self.piece = self._spawn_piece()

    def _try(self, candidate: Piece) -> None:
        if self.game_over:
            return
        if self.field.valid_piece(candidate):
            self.piece = candidate

    def move_left(self) -> None:
        self._try(self.piece.move_left())

    def move_right(self) -> None:
        self._try(self.piece.move_right())

    def rotate_left(self) -> None:
        self._try(self.piece.rotate_left())

    def rotate_right(self) -> None:
        self._try(self.piece.rotate_right())

    def apply(self, action: Action) -> None:
        if action == Action.LEFT:
            self.move_left()
        elif action == Action.RIGHT:
            self.move_right()
        elif action == Action.ROTATE_CW:
            self.rotate_right()
        elif action == Action.ROTATE_CCW:
            self.rotate_left()
        elif action == Action.SOFT_DROP:
            self.tick()
        elif action == Action.HARD_DROP:
            self.hard_drop()
        elif action == Action.NONE:
            pass

    def elems(self) -> List[Tuple[Tuple[float, float], Color]]:
        """Locked blocks plus the active piece, scaled into the unit square."""
        blocks = self.field.get_blocks()
        blocks.extend((coord, self.piece.color) for coord in self.piece.coordinates())
        cols = float(self.num_columns())
        rows = float(self.num_rows())
        return [((x / cols, y / rows), color) for (x, y), color in blocks]

    def num_columns(self) -> int:
        return self.field.width

    def num_rows(self) -> int:
        return self.field.height
