from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

import numpy as np

from .color import Color
from .pieces import Coordinate, Piece


EMPTY_CELL: int = 0

Block = Tuple[Coordinate, Color]


class GameField:
    """Fixed-size board of locked blocks.

    Cells live in a row-major ``(height, width)`` int8 array: 0 is empty and
    any other value is the ``Color`` occupying the cell. ``y`` grows
    downwards, so row 0 is the top of the board.

    Only the floor and the side walls are enforced. Negative ``y`` is a legal
    position for a falling piece (spawn overhang) but never holds a block.
    """

    def __init__(self, width: int, height: int) -> None:
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError(f"field dimensions must be positive, got {width}x{height}")
        self._width = int(width)
        self._height = int(height)
        self.grid = np.zeros((self._height, self._width), dtype=np.int8)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def reset(self) -> None:
        self.grid.fill(EMPTY_CELL)

    def valid_index(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def index_of(self, x: int, y: int) -> int:
        return y * self._width + x

    def from_index(self, i: int) -> Coordinate:
        y, x = divmod(int(i), self._width)
        return x, y

    def value_of(self, x: int, y: int) -> Optional[Color]:
        assert self.valid_index(x, y), f"cell ({x}, {y}) outside {self._width}x{self._height} field"
        v = int(self.grid[y, x])
        if v == EMPTY_CELL:
            return None
        return Color(v)

    def set_block(self, x: int, y: int, color: Color) -> None:
        assert self.valid_index(x, y), f"cell ({x}, {y}) outside {self._width}x{self._height} field"
        self.grid[y, x] = int(color)

    def clear_block(self, x: int, y: int) -> None:
        assert self.valid_index(x, y), f"cell ({x}, {y}) outside {self._width}x{self._height} field"
        self.grid[y, x] = EMPTY_CELL

    def contains_node(self, x: int, y: int) -> bool:
        return self.valid_index(x, y) and self.grid[y, x] != EMPTY_CELL

    def contains_any(self, nodes: Iterable[Coordinate]) -> bool:
        return any(self.contains_node(x, y) for x, y in nodes)

    def collisions(self, nodes: Iterable[Coordinate]) -> List[Coordinate]:
        return [(x, y) for x, y in nodes if self.contains_node(x, y)]

    def hits_wall(self, nodes: Iterable[Coordinate]) -> bool:
        return any(x < 0 or x >= self._width for x, _ in nodes)

    def hits_floor(self, nodes: Iterable[Coordinate]) -> bool:
        # no ceiling check on purpose
        return any(y >= self._height for _, y in nodes)

    def valid_piece(self, piece: Piece) -> bool:
        blocks = piece.coordinates()
        return not self.contains_any(blocks) and not self.hits_wall(blocks) and not self.hits_floor(blocks)

    def insert_blocks(self, nodes: Iterable[Coordinate], color: Color) -> None:
        """Write ``color`` into every listed cell that is on the board and empty.

        Off-board cells are skipped and occupied cells keep their color.
        """
        for x, y in nodes:
            if self.valid_index(x, y) and not self.contains_node(x, y):
                self.set_block(x, y, color)

    def is_row_full(self, row: int) -> bool:
        if not 0 <= row < self._height:
            return False
        return bool(np.all(self.grid[row] != EMPTY_CELL))

    def delete_row(self, row: int) -> None:
        """Remove ``row`` and shift every row above it down by one.

        Rows below ``row`` are untouched and the top row ends up empty.
        """
        assert 0 <= row < self._height, f"row {row} outside field of height {self._height}"
        if row > 0:
            self.grid[1 : row + 1] = self.grid[:row].copy()
        self.grid[0] = EMPTY_CELL

    def get_blocks(self) -> List[Block]:
        flat = self.grid.ravel()
        return [(self.from_index(i), Color(int(flat[i]))) for i in np.flatnonzero(flat)]

    def filled_count(self) -> int:
        return int(np.count_nonzero(self.grid))
