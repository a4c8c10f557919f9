from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Dict, List, Tuple

from .color import Color
from .types import RandomSource


Coordinate = Tuple[int, int]
Layout = Tuple[Coordinate, Coordinate, Coordinate, Coordinate]


class Rotation(IntEnum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def rotate_left(self) -> "Rotation":
        return Rotation((self.value - 1) % len(Rotation))

    def rotate_right(self) -> "Rotation":
        return Rotation((self.value + 1) % len(Rotation))


class PieceType(Enum):
    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    T = "T"
    Z = "Z"

    @property
    def layouts(self) -> Tuple[Layout, ...]:
        return LAYOUTS[self]

    @classmethod
    def random(cls, rng: RandomSource) -> "PieceType":
        return rng.choice(list(cls))


# Offsets relative to the anchor, one entry per distinct rotation state.
# Symmetric kinds list fewer states; lookups wrap on the table length.
LAYOUTS: Dict[PieceType, Tuple[Layout, ...]] = {
    PieceType.I: (
        ((0, 0), (1, 0), (2, 0), (3, 0)),
        ((2, -1), (2, 0), (2, 1), (2, 2)),
    ),
    PieceType.J: (
        ((-1, -1), (-1, 0), (0, 0), (1, 0)),
        ((1, -1), (0, -1), (0, 0), (0, 1)),
        ((-1, 0), (0, 0), (1, 0), (1, 1)),
        ((-1, 1), (0, -1), (0, 0), (0, 1)),
    ),
    PieceType.L: (
        ((1, -1), (-1, 0), (0, 0), (1, 0)),
        ((1, 1), (0, -1), (0, 0), (0, 1)),
        ((-1, 0), (0, 0), (1, 0), (-1, 1)),
        ((-1, -1), (0, -1), (0, 0), (0, 1)),
    ),
    PieceType.O: (
        ((0, 0), (1, 0), (0, 1), (1, 1)),
    ),
    PieceType.S: (
        ((-1, 0), (0, 0), (0, -1), (1, -1)),
        ((0, -1), (0, 0), (1, 0), (1, 1)),
    ),
    PieceType.T: (
        ((0, -1), (-1, 0), (0, 0), (1, 0)),
        ((1, 0), (0, -1), (0, 0), (0, 1)),
        ((-1, 0), (0, 0), (1, 0), (0, 1)),
        ((-1, 0), (0, 1), (0, 0), (0, -1)),
    ),
    PieceType.Z: (
        ((-1, -1), (0, -1), (0, 0), (1, 0)),
        ((1, -1), (1, 0), (0, 0), (0, 1)),
    ),
}


def base_coordinates(kind: PieceType, rotation: Rotation) -> Layout:
    table = LAYOUTS[kind]
    return table[int(rotation) % len(table)]


@dataclass(frozen=True)
class Piece:
    """Falling tetromino.

    Immutable: every move or rotation returns a new Piece and leaves the
    original untouched, so the caller decides whether to commit it.
    """

    kind: PieceType
    rotation: Rotation = Rotation.UP
    anchor: Coordinate = (0, 0)
    color: Color = Color.RED

    @classmethod
    def random(cls, rng: RandomSource, anchor: Coordinate = (0, 0)) -> "Piece":
        kind = PieceType.random(rng)
        color = Color.random(rng)
        return cls(kind=kind, rotation=Rotation.UP, anchor=anchor, color=color)

    def coordinates(self) -> List[Coordinate]:
        ax, ay = self.anchor
        return [(ax + dx, ay + dy) for dx, dy in base_coordinates(self.kind, self.rotation)]

    def moved(self, dx: int, dy: int) -> "Piece":
        ax, ay = self.anchor
        return replace(self, anchor=(ax + dx, ay + dy))

    def move_left(self) -> "Piece":
        return self.moved(-1, 0)

    def move_right(self) -> "Piece":
        return self.moved(1, 0)

    def move_down(self) -> "Piece":
        return self.moved(0, 1)

    # No wall kicks: an invalid rotation is simply rejected by the manager.
    def rotate_left(self) -> "Piece":
        return replace(self, rotation=self.rotation.rotate_left())

    def rotate_right(self) -> "Piece":
        return replace(self, rotation=self.rotation.rotate_right())
