from __future__ import annotations

from enum import IntEnum
from typing import Tuple

from .types import RandomSource


class Color(IntEnum):
    # 0 is reserved for the empty board cell
    RED = 1
    GREEN = 2
    BLUE = 3
    WHITE = 4
    MAGENTA = 5
    YELLOW = 6

    @property
    def rgb(self) -> Tuple[float, float, float]:
        return _DISPLAY[self]

    @property
    def rgb255(self) -> Tuple[int, int, int]:
        r, g, b = self.rgb
        return int(r * 255), int(g * 255), int(b * 255)

    @classmethod
    def random(cls, rng: RandomSource) -> "Color":
        return rng.choice(list(cls))


_DISPLAY = {
    Color.RED: (1.0, 0.0, 0.0),
    Color.GREEN: (0.0, 1.0, 0.0),
    Color.BLUE: (0.0, 0.0, 1.0),
    Color.WHITE: (1.0, 1.0, 1.0),
    Color.MAGENTA: (1.0, 0.0, 1.0),
    Color.YELLOW: (1.0, 1.0, 0.0),
}
