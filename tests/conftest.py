from __future__ import annotations

from typing import Sequence, TypeVar

import pytest

from tetromino_game.game import Color, PieceType

T = TypeVar("T")


class FixedSource:
    """Always picks the same kind and color."""

    def __init__(self, kind: PieceType, color: Color = Color.RED) -> None:
        self.kind = kind
        self.color = color
        self.calls = 0

    def choice(self, seq: Sequence[T]) -> T:
        self.calls += 1
        if self.kind in seq:
            return self.kind  # type: ignore[return-value]
        return self.color  # type: ignore[return-value]


@pytest.fixture
def o_source() -> FixedSource:
    return FixedSource(PieceType.O, Color.YELLOW)


@pytest.fixture
def make_source():
    return FixedSource
