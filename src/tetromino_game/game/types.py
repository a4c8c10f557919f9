from __future__ import annotations

from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything with ``choice``; ``random.Random`` qualifies."""

    def choice(self, seq: Sequence[T]) -> T: ...
