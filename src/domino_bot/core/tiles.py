"""Domino tile value type."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tile:
    """A domino tile with a first face ``a`` and a second face ``b``.

    Faces keep the order they were given in, because open ends on the board
    are read positionally: ``Tile(6, 5)`` and ``Tile(5, 6)`` are different
    values. Pips are not range-checked, so any non-negative domain works.
    """

    a: int
    b: int

    def is_double(self) -> bool:
        """Return True when both faces carry the same pip value."""
        return self.a == self.b

    def contains_value(self, v: int) -> bool:
        """Return True if either face shows ``v``."""
        return v in (self.a, self.b)

    def pip_count(self) -> int:
        return self.a + self.b

    def __str__(self) -> str:
        return f"[{self.a}|{self.b}]"
