"""Board model: plays on the domino chain and the board snapshot.

The board is an ordered chain. Insertion order is physical order: the first
play is the head of the chain and the last play is its tail.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from domino_bot.core.tiles import Tile


class Side(Enum):
    """How a played tile is attached to the chain.

    ``CENTER`` is only used for the opening tile.
    """

    HEAD = "head"
    TAIL = "tail"
    CENTER = "center"


@dataclass(frozen=True)
class Play:
    """A tile placed on the board.

    Attributes:
        tile: The tile being placed.
        side: The attachment tag of the tile.
        index: 0-based position of the play in the played sequence.
    """

    tile: Tile
    side: Side
    index: int


@dataclass(frozen=True)
class BoardState:
    """Immutable snapshot of the board handed to a strategy.

    Attributes:
        plays: Plays in chain order, head first and tail last.
        passed: Pip values that players have passed on. Recorded for
            richer strategies; the basic strategy does not read it.
    """

    plays: tuple[Play, ...] = ()
    passed: frozenset[int] = field(default_factory=frozenset)

    @classmethod
    def empty(cls) -> BoardState:
        """Return a board with no plays and no passes."""
        return cls()

    def __len__(self) -> int:
        return len(self.plays)

    def is_empty(self) -> bool:
        """Return True if no tile has been played yet."""
        return not self.plays
