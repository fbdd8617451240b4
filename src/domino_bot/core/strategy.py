"""Move selection for an automated domino player.

The basic heuristic scores every tile in hand by its pip value, adds a
bonus for doubles, and subtracts how often its values already appear on
the board. The highest-scoring playable tile is chosen, with ties going to
the head of the chain. When the hand is nearly empty the bot switches to
dumping its heaviest playable tile instead.

Every helper here is a pure function of its arguments. The strategy
classes hold no state and can be shared freely between threads.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from domino_bot.core.board import BoardState, Play, Side
from domino_bot.core.errors import InvalidInput, StrategyNotImplemented
from domino_bot.core.tiles import Tile

logger = logging.getLogger(__name__)

DOUBLE_BONUS = 10
"""Score added to a double on top of its pip count."""

ENDGAME_HAND_SIZE = 3
"""Hands of this many tiles or fewer use the endgame override."""


@dataclass(frozen=True)
class Candidate:
    """A scored play considered during selection.

    Attributes:
        play: The play that would be made.
        score: The tile's frequency-adjusted score.
        end: The end of the chain the play extends, ``Side.HEAD`` or
            ``Side.TAIL``.
    """

    play: Play
    score: int
    end: Side


# ---------------------------------------------------------------------------
# Board inspection
# ---------------------------------------------------------------------------


def find_open_ends(plays: Sequence[Play]) -> tuple[int, int]:
    """Return the pip values exposed at the head and tail of the chain.

    The head tile exposes its second face when it was attached as
    ``HEAD`` and its first face otherwise. The tail tile exposes its first
    face when it was attached as ``TAIL`` and its second face otherwise.
    A lone ``CENTER`` tile therefore exposes ``a`` at the head and ``b`` at
    the tail.

    Args:
        plays: Plays in chain order.

    Returns:
        A tuple ``(head_value, tail_value)``.

    Raises:
        InvalidInput: If ``plays`` is empty, or its first or last play does
            not carry a ``Tile`` and a ``Side``.
    """
    if not plays:
        raise InvalidInput("Cannot find open ends of an empty board.")
    first, last = plays[0], plays[-1]
    for play in (first, last):
        tile, side = getattr(play, "tile", None), getattr(play, "side", None)
        if not isinstance(tile, Tile) or not isinstance(side, Side):
            raise InvalidInput(f"Malformed play at the end of the chain: {play!r}")
    head_value = first.tile.b if first.side is Side.HEAD else first.tile.a
    tail_value = last.tile.a if last.side is Side.TAIL else last.tile.b
    return head_value, tail_value


def count_played_numbers(plays: Iterable[Play]) -> Counter[int]:
    """Tally how many times each pip value appears on the board.

    Every play contributes one count per face, so a double adds two to
    its value. Values that never appeared read as zero.
    """
    counts: Counter[int] = Counter()
    for play in plays:
        counts[play.tile.a] += 1
        counts[play.tile.b] += 1
    return counts


# ---------------------------------------------------------------------------
# Tile evaluation
# ---------------------------------------------------------------------------


def can_play(tile: Tile, value: int) -> bool:
    """Return True if ``tile`` can be attached to an end showing ``value``."""
    return tile.contains_value(value)


def score_tile(tile: Tile, played: Counter[int]) -> int:
    """Score a tile for the basic heuristic.

    Args:
        tile: The tile to score.
        played: Pip value frequencies from ``count_played_numbers``.

    Returns:
        ``a + b``, plus ``DOUBLE_BONUS`` for a double, minus the board
        frequencies of both faces.
    """
    score = tile.pip_count()
    if tile.is_double():
        score += DOUBLE_BONUS
    score -= played[tile.a] + played[tile.b]
    return score


def find_highest_tile(hand: Sequence[Tile]) -> Tile:
    """Return the tile with the largest pip count.

    Ties go to the tile that comes first in ``hand``.

    Raises:
        InvalidInput: If ``hand`` is empty.
    """
    if not hand:
        raise InvalidInput("Cannot pick the highest tile of an empty hand.")
    highest = hand[0]
    for tile in hand[1:]:
        if tile.pip_count() > highest.pip_count():
            highest = tile
    return highest


def create_play(tile: Tile, value: int, index: int) -> Play | None:
    """Build the play that attaches ``tile`` to an end showing ``value``.

    The side tag records which face of the tile meets the chain: ``HEAD``
    when the first face matches, ``TAIL`` otherwise.

    Args:
        tile: The tile to place.
        value: The exposed pip value of the targeted end.
        index: Position the play will take in the played sequence.

    Returns:
        The play, or None if the tile does not match ``value``.
    """
    if not can_play(tile, value):
        return None
    side = Side.HEAD if tile.a == value else Side.TAIL
    return Play(tile=tile, side=side, index=index)


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------


def prefers(candidate: Candidate, best: Candidate | None) -> bool:
    """Return True if ``candidate`` should replace the current ``best``.

    Higher scores win. On a tie a play on the head end beats one on the
    tail end; otherwise the earlier candidate is kept.
    """
    if best is None:
        return True
    if candidate.score != best.score:
        return candidate.score > best.score
    return candidate.end is Side.HEAD and best.end is Side.TAIL


def find_best_play(
    hand: Sequence[Tile],
    head_value: int,
    tail_value: int,
    played: Counter[int],
    board_length: int,
) -> Play | None:
    """Pick the highest-scoring playable tile across both ends.

    Every tile is tried against the head end and then the tail end; the
    whole hand is always examined.

    Args:
        hand: The player's tiles, in hand order.
        head_value: Pip value exposed at the head of the chain.
        tail_value: Pip value exposed at the tail of the chain.
        played: Pip value frequencies on the board.
        board_length: Number of plays on the board, used as the new index.

    Returns:
        The chosen play, or None if no tile matches either end.
    """
    best: Candidate | None = None
    for tile in hand:
        score = score_tile(tile, played)
        for end, value in ((Side.HEAD, head_value), (Side.TAIL, tail_value)):
            play = create_play(tile, value, board_length)
            if play is None:
                continue
            candidate = Candidate(play=play, score=score, end=end)
            if prefers(candidate, best):
                best = candidate
    return best.play if best is not None else None


def handle_endgame(
    hand: Sequence[Tile],
    head_value: int,
    tail_value: int,
    current_best: Play | None,
    board_length: int,
) -> Play | None:
    """Override the scored choice with the heaviest playable tile.

    Frequencies are ignored here. The playable tile with the largest pip
    count wins (first in hand order on ties) and is attached against the
    head value when it matches there, else against the tail value.

    Returns:
        The endgame play, or ``current_best`` unchanged when nothing in
        hand is playable.
    """
    highest: Tile | None = None
    for tile in hand:
        if not (can_play(tile, head_value) or can_play(tile, tail_value)):
            continue
        if highest is None or tile.pip_count() > highest.pip_count():
            highest = tile

    if highest is None:
        return current_best
    if can_play(highest, head_value):
        return create_play(highest, head_value, board_length)
    return create_play(highest, tail_value, board_length)


def play_first_tile(hand: Sequence[Tile]) -> Play:
    """Open the game with the heaviest tile in hand.

    Raises:
        InvalidInput: If ``hand`` is empty.
    """
    return Play(tile=find_highest_tile(hand), side=Side.CENTER, index=0)


def select_move(
    hand: Sequence[Tile], board: BoardState, player_id: int
) -> Play | None:
    """Choose a move for ``player_id`` with the basic heuristic.

    Args:
        hand: The player's tiles. Order matters only for breaking ties.
        board: The current board snapshot. Not modified.
        player_id: The player to move. Unused by the basic heuristic.

    Returns:
        The play to make, or None if the player must pass.

    Raises:
        InvalidInput: If the board is empty and so is the hand.
    """
    if board.is_empty():
        opening = play_first_tile(hand)
        logger.debug("Player %d opens with %s", player_id, opening.tile)
        return opening

    head_value, tail_value = find_open_ends(board.plays)
    played = count_played_numbers(board.plays)

    best = find_best_play(hand, head_value, tail_value, played, len(board))
    if len(hand) <= ENDGAME_HAND_SIZE:
        best = handle_endgame(hand, head_value, tail_value, best, len(board))

    if best is None:
        logger.debug(
            "Player %d passes: nothing matches open ends (%d, %d)",
            player_id,
            head_value,
            tail_value,
        )
    else:
        logger.debug(
            "Player %d plays %s as %s at index %d",
            player_id,
            best.tile,
            best.side.name,
            best.index,
        )
    return best


# ---------------------------------------------------------------------------
# Strategy variants
# ---------------------------------------------------------------------------


class MoveStrategy(ABC):
    """A skill tier that turns a hand and a board into a move."""

    @abstractmethod
    def select_move(
        self, hand: Sequence[Tile], board: BoardState, player_id: int
    ) -> Play | None:
        """Return the play to make, or None to pass."""


class BasicStrategy(MoveStrategy):
    """Frequency-adjusted scoring with an endgame override."""

    def select_move(
        self, hand: Sequence[Tile], board: BoardState, player_id: int
    ) -> Play | None:
        return select_move(hand, board, player_id)


class _UnimplementedStrategy(MoveStrategy):
    """A reserved tier that refuses to be built."""

    tier = "unknown"

    def __init__(self) -> None:
        raise self._refusal()

    def select_move(
        self, hand: Sequence[Tile], board: BoardState, player_id: int
    ) -> Play | None:
        raise self._refusal()

    @classmethod
    def _refusal(cls) -> StrategyNotImplemented:
        return StrategyNotImplemented(
            f"{cls.tier.capitalize()} strategy not implemented"
        )


class IntermediateStrategy(_UnimplementedStrategy):
    """Reserved for a stronger heuristic."""

    tier = "intermediate"


class AdvancedStrategy(_UnimplementedStrategy):
    """Reserved for a search-based player."""

    tier = "advanced"
