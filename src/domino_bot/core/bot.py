"""Bot owner object that binds a player to a strategy tier."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum

from domino_bot.core.board import BoardState, Play
from domino_bot.core.errors import InvalidConfiguration
from domino_bot.core.strategy import (
    AdvancedStrategy,
    BasicStrategy,
    IntermediateStrategy,
    MoveStrategy,
)
from domino_bot.core.tiles import Tile

logger = logging.getLogger(__name__)


class Difficulty(Enum):
    """Skill tiers a bot can be configured with."""

    BASIC = "basic"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @classmethod
    def parse(cls, value: Difficulty | str) -> Difficulty:
        """Resolve a difficulty from an enum member or its name.

        Strings are matched case-insensitively, so ``"BASIC"`` and
        ``"basic"`` both resolve to ``Difficulty.BASIC``.

        Args:
            value: A ``Difficulty`` or a string naming one.

        Returns:
            The matching ``Difficulty``.

        Raises:
            InvalidConfiguration: If ``value`` names no known tier.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidConfiguration(f"Invalid difficulty level: {value!r}")


_STRATEGIES: dict[Difficulty, type[MoveStrategy]] = {
    Difficulty.BASIC: BasicStrategy,
    Difficulty.INTERMEDIATE: IntermediateStrategy,
    Difficulty.ADVANCED: AdvancedStrategy,
}


def get_strategy(difficulty: Difficulty | str) -> MoveStrategy:
    """Build the strategy for a difficulty tier.

    Args:
        difficulty: A ``Difficulty`` or a string naming one.

    Returns:
        A ready-to-use strategy.

    Raises:
        InvalidConfiguration: If the difficulty is unknown.
        StrategyNotImplemented: If the tier is reserved but not built yet.
    """
    return _STRATEGIES[Difficulty.parse(difficulty)]()


class DominoBot:
    """An automated player.

    The bot validates its difficulty eagerly, so a bad selector fails when
    the bot is configured rather than on its first move.

    Attributes:
        player_id: The player this bot moves for.
        difficulty: The active skill tier.
    """

    def __init__(
        self, player_id: int, difficulty: Difficulty | str = Difficulty.BASIC
    ) -> None:
        self._player_id = player_id
        self._difficulty = Difficulty.parse(difficulty)
        self._strategy = get_strategy(self._difficulty)

    @property
    def player_id(self) -> int:
        return self._player_id

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    def make_move(self, hand: Sequence[Tile], board: BoardState) -> Play | None:
        """Choose this bot's move.

        Args:
            hand: The bot's tiles.
            board: The current board snapshot.

        Returns:
            The play to make, or None if the bot must pass.
        """
        return self._strategy.select_move(hand, board, self._player_id)

    def set_difficulty(self, difficulty: Difficulty | str) -> None:
        """Switch to another skill tier.

        The current strategy is kept if the new one cannot be built.

        Raises:
            InvalidConfiguration: If the difficulty is unknown or its
                strategy is not implemented.
        """
        try:
            resolved = Difficulty.parse(difficulty)
            strategy = get_strategy(resolved)
        except InvalidConfiguration as exc:
            logger.warning(
                "Player %d keeps %s difficulty: %s",
                self._player_id,
                self._difficulty.value,
                exc,
            )
            raise
        self._difficulty = resolved
        self._strategy = strategy
        logger.info("Player %d difficulty set to %s", self._player_id, resolved.value)

    def __repr__(self) -> str:
        return (
            f"DominoBot(player_id={self._player_id}, "
            f"difficulty={self._difficulty.value!r})"
        )
