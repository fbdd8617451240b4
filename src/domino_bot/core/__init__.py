"""Core domain types and move selection for Domino Bot."""

from domino_bot.core.board import BoardState, Play, Side
from domino_bot.core.bot import Difficulty, DominoBot, get_strategy
from domino_bot.core.errors import (
    DominoBotError,
    InvalidConfiguration,
    InvalidInput,
    StrategyNotImplemented,
)
from domino_bot.core.strategy import (
    AdvancedStrategy,
    BasicStrategy,
    IntermediateStrategy,
    MoveStrategy,
    select_move,
)
from domino_bot.core.tiles import Tile

__all__ = [
    "AdvancedStrategy",
    "BasicStrategy",
    "BoardState",
    "Difficulty",
    "DominoBot",
    "DominoBotError",
    "IntermediateStrategy",
    "InvalidConfiguration",
    "InvalidInput",
    "MoveStrategy",
    "Play",
    "Side",
    "StrategyNotImplemented",
    "Tile",
    "get_strategy",
    "select_move",
]
