"""Tests for the bot owner object and difficulty selection."""

from __future__ import annotations

import logging

import pytest

from domino_bot.core import (
    BasicStrategy,
    BoardState,
    Difficulty,
    DominoBot,
    InvalidConfiguration,
    Play,
    Side,
    StrategyNotImplemented,
    Tile,
    get_strategy,
)

# ---------------------------------------------------------------------------
# Difficulty
# ---------------------------------------------------------------------------


class TestDifficulty:
    """Tests for parsing the difficulty selector."""

    def test_three_tiers(self) -> None:
        assert [d.value for d in Difficulty] == ["basic", "intermediate", "advanced"]

    def test_parse_member(self) -> None:
        assert Difficulty.parse(Difficulty.ADVANCED) is Difficulty.ADVANCED

    @pytest.mark.parametrize("text", ["basic", "BASIC", " Basic "])
    def test_parse_string(self, text: str) -> None:
        assert Difficulty.parse(text) is Difficulty.BASIC

    @pytest.mark.parametrize("value", ["expert", "", 1, None])
    def test_parse_invalid(self, value: object) -> None:
        with pytest.raises(InvalidConfiguration, match="Invalid difficulty"):
            Difficulty.parse(value)  # type: ignore[arg-type]

    def test_invalid_configuration_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Difficulty.parse("expert")


class TestGetStrategy:
    """Tests for mapping difficulties to strategies."""

    def test_basic(self) -> None:
        assert isinstance(get_strategy("basic"), BasicStrategy)

    @pytest.mark.parametrize("tier", ["intermediate", Difficulty.ADVANCED])
    def test_reserved_tiers_fail_fast(self, tier: Difficulty | str) -> None:
        with pytest.raises(StrategyNotImplemented, match="not implemented"):
            get_strategy(tier)

    def test_not_implemented_is_configuration_error(self) -> None:
        with pytest.raises(InvalidConfiguration):
            get_strategy("advanced")


# ---------------------------------------------------------------------------
# DominoBot
# ---------------------------------------------------------------------------


class TestDominoBot:
    """Tests for the DominoBot owner object."""

    def test_defaults_to_basic(self) -> None:
        bot = DominoBot(1)
        assert bot.player_id == 1
        assert bot.difficulty is Difficulty.BASIC

    def test_makes_move(self) -> None:
        bot = DominoBot(0)
        board = BoardState(plays=(Play(Tile(6, 6), Side.HEAD, 0),))
        hand = [Tile(6, 5), Tile(4, 3), Tile(2, 1)]
        assert bot.make_move(hand, board) == Play(Tile(6, 5), Side.HEAD, 1)

    def test_opens_on_empty_board(self) -> None:
        bot = DominoBot(0, "basic")
        hand = [Tile(6, 6), Tile(4, 5), Tile(3, 2)]
        result = bot.make_move(hand, BoardState.empty())
        assert result == Play(Tile(6, 6), Side.CENTER, 0)

    def test_passes(self) -> None:
        bot = DominoBot(0)
        board = BoardState(
            plays=(Play(Tile(6, 6), Side.HEAD, 0), Play(Tile(6, 5), Side.TAIL, 1))
        )
        assert bot.make_move([Tile(1, 1), Tile(2, 2)], board) is None

    @pytest.mark.parametrize("tier", ["intermediate", "advanced"])
    def test_reserved_tier_fails_at_construction(self, tier: str) -> None:
        with pytest.raises(StrategyNotImplemented):
            DominoBot(0, tier)

    def test_unknown_tier_fails_at_construction(self) -> None:
        with pytest.raises(InvalidConfiguration):
            DominoBot(0, "grandmaster")

    def test_set_difficulty(self, caplog: pytest.LogCaptureFixture) -> None:
        bot = DominoBot(3)
        with caplog.at_level(logging.INFO, logger="domino_bot.core.bot"):
            bot.set_difficulty("BASIC")
        assert bot.difficulty is Difficulty.BASIC
        assert "Player 3 difficulty set to basic" in caplog.text

    def test_rejected_difficulty_keeps_strategy(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        bot = DominoBot(2)
        with caplog.at_level(logging.WARNING, logger="domino_bot.core.bot"):
            with pytest.raises(StrategyNotImplemented):
                bot.set_difficulty(Difficulty.INTERMEDIATE)
        assert bot.difficulty is Difficulty.BASIC
        assert "keeps basic difficulty" in caplog.text
        board = BoardState(plays=(Play(Tile(6, 6), Side.HEAD, 0),))
        assert bot.make_move([Tile(6, 1)], board) == Play(Tile(6, 1), Side.HEAD, 1)

    def test_repr(self) -> None:
        assert repr(DominoBot(4)) == "DominoBot(player_id=4, difficulty='basic')"
