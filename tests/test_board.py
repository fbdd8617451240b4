"""Tests for the board model."""

from __future__ import annotations

import pytest

from domino_bot.core.board import BoardState, Play, Side
from domino_bot.core.tiles import Tile


class TestPlay:
    """Tests for the Play value type."""

    def test_fields(self) -> None:
        p = Play(Tile(6, 5), Side.HEAD, 1)
        assert p.tile == Tile(6, 5)
        assert p.side is Side.HEAD
        assert p.index == 1

    def test_equality_by_value(self) -> None:
        assert Play(Tile(1, 2), Side.TAIL, 3) == Play(Tile(1, 2), Side.TAIL, 3)

    def test_is_frozen(self) -> None:
        p = Play(Tile(1, 2), Side.TAIL, 3)
        with pytest.raises(AttributeError):
            p.index = 4  # type: ignore[misc]


class TestBoardState:
    """Tests for BoardState."""

    def test_empty(self) -> None:
        board = BoardState.empty()
        assert board.is_empty()
        assert len(board) == 0
        assert board.passed == frozenset()

    def test_plays_keep_chain_order(self) -> None:
        first = Play(Tile(6, 6), Side.CENTER, 0)
        second = Play(Tile(6, 5), Side.TAIL, 1)
        board = BoardState(plays=(first, second))
        assert board.plays == (first, second)
        assert len(board) == 2
        assert not board.is_empty()

    def test_passed_values_recorded(self) -> None:
        board = BoardState(passed=frozenset({2, 5}))
        assert board.passed == frozenset({2, 5})

    def test_is_frozen(self) -> None:
        board = BoardState.empty()
        with pytest.raises(AttributeError):
            board.plays = ()  # type: ignore[misc]
