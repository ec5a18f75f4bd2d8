"""Unit tests for src/tictactoe/opponent.py"""

import random
from typing import Callable

import pytest

from src.core.exceptions import GameStateError
from src.core.shared_types import Sign
from src.tictactoe.board import Board
from src.tictactoe.opponent import random_move


def test_places_on_picked_cell(scripted: Callable) -> None:
    board = Board.from_string("X---O----")
    updated = random_move(board, Sign.O, scripted(7))
    assert updated.to_string() == "X---O--O-"


@pytest.mark.parametrize("seed", range(20))
def test_only_empty_cells_get_picked(seed: int) -> None:
    board_str = "XO-X-O-XO"
    updated = random_move(Board.from_string(board_str), Sign.X, random.Random(seed))

    changed = Board.from_string(board_str).changed_cells(updated)
    assert len(changed) == 1
    assert changed[0] in (2, 4, 6)
    assert updated.cell(changed[0]) == Sign.X


def test_every_empty_cell_can_be_picked() -> None:
    """Uniform choice: with enough draws every empty cell shows up."""
    rng = random.Random(7)
    picked = set()
    for _ in range(200):
        board = random_move(Board.from_string("X-O-X-O--"), Sign.O, rng)
        picked.update(Board.from_string("X-O-X-O--").changed_cells(board))
    assert picked == {1, 3, 5, 7, 8}


def test_full_board_is_an_error() -> None:
    with pytest.raises(GameStateError):
        _ = random_move(Board.from_string("XOXXOOOXX"), Sign.O, random.Random(0))
