"""
The automated opponent. No lookahead: every legal cell is equally likely.

The source of randomness is injected, so tests can pin it down with a seeded `random.Random`.
"""

from typing import Protocol, Sequence, TypeVar

from src.core.exceptions import GameStateError
from src.core.shared_types import Sign
from src.tictactoe.board import Board

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that picks an element uniformly. `random.Random` and `random.SystemRandom` both qualify."""

    def choice(self, seq: Sequence[T]) -> T: ...


def random_move(board: Board, sign: Sign, rng: RandomSource) -> Board:
    """Place `sign` on a uniformly chosen empty cell and return the updated board."""
    empty_cells = board.empty_cells()
    if not empty_cells:
        # a game that is still running always has an empty cell
        raise GameStateError(
            f"Opponent cannot move on a full board: {board.to_string()!r}"
        )
    board.place(rng.choice(empty_cells), sign)
    return board
