"""The Game board: 9 cells, read row by row from the top-left corner."""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import InvalidBoardError
from src.core.shared_types import EMPTY, Sign

BOARD_SIZE = 9
VALID_SYMBOLS = frozenset({Sign.X.value, Sign.O.value, EMPTY})

# Indices of the cells forming a line, in the order they are evaluated.
ROWS = ((0, 1, 2), (3, 4, 5), (6, 7, 8))
COLUMNS = ((0, 3, 6), (1, 4, 7), (2, 5, 8))
DIAGONALS = ((0, 4, 8), (2, 4, 6))
LINES = ROWS + COLUMNS + DIAGONALS


@dataclass
class Board:
    cells: list[str]

    @classmethod
    def from_string(cls, board_str: str) -> Self:
        """Parse the flat representation, ex. 'X---O----'

        Index 0 is the top-left cell, index 8 the bottom-right one.
        """
        if len(board_str) != BOARD_SIZE:
            raise InvalidBoardError(
                f"Board must contain exactly {BOARD_SIZE} cells, got {len(board_str)}: {board_str!r}"
            )
        illegal = sorted(set(board_str) - VALID_SYMBOLS)
        if illegal:
            raise InvalidBoardError(
                f"Board contains illegal symbol(s) {illegal}. Use only {', '.join(sorted(VALID_SYMBOLS))}."
            )
        return cls(list(board_str))

    @classmethod
    def empty(cls) -> Self:
        return cls([EMPTY] * BOARD_SIZE)

    def to_string(self) -> str:
        return "".join(self.cells)

    def cell(self, index: int) -> str:
        return self.cells[index]

    def count(self, symbol: str) -> int:
        return self.cells.count(symbol)

    def empty_cells(self) -> list[int]:
        return [index for index, symbol in enumerate(self.cells) if symbol == EMPTY]

    def is_full(self) -> bool:
        return EMPTY not in self.cells

    def place(self, index: int, sign: Sign) -> None:
        """Does NOT check whether the cell is empty. Callers pick from empty_cells()."""
        self.cells[index] = sign.value

    def winning_sign(self) -> Optional[Sign]:
        """First completed line (rows, then columns, then diagonals) decides the winner."""
        for a, b, c in LINES:
            symbol = self.cells[a]
            if symbol != EMPTY and symbol == self.cells[b] == self.cells[c]:
                return Sign(symbol)
        return None

    def changed_cells(self, other: "Board") -> list[int]:
        """Indices where the two boards differ."""
        return [
            index
            for index, (mine, theirs) in enumerate(zip(self.cells, other.cells))
            if mine != theirs
        ]
