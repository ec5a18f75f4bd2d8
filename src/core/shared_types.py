"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    RUNNING = "RUNNING"
    X_WON = "X_WON"
    O_WON = "O_WON"
    DRAW = "DRAW"


class Sign(StrEnum):
    X = "X"
    O = "O"

    @property
    def opponent(self) -> "Sign":
        return Sign.O if self == Sign.X else Sign.X


# --- The empty cell is not a Sign. Boards are strings over {X, O, EMPTY}.
EMPTY = "-"

WINNING_STATUS: dict[Sign, Status] = {
    Sign.X: Status.X_WON,
    Sign.O: Status.O_WON,
}
