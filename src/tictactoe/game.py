"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for the rules of a single game: validating the starting board, assigning signs,
accepting the human's move, answering with the opponent's move and detecting the end of the game.

The Game does not know which sign belongs to the human player. The service keeps that in the SignRegistry
and passes it in on every move.
"""

from dataclasses import dataclass
from typing import Optional, Self
from uuid import UUID, uuid4

from src.core.exceptions import (
    GameStateError,
    InvalidBoardError,
    InvalidStartingBoardError,
    MoveRejectedError,
)
from src.core.models import GameModel
from src.core.shared_types import EMPTY, WINNING_STATUS, Sign, Status
from src.tictactoe.board import Board
from src.tictactoe.opponent import RandomSource, random_move


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    id: UUID
    board: Board
    status: Status

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Rebuild a Game from a stored snapshot. A stored snapshot that does not parse means the store is corrupt."""
        if model.status not in Status.__members__:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join(status.value for status in Status)}"
            )
        try:
            board = Board.from_string(model.board)
        except InvalidBoardError as exc:
            raise GameStateError(f"Stored board of game {model.id} is corrupt.") from exc
        return cls(id=model.id, board=board, status=Status[model.status])

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            id=self.id,
            board=self.board.to_string(),
            status=self.status.value,
        )

    @classmethod
    def new_game(cls, board: str, rng: RandomSource) -> tuple[Self, Sign]:
        """
        Start a game from the board submitted by the human. Returns the game and the sign the human plays with.
        -----

        * empty board --> a random sign is placed on a random cell, the human plays the other sign.
        * one X --> human plays X, the opponent answers with an O.
        * one O --> human plays O, the opponent answers with an X.
        """
        starting_board = Board.from_string(board)
        x_count = starting_board.count(Sign.X)
        o_count = starting_board.count(Sign.O)
        if x_count > 1 or o_count > 1 or (x_count == 1 and o_count == 1):
            raise InvalidStartingBoardError(
                f"Cannot start a game from {board!r}: place at most a single X or a single O."
            )

        if x_count == 0 and o_count == 0:
            first_sign = rng.choice([Sign.X, Sign.O])
            random_move(starting_board, first_sign, rng)
            human_sign = first_sign.opponent
        else:
            human_sign = Sign.X if x_count == 1 else Sign.O
            random_move(starting_board, human_sign.opponent, rng)

        game = cls(id=uuid4(), board=starting_board, status=Status.RUNNING)
        return game, human_sign

    @property
    def is_running(self) -> bool:
        return self.status == Status.RUNNING

    @property
    def winner(self) -> Optional[Sign]:
        if self.status == Status.X_WON:
            return Sign.X
        if self.status == Status.O_WON:
            return Sign.O
        return None

    def check_win(self) -> bool:
        """
        Look for a completed line (rows, columns, diagonals), then for a full board.
        Updates the status when the game has ended.

        Returns True if the game is over (a DRAW counts), False if it is still running.
        """
        winning_sign = self.board.winning_sign()
        if winning_sign is not None:
            self._change_status(WINNING_STATUS[winning_sign])
            return True

        if self.board.is_full():
            self._change_status(Status.DRAW)
            return True

        return False

    def make_move(self, new_board: str, human_sign: Sign, rng: RandomSource) -> bool:
        """
        Attempt the human's move, then answer it.
        -----

        1. the game must still be running
        2. the new board must be a well-formed board
        3. exactly one cell differs: a previously empty cell now holding the human's sign
        4. replace the board, check for the end of the game
        5. still running? the opponent places its sign on a random empty cell, check again

        Any rejection raises MoveRejectedError and leaves the game untouched.
        """
        if human_sign is None:
            raise GameStateError(f"No sign registered for the human player of game {self.id}.")

        # make sure the game is (still) running
        if not self.is_running:
            raise MoveRejectedError(f"Game is not running. status: {self.status}")

        try:
            proposed = Board.from_string(new_board)
        except InvalidBoardError as exc:
            raise MoveRejectedError(str(exc)) from exc

        self._assert_single_placement(proposed, human_sign)

        self.board = proposed
        if not self.check_win():
            random_move(self.board, human_sign.opponent, rng)
            self.check_win()
        return True

    # -- PRIVATE HELPERS ---
    def _assert_single_placement(self, proposed: Board, sign: Sign) -> None:
        """Every cell keeps its symbol, except for one empty cell that now holds `sign`."""
        changed = self.board.changed_cells(proposed)
        if len(changed) != 1:
            raise MoveRejectedError(
                f"Exactly one cell must change, got {len(changed)}: {self.board.to_string()!r} -> {proposed.to_string()!r}"
            )
        index = changed[0]
        if self.board.cell(index) != EMPTY:
            raise MoveRejectedError(f"Cell {index} is already taken.")
        if proposed.cell(index) != sign:
            raise MoveRejectedError(
                f"You play with {sign}, not {proposed.cell(index)} (cell {index})."
            )

    def _change_status(self, new_status: Status) -> None:
        self.status = new_status
