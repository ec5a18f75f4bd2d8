"""Custom exceptions shared by all layers."""


class GameError(Exception):
    """Top-level exception for anything that goes wrong while refereeing a game."""


class InvalidBoardError(GameError):
    """Board has the wrong length or contains a symbol other than X, O or '-'."""


class InvalidStartingBoardError(GameError):
    """Legal symbols, but not a position a game can start from."""


class MoveRejectedError(GameError):
    """The proposed board is not a legal move for the human player."""


class GameStateError(GameError):
    """
    An internal invariant is broken (illegal symbol in a stored board, no sign registered for a game, ...).
    Not caused by the caller: should never be raised in normal flow.
    """


class RepositoryError(GameError):
    """Storage layer could not fulfill the request."""


class GameNotFoundError(RepositoryError):
    """No game is stored under the requested ID."""
