"""Orchestration of communication from API router to business logic and storage layers (and the reverse direction)."""

import logging
import random
from typing import Optional
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
)
from src.core.exceptions import GameNotFoundError
from src.core.models import GameModel
from src.core.shared_types import Status
from src.store.repository import GameRepository
from src.store.sign_registry import SignRegistry
from src.tictactoe.game import Game
from src.tictactoe.opponent import RandomSource

logger = logging.getLogger(__name__)


class TicTacToeService:
    """Orchestration of layers for tic-tac-toe games against the random opponent."""

    def __init__(
        self,
        repository: GameRepository,
        signs: SignRegistry,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.repo = repository
        self.signs = signs
        self.rng = rng if rng is not None else random.SystemRandom()

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Human submitted a starting board (empty, or with their first sign placed)."""

        # Validate the board, assign signs and let the opponent answer
        new_game, human_sign = Game.new_game(request.board, self.rng)

        # The ID is brand new: register the sign before anyone can look the game up
        self.signs.register(new_game.id, human_sign)
        stored_game = self.repo.create_game(new_game.to_model())

        logger.info(
            "Created game %s: human plays %s, board %s",
            new_game.id,
            human_sign,
            stored_game.board,
        )
        return self._create_game_response(stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state."""
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(game_model)

    def list_games(self) -> list[GameResponse]:
        """Show all stored games."""
        return [self._create_game_response(model) for model in self.repo.list_games()]

    def make_move(self, request: MoveRequest) -> GameResponse:
        """
        Make a move attempt.
        ----

        The game's record stays locked from reading the current board until the opponent's answer is written back,
        so two moves on the same game can never interleave.
        """
        with self.repo.game_lock(request.game_id) as stored_model:
            human_sign = self.signs.sign_for(request.game_id)

            # Create a new Game instance from the stored GameModel
            game = Game.from_model(stored_model)

            # Attempt the move (raises MoveRejectedError, leaving the record untouched)
            game.make_move(request.board, human_sign, self.rng)

            # Capture updated state in GameModel and store it
            after_move = game.to_model()
            self.repo.update_game(request.game_id, after_move)

        logger.info("Move accepted in game %s: %s", request.game_id, after_move.board)
        if game.status != Status.RUNNING:
            logger.info("Game %s finished: %s", request.game_id, game.status)
        return self._create_game_response(after_move)

    def delete_game(self, request: DeleteGameRequest) -> GameResponse:
        """Handle a request to delete a Game record. The human's sign goes with it."""
        deleted = self.repo.delete_game(request.game_id)
        if deleted is None:
            raise GameNotFoundError(f"Game with game_id={request.game_id} not found.")
        self.signs.remove(request.game_id)
        logger.info("Deleted game %s", request.game_id)
        return self._create_game_response(deleted)

    # -- Internal helpers --
    def _create_game_response(self, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse."""
        return GameResponse(id=model.id, board=model.board, status=Status(model.status))

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return game_model
