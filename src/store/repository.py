"""Protocol repository (the in-memory store implements it, anything shared between processes could later too)"""

from contextlib import AbstractContextManager
from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        ...

    def list_games(self) -> list[GameModel]:
        """All games currently stored."""
        ...

    def create_game(self, game: GameModel) -> GameModel:
        """Store new game and return the stored data."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Replace an existing record."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record."""
        ...

    def game_lock(self, game_id: UUID) -> AbstractContextManager[GameModel]:
        """Exclusive access to one game's record for a read-modify-write sequence."""
        ...
