"""
Which sign the human plays with, per game.

Once both signs are on the board, the board alone cannot tell whose sign is whose, so it is recorded here when the game gets created.
"""

import logging
import threading
from uuid import UUID

from src.core.exceptions import GameStateError, RepositoryError
from src.core.shared_types import Sign

logger = logging.getLogger(__name__)


class SignRegistry:
    """Write-once mapping of game ID to the human player's sign."""

    def __init__(self) -> None:
        self._signs: dict[UUID, Sign] = {}
        self._lock = threading.Lock()

    def register(self, game_id: UUID, sign: Sign) -> None:
        with self._lock:
            if game_id in self._signs:
                raise RepositoryError(f"A sign is already registered for game {game_id}.")
            self._signs[game_id] = sign
        logger.debug("Human plays %s in game %s", sign, game_id)

    def sign_for(self, game_id: UUID) -> Sign:
        """Every stored game has a sign. A missing one means the registry and the store went out of sync."""
        with self._lock:
            sign = self._signs.get(game_id)
        if sign is None:
            raise GameStateError(f"No sign registered for game {game_id}.")
        return sign

    def remove(self, game_id: UUID) -> Sign | None:
        with self._lock:
            return self._signs.pop(game_id, None)

    def __contains__(self, game_id: object) -> bool:
        with self._lock:
            return game_id in self._signs
