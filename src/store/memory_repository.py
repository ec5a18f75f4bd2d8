"""Implementation of (Game)Repository that keeps everything in process memory."""

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator
from uuid import UUID

from src.core.exceptions import GameNotFoundError, RepositoryError
from src.core.models import GameModel

logger = logging.getLogger(__name__)


@dataclass
class _GameRecord:
    game: GameModel
    lock: threading.RLock = field(default_factory=threading.RLock)
    deleted: bool = False


class InMemoryGameRepository:
    """
    Thread-safe storage of games by ID.
    ----

    * one lock guards the mapping of IDs to records (insert, lookup, removal)
    * every record has its own lock, so moves on different games never wait for each other
    * the mapping lock is never held while waiting for a record lock (always record lock first, then mapping lock)

    Records hold immutable GameModel snapshots, so a reader either sees the state before or after a move.
    """

    def __init__(self) -> None:
        self._games: dict[UUID, _GameRecord] = {}
        self._lock = threading.Lock()

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        record = self._fetch_record(game_id)
        if record is None:
            return None
        with record.lock:
            return None if record.deleted else record.game

    def list_games(self) -> list[GameModel]:
        """All games currently stored."""
        with self._lock:
            records = list(self._games.values())
        games: list[GameModel] = []
        for record in records:
            with record.lock:
                if not record.deleted:
                    games.append(record.game)
        return games

    def create_game(self, game: GameModel) -> GameModel:
        """Store new game and return the stored data."""
        with self._lock:
            if game.id in self._games:
                raise RepositoryError(f"Game with id={game.id} already exists.")
            self._games[game.id] = _GameRecord(game)
        logger.debug("Stored new game %s", game.id)
        return game

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Replace an existing record."""
        record = self._fetch_record(game_id)
        if record is None:
            return None
        with record.lock:
            if record.deleted:
                return None
            record.game = game
        return game

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record. Waits for a move in progress on that game to finish."""
        record = self._fetch_record(game_id)
        if record is None:
            return None
        with record.lock:
            if record.deleted:
                return None
            with self._lock:
                del self._games[game_id]
            record.deleted = True
        logger.debug("Removed game %s", game_id)
        return record.game

    @contextmanager
    def game_lock(self, game_id: UUID) -> Iterator[GameModel]:
        """
        Hold the record's lock for a whole read-validate-apply-write sequence.
        No other move, read or deletion of this game gets through until the block exits.
        """
        record = self._fetch_record(game_id)
        if record is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        with record.lock:
            # deleted while we were waiting for the lock
            if record.deleted:
                raise GameNotFoundError(f"Game with {game_id=} not found.")
            yield record.game

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)

    def _fetch_record(self, game_id: UUID) -> _GameRecord | None:
        with self._lock:
            return self._games.get(game_id)
