"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

import random
from typing import Any, Callable, Iterator, Sequence

import pytest
from fastapi.testclient import TestClient

from src.core.config import Settings
from src.main import create_app
from src.services.tictactoe_service import TicTacToeService
from src.store.memory_repository import InMemoryGameRepository
from src.store.sign_registry import SignRegistry

TEST_BASE_URL = "http://testserver"


class ScriptedRandom:
    """
    Random source that plays back a fixed list of picks.
    Every pick must be one of the options the game offers, and running out of picks fails the test.
    """

    def __init__(self, *picks: Any) -> None:
        self._picks = list(picks)

    def choice(self, seq: Sequence[Any]) -> Any:
        if not self._picks:
            raise AssertionError(f"Unexpected random choice among {list(seq)!r}")
        pick = self._picks.pop(0)
        assert pick in seq, f"{pick!r} is not one of the options {list(seq)!r}"
        return pick

    @property
    def exhausted(self) -> bool:
        return not self._picks


@pytest.fixture
def scripted() -> Callable[..., ScriptedRandom]:
    """Build a ScriptedRandom: `scripted(Sign.X, 4)`"""
    return ScriptedRandom


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def repository() -> InMemoryGameRepository:
    return InMemoryGameRepository()


@pytest.fixture
def signs() -> SignRegistry:
    return SignRegistry()


@pytest.fixture
def service(
    repository: InMemoryGameRepository, signs: SignRegistry, seeded_rng: random.Random
) -> TicTacToeService:
    return TicTacToeService(repository, signs, seeded_rng)


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Fresh app (and therefore an empty store) for every test."""
    app = create_app(Settings(base_url=TEST_BASE_URL), rng=random.Random(42))
    with TestClient(app) as test_client:
        yield test_client
