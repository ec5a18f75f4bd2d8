"""Unit tests for src/store/sign_registry.py"""

from uuid import uuid4

import pytest

from src.core.exceptions import GameStateError, RepositoryError
from src.core.shared_types import Sign
from src.store.sign_registry import SignRegistry


def test_register_and_look_up(signs: SignRegistry) -> None:
    game_id = uuid4()
    signs.register(game_id, Sign.O)
    assert game_id in signs
    assert signs.sign_for(game_id) == Sign.O


def test_sign_is_written_once(signs: SignRegistry) -> None:
    game_id = uuid4()
    signs.register(game_id, Sign.X)
    with pytest.raises(RepositoryError):
        signs.register(game_id, Sign.O)
    assert signs.sign_for(game_id) == Sign.X


def test_missing_sign_is_an_error(signs: SignRegistry) -> None:
    with pytest.raises(GameStateError):
        _ = signs.sign_for(uuid4())


def test_remove(signs: SignRegistry) -> None:
    game_id = uuid4()
    signs.register(game_id, Sign.X)
    assert signs.remove(game_id) == Sign.X
    assert game_id not in signs
    assert signs.remove(game_id) is None


def test_independent_registries() -> None:
    game_id = uuid4()
    first = SignRegistry()
    second = SignRegistry()
    first.register(game_id, Sign.X)
    assert game_id not in second
