"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from src.api.deps import get_service
from src.bowling.game import Game
from src.db.memory_repository import InMemoryGameRepository
from src.main import app
from src.services.bowling_service import BowlingService


@pytest.fixture
def game() -> Game:
    """Fresh game, nothing thrown yet."""
    return Game.new_game()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """API client talking to its own game, so tests do not leak throws into each other."""
    service = BowlingService(InMemoryGameRepository())
    app.dependency_overrides[get_service] = lambda: service
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()
