"""Dependencies injected into the API routes"""

from functools import lru_cache

from src.db.memory_repository import InMemoryGameRepository
from src.services.bowling_service import BowlingService


@lru_cache
def get_service() -> BowlingService:
    """One game for the lifetime of the process: every request gets the same service (and repository)."""
    return BowlingService(InMemoryGameRepository())
