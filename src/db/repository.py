"""Protocol repository (the in-memory version is the only one for now, since a game does not outlive the process)"""

from typing import Protocol

from src.core.models import GameModel


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    def get_game(self) -> GameModel | None:
        """Get the game, if a record exists."""
        ...

    def save_game(self, game: GameModel) -> GameModel:
        """Store the game (create or overwrite) and return the stored data."""
        ...
