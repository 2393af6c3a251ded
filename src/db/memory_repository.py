"""Implementation of (Game)Repository keeping the single game in process memory"""

from copy import deepcopy

from src.core.models import GameModel


class InMemoryGameRepository:
    """Data stored on the instance. Copies go in and out, so the stored record only changes through save_game."""

    def __init__(self) -> None:
        self._game: GameModel | None = None

    def get_game(self) -> GameModel | None:
        """Get the game, if a record exists."""
        if self._game is None:
            return None
        return deepcopy(self._game)

    def save_game(self, game: GameModel) -> GameModel:
        """Store the game (create or overwrite) and return the stored data."""
        self._game = deepcopy(game)
        return deepcopy(self._game)
