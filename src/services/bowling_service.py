"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from threading import Lock

from src.api.models import RollRequest, ScoreResponse
from src.bowling.game import Game
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


class BowlingService:
    """Orchestration of layers for the bowling game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository
        # Request handlers run in a thread pool and all share the one game.
        # Every read/modify/write of the game record happens while holding this lock.
        self._lock = Lock()

        if self.repo.get_game() is None:
            self.repo.save_game(Game.new_game().to_model())
            logger.info("Started a new bowling game.")

    # -- API routes logic ---
    def roll(self, request: RollRequest) -> ScoreResponse:
        """Record a throw, and return the score including that throw."""
        with self._lock:
            # Retrieve persisted GameModel from repository
            game = Game.from_model(self._fetch_game())

            # Attempt the throw
            game.roll(request.pins)

            # store in repository
            self.repo.save_game(game.to_model())
            score = game.score()

        logger.debug(
            "Recorded throw %d: %d pins, score is now %d",
            game.next_index,
            request.pins,
            score,
        )
        return ScoreResponse(score=score)

    def get_score(self) -> ScoreResponse:
        """Current score of the game (partial, if the game is still going)."""
        with self._lock:
            game = Game.from_model(self._fetch_game())
            score = game.score()

        logger.debug("Score requested after %d throws: %d", game.next_index, score)
        return ScoreResponse(score=score)

    # -- Internal helpers --
    def _fetch_game(self) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game()
        if game_model is None:
            raise RepositoryError("No bowling game found.")
        return game_model
