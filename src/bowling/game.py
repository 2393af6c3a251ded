"""
The Game class is the entrypoint into the domain layer for the service layer.
It holds the throws of a single bowling game and knows how to record a new one.
Scoring itself lives in src/bowling/scoring.py.
"""

from dataclasses import dataclass, field
from typing import Self

from src.bowling.scoring import compute_score
from src.core.exceptions import GameCompleteError, GameStateError
from src.core.models import GameModel
from src.core.shared_types import MAX_THROWS_PER_GAME


def _empty_throws() -> list[int]:
    return [0] * MAX_THROWS_PER_GAME


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    throws: list[int] = field(default_factory=_empty_throws)
    next_index: int = 0

    @classmethod
    def new_game(cls) -> Self:
        """All throw slots empty, first throw still to be made."""
        return cls()

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if len(model.throws) > MAX_THROWS_PER_GAME:
            raise GameStateError(
                f"A game holds at most {MAX_THROWS_PER_GAME} throws, got {len(model.throws)}."
            )
        if not 0 <= model.next_index <= MAX_THROWS_PER_GAME:
            raise GameStateError(
                f"Invalid throw index: {model.next_index}. Must be between 0 and {MAX_THROWS_PER_GAME}."
            )

        # Unused slots are stored as zeros
        throws = list(model.throws) + [0] * (MAX_THROWS_PER_GAME - len(model.throws))
        return cls(throws=throws, next_index=model.next_index)

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(throws=list(self.throws), next_index=self.next_index)

    @property
    def is_complete(self) -> bool:
        """No more throw slots left to fill."""
        return self.next_index >= MAX_THROWS_PER_GAME

    def roll(self, pins: int) -> None:
        """
        Record the number of pins knocked down by the next throw.
        ----
        The pin count is taken as is: no check if it fits within 0-10, or with the pins still standing.
        """
        if self.is_complete:
            raise GameCompleteError(
                f"Game already complete: all {MAX_THROWS_PER_GAME} throws have been recorded."
            )
        self.throws[self.next_index] = pins
        self.next_index += 1

    def score(self) -> int:
        return compute_score(self.throws)
