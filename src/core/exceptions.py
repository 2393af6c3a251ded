"""Custom exceptions shared across layers."""


class GameError(Exception):
    """Top-level exception for anything going wrong while playing a game."""


class GameStateError(GameError):
    """Game data is not in a state that allows the requested action."""


class GameCompleteError(GameStateError):
    """All throw slots of the game have been used up."""


class RepositoryError(GameError):
    """Persistence layer could not provide the requested record."""
