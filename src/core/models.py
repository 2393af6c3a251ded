"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
The API layer (higher) and the domain/repository layers (lower) use the model defined here to send to/receive from the Service.
"""

from dataclasses import dataclass, field


@dataclass
class GameModel:
    """Transport-safe representation of a bowling game used between Service, Repository, and Game layers."""

    throws: list[int] = field(default_factory=list)
    next_index: int = 0
