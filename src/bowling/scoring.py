"""
Score computation for a ten-pin bowling game.

Everything in here is a pure function over the sequence of throws (pins knocked down per throw).
A single cursor walks forward through the throws, one frame at a time:
    - strike: the frame uses 1 throw, and looks ahead at the next 2 throws for its bonus.
    - spare: the frame uses 2 throws, and looks ahead at the next 1 throw for its bonus.
    - open frame: the frame uses 2 throws, no bonus.

The extra throw(s) of the tenth frame never need special treatment: they only get picked up by the look-ahead.
"""

from collections.abc import Sequence

from src.core.shared_types import ALL_PINS, FRAMES_PER_GAME, FrameKind


def compute_score(throws: Sequence[int]) -> int:
    """
    Total score of the game after the given throws.
    ----
    Throws that were not made (yet) count as 0, so an unfinished game returns its partial score.
    """
    score = 0
    throw = 0
    for _ in range(FRAMES_PER_GAME):
        kind = frame_kind(throws, throw)
        if kind == FrameKind.STRIKE:
            score += strike_bonus_for(throws, throw)
            throw += 1
        elif kind == FrameKind.SPARE:
            score += spare_bonus_for(throws, throw)
            throw += 2
        else:
            score += frame_points_at(throws, throw)
            throw += 2
    return score


def frame_kind(throws: Sequence[int], throw: int) -> FrameKind:
    """Classify the frame starting at the given throw."""
    if is_strike(throws, throw):
        return FrameKind.STRIKE
    if is_spare(throws, throw):
        return FrameKind.SPARE
    return FrameKind.OPEN


def is_strike(throws: Sequence[int], throw: int) -> bool:
    """A strike is knocking down all pins with the first throw of a frame."""
    return pins_at(throws, throw) == ALL_PINS


def is_spare(throws: Sequence[int], throw: int) -> bool:
    """A spare is knocking down all pins with both throws of a frame."""
    return frame_points_at(throws, throw) == ALL_PINS


def strike_bonus_for(throws: Sequence[int], throw: int) -> int:
    return ALL_PINS + frame_points_at(throws, throw + 1)


def spare_bonus_for(throws: Sequence[int], throw: int) -> int:
    return ALL_PINS + pins_at(throws, throw + 2)


def frame_points_at(throws: Sequence[int], throw: int) -> int:
    """Pins knocked down by the given throw and the one after it."""
    return pins_at(throws, throw) + pins_at(throws, throw + 1)


def pins_at(throws: Sequence[int], throw: int) -> int:
    # Throws not made (yet) knocked down nothing
    if 0 <= throw < len(throws):
        return throws[throw]
    return 0
