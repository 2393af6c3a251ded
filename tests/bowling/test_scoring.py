"""Unit tests for src/bowling/scoring.py"""

import pytest

from src.bowling.scoring import (
    compute_score,
    frame_kind,
    frame_points_at,
    is_spare,
    is_strike,
    pins_at,
    spare_bonus_for,
    strike_bonus_for,
)
from src.core.shared_types import FrameKind


# -- FULL GAMES --
@pytest.mark.parametrize(
    "throws, expected",
    [
        ([0] * 20, 0),  # gutter game
        ([1] * 20, 20),  # all ones
        ([5, 5] + [0] * 18, 10),  # one spare, bonus throw knocked down nothing
        ([5, 5, 3] + [0] * 17, 16),  # one spare, bonus of 3 counted twice
        ([10, 3, 4] + [0] * 16, 24),  # one strike
        ([10] * 12, 300),  # perfect game
        ([5] * 21, 150),  # all spares, 5 on the bonus throw
        ([9, 0] * 10, 90),  # all nines
        ([0] * 18 + [10, 10, 10], 30),  # strikes only in the tenth frame
        ([0] * 18 + [7, 3, 5], 15),  # spare in the tenth frame
        ([10, 10, 10, 0, 0] + [0] * 14, 60),  # turkey
    ],
)
def test_complete_games(throws: list[int], expected: int) -> None:
    assert compute_score(throws) == expected


def test_tenth_frame_bonus_throw_not_counted_as_frame() -> None:
    """After an open tenth frame, anything in the 21st slot is ignored."""
    throws = [0] * 18 + [3, 4, 9]
    assert compute_score(throws) == 7


# -- PARTIAL GAMES --
def test_single_throw() -> None:
    """Look-ahead past the recorded throws reads zeros."""
    assert compute_score([7]) == 7
    assert compute_score([7] + [0] * 20) == 7


def test_empty_game() -> None:
    assert compute_score([]) == 0


def test_partial_strike_counts_what_is_known() -> None:
    assert compute_score([10]) == 10
    assert compute_score([10, 3]) == 16


def test_partial_spare_counts_what_is_known() -> None:
    assert compute_score([6, 4]) == 10
    assert compute_score([6, 4, 2]) == 14


def test_compute_score_does_not_modify_throws() -> None:
    throws = [10, 3, 4]
    first = compute_score(throws)
    second = compute_score(throws)
    assert first == second == 24
    assert throws == [10, 3, 4]


# -- HELPERS --
def test_pins_at_out_of_range_is_zero() -> None:
    throws = [4, 5]
    assert pins_at(throws, 1) == 5
    assert pins_at(throws, 2) == 0
    assert pins_at(throws, 30) == 0


def test_strike_and_spare_detection() -> None:
    throws = [10, 4, 6, 3, 2]
    assert is_strike(throws, 0)
    assert not is_spare(throws, 0)
    assert is_spare(throws, 1)
    assert not is_strike(throws, 1)
    assert not is_spare(throws, 3)


def test_bonus_computations() -> None:
    throws = [10, 4, 6, 3, 2]
    assert strike_bonus_for(throws, 0) == 20
    assert spare_bonus_for(throws, 1) == 13
    assert frame_points_at(throws, 3) == 5


@pytest.mark.parametrize(
    "throws, expected",
    [
        ([10, 0], FrameKind.STRIKE),
        ([0, 10], FrameKind.SPARE),
        ([3, 7], FrameKind.SPARE),
        ([3, 6], FrameKind.OPEN),
        ([], FrameKind.OPEN),
    ],
)
def test_frame_kind(throws: list[int], expected: FrameKind) -> None:
    assert frame_kind(throws, 0) == expected
