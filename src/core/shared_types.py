"""
Type definitions and constants used across layers
"""

from enum import StrEnum

# Number of pins standing at the start of a fresh frame
ALL_PINS = 10

FRAMES_PER_GAME = 10

# Nine frames of two throws, plus up to three in the tenth frame
MAX_THROWS_PER_GAME = 21


class FrameKind(StrEnum):
    STRIKE = "strike"
    SPARE = "spare"
    OPEN = "open"
