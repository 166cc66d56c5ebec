"""
Difficulty progression: score to tick delay and speed level.
"""

from .constants import INITIAL_DELAY_MS, SPEED_STEP_MS, MIN_DELAY_MS, LEVEL_SIZE


def compute_delay(score: int) -> int:
    """Milliseconds per tick for a score; one step faster per completed level, floor-clamped."""
    completed_levels = score // LEVEL_SIZE
    return max(MIN_DELAY_MS, INITIAL_DELAY_MS - completed_levels * SPEED_STEP_MS)


def speed_level(score: int) -> int:
    return score // LEVEL_SIZE + 1


def level_progress(score: int) -> int:
    """Points collected towards the next level."""
    return score % LEVEL_SIZE
