"""
Data access layer for termsnake.

The only persisted value is the high score; see high_score.py.
"""

from .high_score import HighScoreRepository, get_score_path, SCORE_FILENAME

__all__ = [
    'HighScoreRepository',
    'get_score_path',
    'SCORE_FILENAME',
]
