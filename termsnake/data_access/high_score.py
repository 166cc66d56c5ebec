"""
High score persistence.

The high score is a single integer stored as text in a file under the
player's home directory. Every failure is recovered locally: a missing or
unreadable file loads as 0 and a failed write is skipped.
"""

import logging
import os
import pwd
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

SCORE_FILENAME = '.tsnake_score'


def get_score_path() -> Path:
    """
    Determine the high score file location based on environment.

    Returns:
        Path to the high score file.
        - TSNAKE_SCORE_PATH if set
        - $HOME/.tsnake_score otherwise
        - the passwd home directory, then /tmp, when HOME is unset
    """
    override = os.getenv('TSNAKE_SCORE_PATH', '').strip()
    if override:
        return Path(override).expanduser()

    home = os.getenv('HOME')
    if not home:
        try:
            home = pwd.getpwuid(os.getuid()).pw_dir
        except KeyError:
            home = '/tmp'
    return Path(home) / SCORE_FILENAME


class HighScoreRepository:
    """
    Load and save the persisted high score.

    Attributes:
        path: file holding the score; resolved from the environment when omitted
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else get_score_path()

    def load_high_score(self) -> int:
        """Return the stored high score, or 0 if absent or unreadable."""
        try:
            text = self.path.read_text(encoding='utf-8')
        except FileNotFoundError:
            return 0
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read high score from %s: %s", self.path, e)
            return 0

        try:
            value = int(text.split()[0])
        except (IndexError, ValueError):
            logger.warning("Ignoring malformed high score file %s", self.path)
            return 0
        return max(value, 0)

    def save_high_score(self, score: int) -> bool:
        """
        Write the score if it beats the stored one.

        Returns:
            True if the file was written, False otherwise.
        """
        if score <= self.load_high_score():
            return False

        try:
            self.path.write_text(f"{score}\n", encoding='utf-8')
        except OSError as e:
            logger.warning("Could not save high score to %s: %s", self.path, e)
            return False

        logger.info("Saved new high score %d to %s", score, self.path)
        return True

    def reset(self) -> bool:
        """Delete the high score file. Returns True if a file was removed."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        return True
