#!/usr/bin/env python3
"""
Reset the persisted high score.

Deletes the high score file so the next game starts from 0.

Usage:
    python -m termsnake.cli.reset_high_score [--confirm]
"""

import argparse
import sys
from typing import List, Optional

from dotenv import load_dotenv

from termsnake.data_access import HighScoreRepository


def reset_high_score(repository: HighScoreRepository, confirm: bool = False) -> bool:
    """
    Remove the high score file.

    Args:
        repository: where the score lives
        confirm: If True, skip confirmation prompt

    Returns:
        True if the reset went through (including when there was nothing to delete)
    """
    current = repository.load_high_score()

    if not confirm:
        print(f"High score file: {repository.path}")
        print(f"Current high score: {current}")
        response = input("\nType 'RESET' to confirm: ")
        if response != 'RESET':
            print("Reset cancelled")
            return False

    try:
        removed = repository.reset()
    except OSError as e:
        print(f"Could not remove {repository.path}: {e}", file=sys.stderr)
        return False

    if removed:
        print(f"High score {current} cleared")
    else:
        print("No high score saved yet")
    return True


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Reset the termsnake high score.")
    parser.add_argument(
        '--confirm',
        action='store_true',
        help='Skip confirmation prompt'
    )
    args = parser.parse_args(argv)

    load_dotenv()

    success = reset_high_score(HighScoreRepository(), confirm=args.confirm)
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
