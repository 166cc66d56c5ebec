"""
termsnake: a terminal snake game.
"""

__version__ = "1.0.0"
