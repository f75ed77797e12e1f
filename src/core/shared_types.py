"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    GAME_OVER = "game over"


class LastAction(StrEnum):
    """What happened on the most recent turn transition."""

    NONE = "none"
    MOVE = "move"
    PASS = "pass"


# --- NOTE the domain layer has its own Player enum (src/othello/player.py). Color is the name used at the boundaries (API / DB).
class Color(StrEnum):
    BLACK = "black"
    WHITE = "white"
