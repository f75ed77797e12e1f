"""
Custom exceptions shared by all layers.

Every error raised on purpose by this application derives from GameError, so a caller can catch the whole family at once.
"""


class GameError(Exception):
    """Top-level exception for anything that went wrong while handling a game."""


# --- Programming errors (should never reach a user) ---
class InvalidCoordinateError(GameError):
    """Row or column outside of the board. The board never clamps or wraps."""


class NoLegalMovesError(GameError):
    """Asked the automated player to pick a move while it has none. The turn logic should have passed instead."""


# --- Expected, recoverable errors ---
class IllegalMoveError(GameError):
    """Occupied cell, or no bracketed run of opponent discs in any direction."""


class NotYourTurnError(GameError):
    """Move submitted for the player who is not on turn, or after the game ended."""


class GameStateError(GameError):
    """Game data that cannot be interpreted (unknown status, unknown action, ...)."""


class InvalidPositionError(GameError):
    """Board / position notation that cannot be parsed."""


# --- Outer layers ---
class RepositoryError(GameError):
    """Record could not be found or stored."""


class InvalidRequestError(GameError):
    """Request data failed validation."""
