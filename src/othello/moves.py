"""
Legality and capture rules

Key idea: from the square a disc gets placed on, walk along each of the 8 directions (raycasting).
Opponent discs are collected until the walk hits
* one of your own discs: the collected discs are 'bracketed' and get flipped.
* an empty square or the edge of the board: nothing in this direction gets flipped.

All functions are pure (except apply_move, which is the only place a move changes the board).
"""

from typing import Protocol

from src.core.exceptions import IllegalMoveError
from src.othello.player import Player
from src.othello.square import DIRECTIONS, Square, Vector, all_squares

# a move is just the square where the new disc goes
Move = Square


class Board(Protocol):
    """Just the parts the rules need"""

    def disc(self, square: Square) -> Player | None: ...
    def place_disc(self, square: Square, player: Player) -> None: ...


def bracketed_run(
    board: Board, square: Square, player: Player, direction: Vector
) -> list[Square]:
    """
    The run of opponent discs starting next to `square` in one direction.
    ----

    Only returned if the run is non-empty AND closed off by a disc of `player`. Otherwise nothing is capturable here.
    """
    opponent = player.opponent
    run: list[Square] = []
    current = square.step(direction)
    while current.is_within_bounds():
        disc = board.disc(current)
        if disc == opponent:
            run.append(current)
        elif disc == player:
            return run
        else:
            # empty square: gap in the line
            return []
        current = current.step(direction)

    # ran off the board
    return []


def is_legal(board: Board, square: Square, player: Player) -> bool:
    """A move is legal if at least one direction brackets opponent discs. Stops at the first direction that does."""
    if board.disc(square) is not None:
        return False
    return any(bracketed_run(board, square, player, d) for d in DIRECTIONS)


def captures_for(board: Board, square: Square, player: Player) -> list[Square]:
    """All discs that flip when `player` places a disc on `square` (every bracketing direction combined)."""
    if board.disc(square) is not None:
        return []

    captures: list[Square] = []
    for direction in DIRECTIONS:
        captures.extend(bracketed_run(board, square, player, direction))
    return captures


def legal_moves(board: Board, player: Player) -> list[Move]:
    """Scan the board row by row. The order is used to break ties when the automated player chooses."""
    return [square for square in all_squares() if is_legal(board, square, player)]


def has_legal_move(board: Board, player: Player) -> bool:
    return any(is_legal(board, square, player) for square in all_squares())


def apply_move(board: Board, square: Square, player: Player) -> list[Square]:
    """
    Place the disc and flip everything it captures.
    ---

    NOTE the capture set is computed BEFORE placing the disc, and legality is checked before anything on the board changes.
    Returns the flipped squares.
    """
    captures = captures_for(board, square, player)
    if not captures:
        raise IllegalMoveError(
            f"{player.name.lower()} cannot play {square.to_algebraic()}: "
            "occupied or no opponent discs bracketed."
        )

    board.place_disc(square, player)
    for captured in captures:
        board.place_disc(captured, player)
    return captures
