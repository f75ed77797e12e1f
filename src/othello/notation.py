"""
Text encoding of a full position: the board plus the player to move.
----

<board rows><space><side to move>

* The board rows are described in the Board class (FEN-like: 'b', 'w' and digits for empty runs)
* The side to move is either "b" or "w"

ex) The standard opening position is
8/8/8/3wb3/3bw3/8/8/8 b
i.e. four discs in the centre and black to move.
"""

from src.core.exceptions import InvalidPositionError
from src.othello.board import Board
from src.othello.player import Player
from src.othello.square import BOARD_SIZE

STARTING_POSITION = "8/8/8/3wb3/3bw3/8/8/8 b"
VALID_ROW_CHARACTERS = set("bw12345678")


def is_valid_position(position: str) -> bool:
    """Check if the given string follows the position notation."""

    parts = position.split(" ")
    if len(parts) != 2:
        return False

    rows_str, side_to_move = parts
    if side_to_move not in ("b", "w"):
        return False

    rows = rows_str.split("/")
    if len(rows) != BOARD_SIZE:
        return False

    return all(_is_valid_row(row) for row in rows)


def _is_valid_row(row: str) -> bool:
    """Only known characters, and exactly BOARD_SIZE squares described."""
    if not row or any(character not in VALID_ROW_CHARACTERS for character in row):
        return False

    n_squares = sum(int(c) if c.isdigit() else 1 for c in row)
    return n_squares == BOARD_SIZE


def parse_position(position: str) -> tuple[Board, Player]:
    """Parse the position into a board and the player to move"""
    if not is_valid_position(position):
        raise InvalidPositionError(f"Invalid position notation: {position!r}")

    rows_str, side_to_move = position.split(" ")
    return Board.from_notation(rows_str), Player.from_notation(side_to_move)


def format_position(board: Board, player_to_move: Player) -> str:
    """reverse operation: write the position from the given board and player"""
    return f"{board.to_notation()} {player_to_move.to_notation()}"
