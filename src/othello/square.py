"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase

from src.core.exceptions import InvalidCoordinateError

# Othello is always played on an 8x8 board
BOARD_SIZE = 8

Vector = tuple[int, int]

# (d_row, d_col) for the 8 compass directions
DIRECTIONS: tuple[Vector, ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


@dataclass(frozen=True, order=True)
class Square:
    """
    A (row, col) pair. Also used as the 'move' of a player: a move is nothing more than the square a disc gets placed on.

    NOTE: ordering compares row first, then column, which is the row-major scan order used everywhere.
    """

    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7). The letter is the column, the digit the row (row 1 on top)."""
        if len(sq) != 2 or not sq[0].isalpha() or not sq[1].isdigit():
            raise InvalidCoordinateError(f"Cannot interpret {sq!r} as a square.")
        square = cls(row=int(sq[1]) - 1, col=ord(sq[0].lower()) - ord("a"))
        square.assert_within_bounds()
        return square

    def to_algebraic(self) -> str:
        return f"{ascii_lowercase[self.col]}{self.row + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_SIZE) and (0 <= self.col < BOARD_SIZE)

    def assert_within_bounds(self) -> None:
        if not self.is_within_bounds():
            raise InvalidCoordinateError(
                f"Square ({self.row}, {self.col}) is outside of the {BOARD_SIZE}x{BOARD_SIZE} board."
            )

    def step(self, direction: Vector) -> Square:
        d_row, d_col = direction
        return Square(self.row + d_row, self.col + d_col)

    def is_corner(self) -> bool:
        return self in CORNERS


CORNERS: tuple[Square, ...] = (
    Square(0, 0),
    Square(0, BOARD_SIZE - 1),
    Square(BOARD_SIZE - 1, 0),
    Square(BOARD_SIZE - 1, BOARD_SIZE - 1),
)


def all_squares() -> list[Square]:
    """All squares, row by row"""
    return [Square(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)]
