"""The Game board holds which disc (if any) sits on each of the 64 squares."""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import InvalidPositionError
from src.othello.player import Player
from src.othello.square import BOARD_SIZE, Square, all_squares

Cell = Optional[Player]


@dataclass
class Board:
    cells: dict[Square, Cell]

    @classmethod
    def empty(cls) -> Self:
        return cls({square: None for square in all_squares()})

    @classmethod
    def starting_position(cls) -> Self:
        """The four discs in the centre: white on the main diagonal, black on the other one."""
        board = cls.empty()
        board.place_disc(Square(3, 3), Player.WHITE)
        board.place_disc(Square(3, 4), Player.BLACK)
        board.place_disc(Square(4, 3), Player.BLACK)
        board.place_disc(Square(4, 4), Player.WHITE)
        return board

    @classmethod
    def from_notation(cls, rows_str: str) -> Self:
        """Construct a board from the row part of a position string.

        Works just like the piece placement part of a FEN string in chess:
        8/8/8/3wb3/3bw3/8/8/8
        means:
        * rows are listed top (row 1) to bottom (row 8), separated by slashes
        * 'b' is a black disc, 'w' a white disc
        * a number denotes that many empty squares next to each other
        """
        rows = rows_str.split("/")
        if len(rows) != BOARD_SIZE:
            raise InvalidPositionError(
                f"Expected {BOARD_SIZE} rows, got {len(rows)}: {rows_str!r}"
            )

        board = cls.empty()
        for row, row_str in enumerate(rows):
            col = 0
            for character in row_str:
                if character.isdigit():
                    col += int(character)
                    continue
                if character.lower() not in ("b", "w"):
                    raise InvalidPositionError(
                        f"Unknown character {character!r} in row {row_str!r}"
                    )
                if col >= BOARD_SIZE:
                    raise InvalidPositionError(f"Row {row_str!r} is too long.")
                board.place_disc(Square(row, col), Player.from_notation(character))
                col += 1

            if col != BOARD_SIZE:
                raise InvalidPositionError(
                    f"Row {row_str!r} describes {col} squares instead of {BOARD_SIZE}."
                )
        return board

    def to_notation(self) -> str:
        """Rows are separated by slashes."""
        return "/".join(self._row_to_notation(row) for row in range(BOARD_SIZE))

    def _row_to_notation(self, row: int) -> str:
        characters: list[str] = []
        empty_count = 0
        for col in range(BOARD_SIZE):
            disc = self.disc(Square(row, col))
            if disc is not None:
                if empty_count > 0:
                    characters.append(str(empty_count))
                    empty_count = 0
                characters.append(disc.to_notation())
            else:
                empty_count += 1

        if empty_count > 0:
            characters.append(str(empty_count))
        return "".join(characters)

    def disc(self, square: Square) -> Cell:
        square.assert_within_bounds()
        return self.cells[square]

    def place_disc(self, square: Square, player: Player) -> None:
        """The only way the contents of the board get changed."""
        square.assert_within_bounds()
        self.cells[square] = player

    def is_empty(self, square: Square) -> bool:
        return self.disc(square) is None

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells.values())

    def squares_of(self, player: Player) -> list[Square]:
        return [square for square in all_squares() if self.cells[square] == player]

    def rows(self) -> list[str]:
        """Human readable rows ('.' for empty), handy for a frontend or for debugging"""
        return [
            "".join(
                _cell_to_char(self.cells[Square(row, col)]) for col in range(BOARD_SIZE)
            )
            for row in range(BOARD_SIZE)
        ]


def _cell_to_char(cell: Cell) -> str:
    return cell.to_notation() if cell is not None else "."
