"""Counting discs. Always derived from the board, never kept as a separate counter."""

from dataclasses import dataclass
from typing import Final, Literal

from src.othello.board import Board
from src.othello.player import Player

DRAW: Final = "draw"
Winner = Player | Literal["draw"]


@dataclass(frozen=True)
class Score:
    black: int
    white: int

    @property
    def total(self) -> int:
        return self.black + self.white

    def of(self, player: Player) -> int:
        return self.black if player == Player.BLACK else self.white


def compute_score(board: Board) -> Score:
    """Full scan of the board"""
    return Score(
        black=len(board.squares_of(Player.BLACK)),
        white=len(board.squares_of(Player.WHITE)),
    )


def winner_from_score(score: Score) -> Winner:
    """Most discs wins. Equal counts is a draw."""
    if score.black > score.white:
        return Player.BLACK
    if score.white > score.black:
        return Player.WHITE
    return DRAW
