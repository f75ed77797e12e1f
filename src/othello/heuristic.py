"""
The automated opponent.
----

Greedy, looks only one move ahead:
1. Take a corner whenever one is available (corners can never be flipped back).
2. Otherwise, flip as many discs as possible right now.
"""

import logging

from src.core.exceptions import NoLegalMovesError
from src.othello.moves import Board, Move, captures_for, legal_moves
from src.othello.player import Player

logger = logging.getLogger(__name__)


def select_move(board: Board, player: Player) -> Move:
    """
    Pick a move for `player`.

    Ties are broken by the row-major order of legal_moves: the first corner found wins,
    and a later move only replaces the best one if it flips strictly more discs.
    """
    moves = legal_moves(board, player)
    if not moves:
        raise NoLegalMovesError(
            f"No legal moves for {player.name.lower()}. The turn should have been passed."
        )

    corner = next((move for move in moves if move.is_corner()), None)
    if corner is not None:
        logger.debug("%s takes corner %s", player.name, corner.to_algebraic())
        return corner

    best_move = moves[0]
    best_count = len(captures_for(board, best_move, player))
    for move in moves[1:]:
        count = len(captures_for(board, move, player))
        if count > best_count:
            best_move, best_count = move, count

    logger.debug(
        "%s plays %s flipping %d disc(s)",
        player.name,
        best_move.to_algebraic(),
        best_count,
    )
    return best_move
