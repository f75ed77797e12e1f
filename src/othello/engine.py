"""
Request / response style entrypoints for a driving layer (a UI, a bot runner, ...).

Every function takes the game state and returns a result. submit_move returns a NEW state and leaves the one
passed in untouched, also when the move gets rejected.
"""

from copy import deepcopy
from dataclasses import replace
from typing import Optional

from src.othello.game import Game
from src.othello.moves import Move
from src.othello.player import Player
from src.othello.score import Score, Winner
from src.othello.square import Square


def new_game(automated_player: Optional[Player] = Player.WHITE) -> Game:
    """Canonical opening, black to move. Also what a reset does: the old state is simply dropped."""
    return Game.new_game(automated_player=automated_player)


def get_legal_moves(state: Game, player: Player) -> list[Move]:
    return state.legal_moves(player)


def submit_move(state: Game, row: int, col: int) -> Game:
    """
    Play (row, col) for the player on turn.

    Raises IllegalMoveError / NotYourTurnError (state unchanged) or InvalidCoordinateError for squares off the board.
    """
    # listeners are handed over as they are: the same observers keep getting the events
    new_state = replace(
        state,
        board=deepcopy(state.board),
        moves=list(state.moves),
        listeners=list(state.listeners),
    )
    new_state.make_move(Square(row, col))
    return new_state


def request_automated_move(state: Game) -> Move:
    """Any pacing delay is up to the caller, before it calls submit_move with the result."""
    return state.request_automated_move()


def get_score(state: Game) -> Score:
    return state.score


def is_game_over(state: Game) -> bool:
    return state.is_game_over


def get_winner(state: Game) -> Optional[Winner]:
    return state.winner
