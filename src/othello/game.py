"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of Othello -->
passes this information to the service layer, which can then pass it onwards to the API layer.

Turn cycle:
    AwaitingMove(player) --move--> AwaitingMove(opponent)
                                   Passed(opponent) --> AwaitingMove(player)    (opponent has no moves)
                                                    --> GameOver                (neither has moves)
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Optional, Self

from src.core.exceptions import GameStateError, IllegalMoveError, NotYourTurnError
from src.core.models import GameModel
from src.core.shared_types import LastAction, Status
from src.othello.board import Board
from src.othello.heuristic import select_move
from src.othello.moves import Move, apply_move, is_legal, legal_moves
from src.othello.notation import STARTING_POSITION, format_position, parse_position
from src.othello.player import Player
from src.othello.score import Score, Winner, compute_score, winner_from_score
from src.othello.square import Square

logger = logging.getLogger(__name__)


class EventType(Enum):
    TURN_PASSED = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class GameEvent:
    """Sent to listeners. `player` is the passed player for TURN_PASSED, `winner` is set for GAME_OVER."""

    type: EventType
    player: Optional[Player] = None
    winner: Optional[Winner] = None


Listener = Callable[[GameEvent], None]


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    active_player: Player
    status: Status
    last_action: LastAction = LastAction.NONE
    passed_player: Optional[Player] = None
    moves: list[Move] = field(default_factory=list)
    automated_player: Optional[Player] = Player.WHITE
    listeners: list[Listener] = field(default_factory=list, compare=False, repr=False)

    @classmethod
    def new_game(
        cls,
        automated_player: Optional[Player] = Player.WHITE,
        starting_position: Optional[str] = None,
    ) -> Self:
        """
        Canonical opening (black to move), unless a custom starting position is supplied.

        NOTE a custom position might leave the player to move without any move. That gets resolved right away,
        the same way it would after a regular move.
        """
        board, player_to_move = parse_position(starting_position or STARTING_POSITION)
        game = cls(
            board=board,
            active_player=player_to_move,
            status=Status.IN_PROGRESS,
            automated_player=automated_player,
        )
        if starting_position is not None and not legal_moves(board, player_to_move):
            game._pass_turn(player_to_move)
        return game

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if model.status not in Status.__members__.values():
            raise GameStateError(
                f"Invalid status: {model.status!r}. \nPick one from {','.join(Status)}"
            )
        if model.last_action not in LastAction.__members__.values():
            raise GameStateError(
                f"Invalid last action: {model.last_action!r}. \nPick one from {','.join(LastAction)}"
            )

        board, active_player = parse_position(model.position)
        return cls(
            board=board,
            active_player=active_player,
            status=Status(model.status),
            last_action=LastAction(model.last_action),
            passed_player=_player_from_name(model.passed_player),
            moves=[Square.from_algebraic(move) for move in model.move_history],
            automated_player=_player_from_name(model.automated_player),
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            position=format_position(self.board, self.active_player),
            move_history=[move.to_algebraic() for move in self.moves],
            status=self.status.value,
            last_action=self.last_action.value,
            passed_player=_player_to_name(self.passed_player),
            automated_player=_player_to_name(self.automated_player),
        )

    # --- QUERIES ---
    @property
    def score(self) -> Score:
        return compute_score(self.board)

    @property
    def is_game_over(self) -> bool:
        return self.status == Status.GAME_OVER

    @property
    def winner(self) -> Optional[Winner]:
        """
        None while the game is still going.
        Recomputed from the final board every time it is asked for.
        """
        if not self.is_game_over:
            return None
        return winner_from_score(self.score)

    @property
    def is_automated_turn(self) -> bool:
        return not self.is_game_over and self.active_player == self.automated_player

    def legal_moves(self, player: Optional[Player] = None) -> list[Move]:
        """Legal moves of the given player (default: whoever is on turn). These can be used to display hints."""
        if self.is_game_over:
            return []
        return legal_moves(self.board, player or self.active_player)

    # --- TRANSITIONS ---
    def make_move(self, square: Square, player: Optional[Player] = None) -> list[Square]:
        """
        Attempt to make a move
        -----

        1. game must still be in progress
        2. it must be your turn (only checked when `player` is given)
        3. the move must be legal
        4. update the board and the move history
        5. hand the turn over (passing the opponent's turn if needed, or ending the game)

        Nothing is changed if any of the checks fail. Returns the flipped squares.
        """
        self._assert_in_progress()
        if player is not None and player != self.active_player:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for {self.active_player.name.lower()} to make a move first."
            )

        mover = self.active_player
        if not is_legal(self.board, square, mover):
            logger.debug("Rejected %s for %s", square.to_algebraic(), mover.name)
            raise IllegalMoveError(f"Move not allowed: {square.to_algebraic()}")

        flipped = apply_move(self.board, square, mover)
        self.moves.append(square)
        self._advance_turn(mover)
        return flipped

    def request_automated_move(self) -> Move:
        """
        The move the automated player would make for whoever is on turn.

        Does not change anything: the caller decides when (after some delay perhaps) to submit it with make_move.
        """
        self._assert_in_progress()
        return select_move(self.board, self.active_player)

    def subscribe(self, listener: Listener) -> None:
        """Get notified of passes and the end of the game"""
        self.listeners.append(listener)

    # -- PRIVATE HELPERS ---
    def _assert_in_progress(self) -> None:
        if self.is_game_over:
            raise NotYourTurnError("The game is over. No more moves can be made.")

    def _advance_turn(self, mover: Player) -> None:
        """After `mover` made a move: normally the opponent is next."""
        opponent = mover.opponent
        if legal_moves(self.board, opponent):
            self.active_player = opponent
            self.last_action = LastAction.MOVE
            self.passed_player = None
            return

        self._pass_turn(opponent)

    def _pass_turn(self, passed: Player) -> None:
        """
        `passed` has nothing to play: skip their turn entirely.
        If the other player has nothing to play either, the game is over.
        """
        logger.info("%s has no moves, turn skipped", passed.name.lower())
        self.passed_player = passed
        self.last_action = LastAction.PASS
        self._notify(GameEvent(EventType.TURN_PASSED, player=passed))

        other = passed.opponent
        if legal_moves(self.board, other):
            self.active_player = other
            return

        self._end_game()

    def _end_game(self) -> None:
        self._change_status(Status.GAME_OVER)
        winner = self.winner
        score = self.score
        logger.info(
            "Game over: black %d - white %d, winner: %s",
            score.black,
            score.white,
            winner.name.lower() if isinstance(winner, Player) else winner,
        )
        self._notify(GameEvent(EventType.GAME_OVER, winner=winner))

    def _change_status(self, new_status: Status) -> None:
        self.status = new_status

    def _notify(self, event: GameEvent) -> None:
        for listener in self.listeners:
            listener(event)


def _player_from_name(name: Optional[str]) -> Optional[Player]:
    """'black' / 'white' (the names used outside of the domain) to Player"""
    if name is None:
        return None
    if name.upper() not in Player.__members__:
        raise GameStateError(
            f"Invalid player: {name!r}. Pick one from {','.join(p.name.lower() for p in Player)}"
        )
    return Player[name.upper()]


def _player_to_name(player: Optional[Player]) -> Optional[str]:
    return player.name.lower() if player is not None else None
