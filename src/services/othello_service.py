"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from typing import Optional
from uuid import UUID

from src.api.models import (
    AutomatedMoveRequest,
    AutomatedMoveResponse,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    ResetGameRequest,
    ScoreResponse,
)
from src.core.exceptions import NotYourTurnError, RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Color
from src.db.repository import GameRepository
from src.othello.game import Game
from src.othello.player import Player
from src.othello.square import Square

logger = logging.getLogger(__name__)


class OthelloService:
    """Orchestration of layers for an Othello game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a game, either from the opening or from a custom position."""

        new_game = Game.new_game(
            automated_player=_to_player(request.automated_player),
            starting_position=request.starting_position,
        )
        stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.info("Created game %s", game_id)
        return self._create_game_response(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """retrieve set of legal moves (of the player on turn, unless a color is given)."""

        game = Game.from_model(self._fetch_game(request.game_id))
        player = _to_player(request.color) or game.active_player
        return LegalMovesResponse(
            game_id=request.game_id,
            color=_to_color(player),
            legal_moves=[move.to_algebraic() for move in game.legal_moves(player)],
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """
        Make a move attempt for a human player. Nothing gets stored if the move is rejected.
        ---
        The automated player's turn can only be played through play_automated_move.
        """

        game = Game.from_model(self._fetch_game(request.game_id))
        if game.is_automated_turn:
            raise NotYourTurnError(
                f"It is {game.active_player.name.lower()}'s turn, which is played automatically."
            )
        game.make_move(
            Square.from_algebraic(request.square), _to_player(request.color)
        )
        return self._store(request.game_id, game)

    def request_automated_move(
        self, request: AutomatedMoveRequest
    ) -> AutomatedMoveResponse:
        """
        Ask the automated player which move it wants to make (does not play it).
        ---
        The frontend can wait a bit before submitting it, so the human can follow what happens.
        """
        game = Game.from_model(self._fetch_game(request.game_id))
        self._assert_automated_turn(game)
        move = game.request_automated_move()
        return AutomatedMoveResponse(
            game_id=request.game_id,
            color=_to_color(game.active_player),
            square=move.to_algebraic(),
        )

    def play_automated_move(self, request: AutomatedMoveRequest) -> GameResponse:
        """Let the automated player choose and play its move in one go."""
        game = Game.from_model(self._fetch_game(request.game_id))
        self._assert_automated_turn(game)
        move = game.request_automated_move()
        game.make_move(move, game.active_player)
        return self._store(request.game_id, game)

    def reset_game(self, request: ResetGameRequest) -> GameResponse:
        """Throw away the current state and start again from the opening (keeps the same game id and opponent settings)."""
        old_game = Game.from_model(self._fetch_game(request.game_id))
        new_game = Game.new_game(automated_player=old_game.automated_player)
        logger.info("Reset game %s", request.game_id)
        return self._store(request.game_id, new_game)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        self.repo.delete_game(request.game_id)
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _assert_automated_turn(self, game: Game) -> None:
        if game.is_game_over:
            raise NotYourTurnError("The game is over. No more moves can be made.")
        if not game.is_automated_turn:
            raise NotYourTurnError(
                f"It is {game.active_player.name.lower()}'s turn, which is not played automatically."
            )

    def _store(self, game_id: UUID, game: Game) -> GameResponse:
        """Persist the updated game and build the response from it."""
        updated = game.to_model()
        if self.repo.update_game(game_id, updated) is None:
            raise RepositoryError(f"Game with {game_id=} could not be updated.")
        return self._create_game_response(game_id, updated)

    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        game = Game.from_model(model)
        score = game.score
        winner = game.winner
        return GameResponse(
            game_id=game_id,
            position=model.position,
            board=game.board.rows(),
            active_player=_to_color(game.active_player),
            automated_player=model.automated_player,
            status=model.status,
            last_action=model.last_action,
            passed_player=model.passed_player,
            score=ScoreResponse(black=score.black, white=score.white),
            winner=winner.name.lower() if isinstance(winner, Player) else winner,
            legal_moves=[move.to_algebraic() for move in game.legal_moves()],
            move_history=model.move_history,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model


def _to_player(color: Optional[Color]) -> Optional[Player]:
    return Player[color.name] if color is not None else None


def _to_color(player: Player) -> Color:
    return Color[player.name]
