"""Unit tests for src/services/othello_service.py"""

from typing import Generator
from uuid import UUID, uuid4

import pytest

from src.core.exceptions import GameError, IllegalMoveError, NotYourTurnError
from src.core.models import GameModel
from src.core.shared_types import Color, LastAction, Status
from src.othello.notation import STARTING_POSITION
from src.services.othello_service import (
    AutomatedMoveRequest,
    AutomatedMoveResponse,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    OthelloService,
    ResetGameRequest,
)

STARTING_ROWS = [
    "........",
    "........",
    "........",
    "...wb...",
    "...bw...",
    "........",
    "........",
    "........",
]


# --- MOCK DEPENDENCIES ----
class MockRepository:
    """Mock the GameRepository using a dictionary of game models."""

    def __init__(self) -> None:
        self._games: dict[UUID, GameModel] = {}

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""
        game_id = uuid4()
        self._games[game_id] = game
        return game, game_id

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        return self._games.get(game_id)

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Add new info to existing record."""
        if game_id not in self._games:
            return None
        self._games[game_id] = game
        return game

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record."""
        return self._games.pop(game_id, None)

    def clear(self) -> None:
        """Clear the repository (useful in between tests)"""
        self._games.clear()


@pytest.fixture
def mock_repository() -> Generator[MockRepository, None, None]:
    """Ensures to clear the repository between tests"""
    repo = MockRepository()
    try:
        yield repo
    finally:
        repo.clear()


@pytest.fixture
def service(mock_repository: MockRepository) -> OthelloService:
    return OthelloService(mock_repository)


@pytest.fixture
def game_id(service: OthelloService) -> UUID:
    """A fresh game against the automated (white) player"""
    return service.create_new_game(CreateGameRequest()).game_id


# --- SERVICE - CREATE NEW GAME ----
def test_create_a_new_game(
    service: OthelloService, mock_repository: MockRepository
) -> None:
    """Check that new game is created, persisted in repo, and return has the appropriate information."""
    response = service.create_new_game(CreateGameRequest())

    # Check response structure
    assert isinstance(response, GameResponse)
    assert isinstance(response.game_id, UUID)

    # Check response data
    assert response.position == STARTING_POSITION
    assert response.board == STARTING_ROWS
    assert response.active_player == Color.BLACK
    assert response.automated_player == Color.WHITE
    assert response.status == Status.IN_PROGRESS
    assert response.last_action == LastAction.NONE
    assert response.passed_player is None
    assert (response.score.black, response.score.white) == (2, 2)
    assert response.winner is None
    assert response.legal_moves == ["d3", "c4", "f5", "e6"]
    assert response.move_history == []

    # Check persisted data
    stored_game = mock_repository.get_game(response.game_id)
    assert stored_game is not None
    assert stored_game.position == STARTING_POSITION
    assert stored_game.move_history == []
    assert stored_game.status == Status.IN_PROGRESS
    assert stored_game.automated_player == Color.WHITE


def test_create_game_for_two_humans(service: OthelloService) -> None:
    response = service.create_new_game(CreateGameRequest(automated_player=None))
    assert response.automated_player is None


def test_create_game_from_position_with_immediate_pass(service: OthelloService) -> None:
    """White to move but white cannot capture anything --> black plays."""
    response = service.create_new_game(
        CreateGameRequest(starting_position="bw6/8/8/8/8/8/8/8 w")
    )
    assert response.active_player == Color.BLACK
    assert response.last_action == LastAction.PASS
    assert response.passed_player == Color.WHITE
    assert response.position == "bw6/8/8/8/8/8/8/8 b"


def test_create_finished_game(service: OthelloService) -> None:
    response = service.create_new_game(
        CreateGameRequest(starting_position="bbbb4/8/8/8/8/8/8/1w6 b")
    )
    assert response.status == Status.GAME_OVER
    assert response.winner == "black"
    assert response.legal_moves == []


# --- SERVICE - GET GAME ----
def test_get_existing_game_state(service: OthelloService, game_id: UUID) -> None:
    response = service.get_game_state(GetGameRequest(game_id=game_id))
    assert response.game_id == game_id
    assert response.position == STARTING_POSITION


def test_attempt_to_find_unknown_game(service: OthelloService) -> None:
    """Ensure exception is raised when trying to look up a game with an unknown ID."""
    with pytest.raises(GameError):
        service.get_game_state(GetGameRequest(game_id=uuid4()))


# --- SERVICE - LEGAL MOVES ----
def test_legal_moves_of_player_on_turn(service: OthelloService, game_id: UUID) -> None:
    response = service.legal_moves(LegalMovesRequest(game_id=game_id))
    assert isinstance(response, LegalMovesResponse)
    assert response.color == Color.BLACK
    assert response.legal_moves == ["d3", "c4", "f5", "e6"]


def test_legal_moves_of_other_player(service: OthelloService, game_id: UUID) -> None:
    response = service.legal_moves(
        LegalMovesRequest(game_id=game_id, color=Color.WHITE)
    )
    assert response.color == Color.WHITE
    assert response.legal_moves == ["e3", "f4", "c5", "d6"]


# --- SERVICE - MAKE MOVE ----
def test_make_move(
    service: OthelloService, game_id: UUID, mock_repository: MockRepository
) -> None:
    response = service.make_move(MoveRequest(game_id=game_id, square="d3"))

    assert response.active_player == Color.WHITE
    assert response.last_action == LastAction.MOVE
    assert (response.score.black, response.score.white) == (4, 1)
    assert response.move_history == ["d3"]
    assert response.legal_moves == ["c3", "e3", "c5"]
    assert response.board[2] == "...b...."
    assert response.board[3] == "...bb..."

    stored_game = mock_repository.get_game(game_id)
    assert stored_game is not None
    assert stored_game.position == "8/8/3b4/3bb3/3bw3/8/8/8 w"
    assert stored_game.move_history == ["d3"]


def test_illegal_move_is_not_stored(
    service: OthelloService, game_id: UUID, mock_repository: MockRepository
) -> None:
    with pytest.raises(IllegalMoveError):
        service.make_move(MoveRequest(game_id=game_id, square="a1"))

    stored_game = mock_repository.get_game(game_id)
    assert stored_game is not None
    assert stored_game.position == STARTING_POSITION
    assert stored_game.move_history == []


def test_move_for_wrong_color(service: OthelloService, game_id: UUID) -> None:
    with pytest.raises(NotYourTurnError):
        service.make_move(MoveRequest(game_id=game_id, square="e3", color=Color.WHITE))


def test_move_in_unknown_game(service: OthelloService) -> None:
    with pytest.raises(GameError):
        service.make_move(MoveRequest(game_id=uuid4(), square="d3"))


# --- SERVICE - AUTOMATED PLAYER ----
def test_request_automated_move(service: OthelloService, game_id: UUID) -> None:
    """Only suggests the move: nothing is stored."""
    service.make_move(MoveRequest(game_id=game_id, square="d3"))
    response = service.request_automated_move(AutomatedMoveRequest(game_id=game_id))

    assert isinstance(response, AutomatedMoveResponse)
    assert response.color == Color.WHITE
    assert response.square == "c3"

    state = service.get_game_state(GetGameRequest(game_id=game_id))
    assert state.move_history == ["d3"]


def test_human_move_on_automated_turn(
    service: OthelloService, game_id: UUID, mock_repository: MockRepository
) -> None:
    """White is played automatically: a regular move on its turn is refused, with or without a color."""
    service.make_move(MoveRequest(game_id=game_id, square="d3"))
    with pytest.raises(NotYourTurnError):
        service.make_move(MoveRequest(game_id=game_id, square="c3"))
    with pytest.raises(NotYourTurnError):
        service.make_move(MoveRequest(game_id=game_id, square="c3", color=Color.WHITE))

    stored_game = mock_repository.get_game(game_id)
    assert stored_game is not None
    assert stored_game.move_history == ["d3"]


def test_two_human_players_both_use_make_move(service: OthelloService) -> None:
    game_id = service.create_new_game(CreateGameRequest(automated_player=None)).game_id
    service.make_move(MoveRequest(game_id=game_id, square="d3"))
    response = service.make_move(MoveRequest(game_id=game_id, square="c3"))
    assert response.move_history == ["d3", "c3"]


def test_play_requested_automated_move(service: OthelloService, game_id: UUID) -> None:
    """Driving layer: ask for the move, (wait,) then let the automated player play it."""
    service.make_move(MoveRequest(game_id=game_id, square="d3"))
    suggestion = service.request_automated_move(AutomatedMoveRequest(game_id=game_id))
    response = service.play_automated_move(AutomatedMoveRequest(game_id=game_id))
    assert response.move_history == ["d3", suggestion.square]


def test_play_automated_move(service: OthelloService, game_id: UUID) -> None:
    service.make_move(MoveRequest(game_id=game_id, square="d3"))
    response = service.play_automated_move(AutomatedMoveRequest(game_id=game_id))

    assert response.move_history == ["d3", "c3"]
    assert response.active_player == Color.BLACK
    assert (response.score.black, response.score.white) == (3, 3)


def test_automated_move_on_human_turn(service: OthelloService, game_id: UUID) -> None:
    """Black (human) is to move"""
    with pytest.raises(NotYourTurnError):
        service.request_automated_move(AutomatedMoveRequest(game_id=game_id))
    with pytest.raises(NotYourTurnError):
        service.play_automated_move(AutomatedMoveRequest(game_id=game_id))


def test_automated_move_without_automated_player(service: OthelloService) -> None:
    game_id = service.create_new_game(CreateGameRequest(automated_player=None)).game_id
    with pytest.raises(NotYourTurnError):
        service.request_automated_move(AutomatedMoveRequest(game_id=game_id))


def test_automated_move_after_game_over(service: OthelloService) -> None:
    game_id = service.create_new_game(
        CreateGameRequest(starting_position="wwww4/8/8/8/8/8/8/8 w")
    ).game_id
    with pytest.raises(NotYourTurnError):
        service.play_automated_move(AutomatedMoveRequest(game_id=game_id))


def test_play_against_automated_player_until_the_end(service: OthelloService) -> None:
    """Human plays its first legal move every turn, the automated player answers."""
    response = service.create_new_game(CreateGameRequest())
    game_id = response.game_id
    while response.status == Status.IN_PROGRESS:
        if response.active_player == response.automated_player:
            response = service.play_automated_move(AutomatedMoveRequest(game_id=game_id))
        else:
            response = service.make_move(
                MoveRequest(game_id=game_id, square=response.legal_moves[0])
            )

    assert response.status == Status.GAME_OVER
    assert response.winner in ("black", "white", "draw")
    assert response.legal_moves == []
    assert response.score.black + response.score.white <= 64


# --- SERVICE - RESET / DELETE ----
def test_reset_game(service: OthelloService, game_id: UUID) -> None:
    service.make_move(MoveRequest(game_id=game_id, square="d3"))
    response = service.reset_game(ResetGameRequest(game_id=game_id))

    assert response.game_id == game_id
    assert response.position == STARTING_POSITION
    assert response.move_history == []
    assert response.automated_player == Color.WHITE
    assert response.last_action == LastAction.NONE


def test_reset_unknown_game(service: OthelloService) -> None:
    with pytest.raises(GameError):
        service.reset_game(ResetGameRequest(game_id=uuid4()))


def test_delete_game(service: OthelloService, game_id: UUID) -> None:
    service.delete_game(DeleteGameRequest(game_id=game_id))
    with pytest.raises(GameError):
        service.get_game_state(GetGameRequest(game_id=game_id))
