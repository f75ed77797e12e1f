"""HTTP routes. Every route is a thin wrapper: build the request model, call the service, return its response."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

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
)
from src.core.shared_types import Color
from src.db.database import get_db
from src.db.sql_repository import SQLGameRepository
from src.services.othello_service import OthelloService

router = APIRouter(prefix="/games", tags=["games"])


def get_service(db: Session = Depends(get_db)) -> OthelloService:
    return OthelloService(SQLGameRepository(db))


@router.post("", response_model=GameResponse, status_code=status.HTTP_201_CREATED)
def create_game(
    request: CreateGameRequest, service: OthelloService = Depends(get_service)
) -> GameResponse:
    return service.create_new_game(request)


@router.get("/{game_id}", response_model=GameResponse)
def get_game(
    game_id: UUID, service: OthelloService = Depends(get_service)
) -> GameResponse:
    return service.get_game_state(GetGameRequest(game_id=game_id))


@router.get("/{game_id}/legal-moves", response_model=LegalMovesResponse)
def legal_moves(
    game_id: UUID,
    color: Optional[Color] = None,
    service: OthelloService = Depends(get_service),
) -> LegalMovesResponse:
    return service.legal_moves(LegalMovesRequest(game_id=game_id, color=color))


@router.post("/{game_id}/moves", response_model=GameResponse)
def make_move(
    game_id: UUID,
    square: str,
    color: Optional[Color] = None,
    service: OthelloService = Depends(get_service),
) -> GameResponse:
    return service.make_move(MoveRequest(game_id=game_id, square=square, color=color))


@router.get("/{game_id}/automated-move", response_model=AutomatedMoveResponse)
def suggest_automated_move(
    game_id: UUID, service: OthelloService = Depends(get_service)
) -> AutomatedMoveResponse:
    return service.request_automated_move(AutomatedMoveRequest(game_id=game_id))


@router.post("/{game_id}/automated-move", response_model=GameResponse)
def play_automated_move(
    game_id: UUID, service: OthelloService = Depends(get_service)
) -> GameResponse:
    return service.play_automated_move(AutomatedMoveRequest(game_id=game_id))


@router.post("/{game_id}/reset", response_model=GameResponse)
def reset_game(
    game_id: UUID, service: OthelloService = Depends(get_service)
) -> GameResponse:
    return service.reset_game(ResetGameRequest(game_id=game_id))


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_game(game_id: UUID, service: OthelloService = Depends(get_service)) -> None:
    service.delete_game(DeleteGameRequest(game_id=game_id))
