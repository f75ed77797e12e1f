"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, LastAction, Status
from src.othello.notation import is_valid_position

AlgebraicSquare = str


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    automated_player: Optional[Color] = Color.WHITE
    starting_position: Optional[str] = None

    @field_validator("starting_position")
    @classmethod
    def validate_starting_position(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        value = value.strip()
        if not is_valid_position(value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a position. Expected something like '8/8/8/3wb3/3bw3/8/8/8 b'."
            )
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID
    color: Optional[Color] = None


class MoveRequest(BaseModel):
    game_id: UUID
    square: AlgebraicSquare
    color: Optional[Color] = None

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        def _is_algebraic_notation(value: str) -> bool:
            if len(value) != 2:
                return False

            column, row = value[0], value[1]
            return column in "abcdefgh" and row in "12345678"

        value = value.strip().lower()
        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name (a1 - h8)."
            )
        return value


class AutomatedMoveRequest(BaseModel):
    game_id: UUID


class ResetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class ScoreResponse(BaseModel):
    black: int
    white: int


class GameResponse(BaseModel):
    game_id: UUID
    position: str
    board: list[str]
    active_player: Color
    automated_player: Optional[Color]
    status: Status
    last_action: LastAction
    passed_player: Optional[Color]
    score: ScoreResponse
    winner: Optional[str]
    legal_moves: list[AlgebraicSquare]
    move_history: list[AlgebraicSquare]


class LegalMovesResponse(BaseModel):
    game_id: UUID
    color: Color
    legal_moves: list[AlgebraicSquare]


class AutomatedMoveResponse(BaseModel):
    game_id: UUID
    color: Color
    square: AlgebraicSquare
