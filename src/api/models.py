"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Letter, Orientation, Outcome, Player
from src.sos.coordinate import BOARD_SIZE

# [row, col]
CoordinatePair = list[int]


# --- REQUEST MODELS ---
class CreateMatchRequest(BaseModel):
    initial_countdown: Optional[int] = None

    @field_validator("initial_countdown")
    @classmethod
    def validate_countdown(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 1:
            raise InvalidRequestError(
                f"Countdown must be at least one tick, got {value}."
            )
        return value


class GetMatchRequest(BaseModel):
    match_id: UUID


class MoveRequest(BaseModel):
    match_id: UUID
    row: int
    col: int

    @field_validator(*["row", "col"])
    @classmethod
    def validate_index(cls, value: int) -> int:
        if not 0 <= value < BOARD_SIZE:
            raise InvalidRequestError(
                f"Cannot place a letter at index {value}. The board spans 0-{BOARD_SIZE - 1}."
            )
        return value


class TickRequest(BaseModel):
    match_id: UUID


class ResetMatchRequest(BaseModel):
    match_id: UUID


class DeleteMatchRequest(BaseModel):
    match_id: UUID


# --- RESPONSE MODELS ---
class LineResponse(BaseModel):
    start: CoordinatePair
    end: CoordinatePair
    player: Player
    orientation: Orientation


class MatchResponse(BaseModel):
    match_id: UUID
    board: list[list[Optional[Letter]]]
    current_player: Player
    current_letter: Letter
    scores: dict[Player, int]
    lines: list[LineResponse]
    timer: int
    game_over: bool
    winner: Optional[Outcome]
