from pydantic import BaseModel
from typing import List, Literal, Optional
from uuid import UUID

from duel_server.domain.pieces import Owner


class ClientMessageModel(BaseModel):
    """Envelope of every client message, only the discriminator is checked."""

    type: str


class MoveRequestModel(BaseModel):
    type: Literal["move"]
    player: Owner
    character: str  # "P1" | "P2" | "P3" | "H1" | "H2"
    direction: str  # "L" | "R" | "F" | "B" | "FL" | "FR" | "BL" | "BR"


class MoveModel(BaseModel):
    move_id: Optional[UUID] = None
    player: Owner
    character: str
    direction: str
    from_cell: List[int]
    to_cell: List[int]
    captured: List[str] = []


class StateModel(BaseModel):
    grid: List[List[Optional[str]]]  # null or "<owner>-<kind>", e.g. "A-P1"
    turn: Owner
    winner: Optional[Owner] = None
    moves: List[MoveModel] = []


class StateMessageModel(BaseModel):
    type: Literal["state"] = "state"
    state: StateModel


class ErrorMessageModel(BaseModel):
    type: Literal["error"] = "error"
    code: str
    message: str


class HealthModel(BaseModel):
    status: str
    game_id: UUID
    connections: int
