"""Requests and Response models"""

from uuid import UUID

from pydantic import BaseModel

from src.core.shared_types import Status


# --- REQUEST MODELS ---
class BoardPayload(BaseModel):
    """JSON body of POST /games and PUT /games/{id}. Any other fields (id, status) sent along are ignored."""

    board: str


class CreateGameRequest(BaseModel):
    board: str


class MoveRequest(BaseModel):
    game_id: UUID
    board: str


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    id: UUID
    board: str
    status: Status
