"""HTTP routes. Translate between JSON payloads and the service's request/response models."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse

from src.api.models import (
    BoardPayload,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
)
from src.core.config import Settings
from src.services.tictactoe_service import TicTacToeService

router = APIRouter()


def get_service(request: Request) -> TicTacToeService:
    return request.app.state.service


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


Service = Annotated[TicTacToeService, Depends(get_service)]
AppSettings = Annotated[Settings, Depends(get_app_settings)]


@router.get("/", response_class=PlainTextResponse)
def index() -> str:
    return "Nothing here go to /games"


@router.get("/games", response_model=list[GameResponse])
def all_games(service: Service) -> list[GameResponse]:
    return service.list_games()


@router.get("/games/{game_id}", response_model=GameResponse)
def game_board(game_id: UUID, service: Service) -> GameResponse:
    return service.get_game_state(GetGameRequest(game_id=game_id))


@router.post("/games", status_code=status.HTTP_201_CREATED)
def new_game(
    payload: BoardPayload, response: Response, service: Service, settings: AppSettings
) -> str:
    """Responds with the URL of the new game, also sent as the Location header."""
    game = service.create_new_game(CreateGameRequest(board=payload.board))
    game_url = settings.game_url(str(game.id))
    response.headers["Location"] = game_url
    return game_url


@router.put("/games/{game_id}", response_model=GameResponse)
def put_player_move(game_id: UUID, payload: BoardPayload, service: Service) -> GameResponse:
    return service.make_move(MoveRequest(game_id=game_id, board=payload.board))


@router.delete("/games/{game_id}", response_model=GameResponse)
def delete_game(game_id: UUID, service: Service) -> GameResponse:
    return service.delete_game(DeleteGameRequest(game_id=game_id))
