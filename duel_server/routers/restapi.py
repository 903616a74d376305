from fastapi import APIRouter, Request

from duel_server.game_coordinator import GameCoordinator
from duel_server.models.dc_models import HealthModel, StateModel

rest_router = APIRouter()


class GameAPI:
    @staticmethod
    @rest_router.get("/state", response_model=StateModel)
    async def get_state(request: Request):
        coordinator: GameCoordinator = request.app.state.coordinator
        return await coordinator.snapshot()

    @staticmethod
    @rest_router.get("/health", response_model=HealthModel)
    async def health(request: Request):
        coordinator: GameCoordinator = request.app.state.coordinator
        return HealthModel(
            status="ok",
            game_id=coordinator.game_id,
            connections=len(coordinator.connect_manager.active_connections),
        )
