import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from duel_server.game_coordinator import GameCoordinator
from duel_server.routers import game
from duel_server.routers import restapi
from duel_server.settings import host, log_level, port

logging.basicConfig(level=log_level)


@asynccontextmanager
async def lifespan(app):
    """Create the game shared by every connection.
    This function is called to start the server.
    """
    app.state.coordinator = GameCoordinator()
    logging.info(f"Start Server, game_id: {app.state.coordinator.game_id}")
    try:
        yield
    finally:
        logging.info("Stop Server")


app = FastAPI(lifespan=lifespan)
app.include_router(game.game_router)
app.include_router(restapi.rest_router)


def run():
    uvicorn.run(app, host=host, port=port, log_level=log_level.lower())


if __name__ == "__main__":
    run()
