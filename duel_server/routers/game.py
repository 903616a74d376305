import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from duel_server.game_coordinator import GameCoordinator

game_router = APIRouter()


class GameServer:
    @staticmethod
    @game_router.websocket("/ws")
    async def play(websocket: WebSocket):
        """Connect a client, push the current state and relay its moves

        Args:
            websocket (WebSocket): Connector with connected client
        """
        coordinator: GameCoordinator = websocket.app.state.coordinator
        await coordinator.handle_connect(websocket)
        try:
            while True:
                message = await websocket.receive()
                if message["type"] == "websocket.disconnect":
                    raise WebSocketDisconnect(message.get("code", 1000))
                raw = message.get("text")
                if raw is None:
                    raw = message.get("bytes") or b""
                await coordinator.handle_message(websocket, raw)
        except WebSocketDisconnect:
            logging.info("WebSocket closed by client")
        finally:
            coordinator.handle_disconnect(websocket)
