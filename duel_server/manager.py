from fastapi import WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState
from typing import List
import logging


class ConnectionManager:
    def __init__(self):
        self.active_connections: List[WebSocket] = []

    async def connect(self, websocket: WebSocket):
        """Accepts a websocket and registers it for broadcasts

        Args:
            websocket (WebSocket): Connector of the new client
        """
        await websocket.accept()
        self.active_connections.append(websocket)
        logging.info(f"Client connected ({len(self.active_connections)} open)")

    def disconnect(self, websocket: WebSocket):
        """Unregisters a websocket, unknown websockets are ignored

        Args:
            websocket (WebSocket): Connector of the leaving client
        """
        if websocket in self.active_connections:
            self.active_connections.remove(websocket)
            logging.info(f"Client disconnected ({len(self.active_connections)} open)")

    @staticmethod
    def is_open(websocket: WebSocket) -> bool:
        return (
            websocket.client_state == WebSocketState.CONNECTED
            and websocket.application_state == WebSocketState.CONNECTED
        )

    async def send_personal_message(self, message: dict, websocket: WebSocket):
        await websocket.send_json(message)

    async def broadcast(self, message: dict):
        """Sends a message to every open websocket

        Websockets which are not open are skipped. A websocket whose send
        fails is unregistered, the others still receive the message.

        Args:
            message (dict): JSON compatible message
        """
        logging.info(f"Broadcasting {message.get('type')} to {len(self.active_connections)} clients")
        for connection in list(self.active_connections):
            if not self.is_open(connection):
                continue
            try:
                await connection.send_json(message)
            except (WebSocketDisconnect, RuntimeError, OSError) as e:
                logging.error(f"Dropping client after failed send: {e}")
                self.disconnect(connection)
