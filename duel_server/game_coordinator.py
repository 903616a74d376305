import logging
from asyncio import Lock
from typing import Optional, Union

from fastapi import WebSocket
from uuid6 import uuid7

from duel_server.converter import DataConverter, MalformedMessage
from duel_server.domain.errors import MoveRejected
from duel_server.domain.match_rules import GameState, MoveRecord
from duel_server.manager import ConnectionManager
from duel_server.models.dc_models import StateModel

LOGGED_PAYLOAD_LIMIT = 200


class GameCoordinator:
    """Single owner of the shared GameState.

    Connection handlers never touch the state directly. Every move goes
    through handle_message, which holds the lock from validation until the
    broadcast of the new state has been sent.
    """

    def __init__(
        self,
        game_state: Optional[GameState] = None,
        connect_manager: Optional[ConnectionManager] = None,
    ):
        self.game_id = uuid7()
        self.game_state = game_state if game_state is not None else GameState.new()
        self.connect_manager = connect_manager or ConnectionManager()
        self.data_converter = DataConverter()
        self.lock = Lock()  # guards game_state and the broadcast that follows a move

    async def snapshot(self) -> StateModel:
        """Get the current state of the game

        Returns:
            StateModel: Full state as sent to clients
        """
        async with self.lock:
            return self.data_converter.convert_state_to_model(self.game_state)

    async def handle_connect(self, websocket: WebSocket):
        """Register the websocket and send it the current state

        Args:
            websocket (WebSocket): Connector of the new client
        """
        await self.connect_manager.connect(websocket)
        async with self.lock:
            await self.connect_manager.send_personal_message(
                self.data_converter.state_message(self.game_state), websocket
            )

    def handle_disconnect(self, websocket: WebSocket):
        self.connect_manager.disconnect(websocket)

    async def handle_message(
        self, websocket: WebSocket, raw: Union[str, bytes]
    ) -> Optional[MoveRecord]:
        """Apply a move sent by a client and broadcast the new state

        Rejected or malformed requests are answered with an error sent to
        this websocket only; the state is left unchanged and nothing is
        broadcast.

        Args:
            websocket (WebSocket): Connector of the requesting client
            raw (Union[str, bytes]): Text or binary frame received from the client

        Returns:
            Optional[MoveRecord]: The applied move, None if it was rejected
        """
        logging.debug(f"Received message: {raw[:LOGGED_PAYLOAD_LIMIT]!r}")
        async with self.lock:
            try:
                request = self.data_converter.parse_client_message(raw)
                record = self.game_state.apply_move(
                    request.player,
                    request.character,
                    request.direction,
                    move_id=uuid7(),
                )
            except (MalformedMessage, MoveRejected) as e:
                logging.warning(f"Error: {e.message}")
                await self.connect_manager.send_personal_message(
                    self.data_converter.error_message(e.code, e.message), websocket
                )
                return None

            logging.info(
                f"Player {record.player.value} moved {record.kind.value} "
                f"{record.from_cell} -> {record.to_cell}"
            )
            if self.game_state.winner is not None:
                logging.info(f"Game over. Winner: {self.game_state.winner.value}")
            await self.connect_manager.broadcast(
                self.data_converter.state_message(self.game_state)
            )
            return record
