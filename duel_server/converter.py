import json
from typing import Optional, Union

from pydantic import ValidationError

from duel_server.domain.match_rules import GameState, MoveRecord
from duel_server.domain.pieces import Piece
from duel_server.models.dc_models import (
    ClientMessageModel,
    ErrorMessageModel,
    MoveModel,
    MoveRequestModel,
    StateMessageModel,
    StateModel,
)

PIECE_SEPARATOR = "-"


class MalformedMessage(Exception):
    """The client sent something that is not a valid request."""

    code = "MalformedMessage"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DataConverter:
    """This class is used to convert data between the domain and the wire format."""

    def encode_piece(self, piece: Optional[Piece]) -> Optional[str]:
        """Convert a Piece to its wire form, e.g. Piece(A, H1) -> "A-H1"."""
        if piece is None:
            return None
        return f"{piece.owner.value}{PIECE_SEPARATOR}{piece.kind.value}"

    def convert_move_record_to_model(self, record: MoveRecord) -> MoveModel:
        return MoveModel(
            move_id=record.move_id,
            player=record.player,
            character=record.kind.value,
            direction=record.direction,
            from_cell=list(record.from_cell),
            to_cell=list(record.to_cell),
            captured=[self.encode_piece(piece) for piece in record.captured],
        )

    def convert_state_to_model(self, game_state: GameState) -> StateModel:
        """Convert the GameState to the StateModel to send to clients

        Args:
            game_state (GameState): The authoritative game record

        Returns:
            StateModel: Full snapshot of grid, turn, winner and move log
        """
        return StateModel(
            grid=[
                [self.encode_piece(cell) for cell in row]
                for row in game_state.grid.rows()
            ],
            turn=game_state.turn,
            winner=game_state.winner,
            moves=[
                self.convert_move_record_to_model(record)
                for record in game_state.moves
            ],
        )

    def state_message(self, game_state: GameState) -> dict:
        message = StateMessageModel(state=self.convert_state_to_model(game_state))
        return message.model_dump(mode="json")

    def error_message(self, code: str, message: str) -> dict:
        return ErrorMessageModel(code=code, message=message).model_dump(mode="json")

    def parse_client_message(self, raw: Union[str, bytes]) -> MoveRequestModel:
        """Parse a text or binary frame received from a client

        Args:
            raw (Union[str, bytes]): The raw payload, binary frames must be UTF-8

        Raises:
            MalformedMessage: The payload is not JSON, not an object,
                has an unknown type or invalid fields

        Returns:
            MoveRequestModel: The validated move request
        """
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise MalformedMessage("Malformed message: binary frame is not UTF-8") from e
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise MalformedMessage(f"Malformed message: {e.msg}") from e
        if not isinstance(data, dict):
            raise MalformedMessage("Malformed message: expected a JSON object")

        try:
            envelope = ClientMessageModel.model_validate(data)
            if envelope.type != "move":
                raise MalformedMessage(
                    f"Unsupported message type: {envelope.type!r}"
                )
            return MoveRequestModel.model_validate(data)
        except ValidationError as e:
            fields = ", ".join(
                ".".join(str(part) for part in error["loc"]) for error in e.errors()
            )
            raise MalformedMessage(f"Malformed message: invalid {fields}") from e
