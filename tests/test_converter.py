import json
from uuid import UUID

import pytest

from conftest import piece
from duel_server.converter import DataConverter, MalformedMessage
from duel_server.domain.pieces import Owner

data_converter = DataConverter()

MOVE_ID = UUID("0192f0c4-6b1e-7c3a-9d2e-5f4a3b2c1d0e")


def test_piece_identity_wire_form():
    assert data_converter.encode_piece(piece("A-P1")) == "A-P1"
    assert data_converter.encode_piece(None) is None


def test_state_message_matches_wire_format(game_state):
    game_state.apply_move(Owner.A, "P1", "F", move_id=MOVE_ID)

    message = data_converter.state_message(game_state)

    assert message["type"] == "state"
    state = message["state"]
    assert state["grid"][0] == [None, "A-P2", "A-H1", "A-H2", "A-P3"]
    assert state["grid"][1][0] == "A-P1"
    assert state["grid"][4][3] == "B-H2"
    assert state["turn"] == "B"
    assert state["winner"] is None
    assert state["moves"] == [
        {
            "move_id": str(MOVE_ID),
            "player": "A",
            "character": "P1",
            "direction": "F",
            "from_cell": [0, 0],
            "to_cell": [1, 0],
            "captured": [],
        }
    ]
    json.dumps(message)


def test_error_message():
    assert data_converter.error_message("NotYourTurn", "Not your turn!") == {
        "type": "error",
        "code": "NotYourTurn",
        "message": "Not your turn!",
    }


def test_parse_move_request():
    request = data_converter.parse_client_message(
        '{"type": "move", "player": "B", "character": "H2", "direction": "FL"}'
    )

    assert request.player == Owner.B
    assert request.character == "H2"
    assert request.direction == "FL"


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "[1, 2, 3]",
        '{"player": "A"}',
        '{"type": "chat", "text": "hi"}',
        '{"type": "move", "player": "C", "character": "P1", "direction": "F"}',
        '{"type": "move", "player": "A", "direction": "F"}',
    ],
)
def test_malformed_messages(raw):
    with pytest.raises(MalformedMessage) as excinfo:
        data_converter.parse_client_message(raw)

    assert excinfo.value.code == "MalformedMessage"


def test_parse_binary_frame():
    request = data_converter.parse_client_message(
        b'{"type": "move", "player": "A", "character": "P1", "direction": "F"}'
    )

    assert request.player == Owner.A


def test_binary_frame_must_be_utf8():
    with pytest.raises(MalformedMessage):
        data_converter.parse_client_message(b"\xff\xfe\x00")
