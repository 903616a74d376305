"""
Shared pytest fixtures for the grid duel server tests.

Game state fixtures are function-scoped so every test starts from a fresh
board; the API client runs the app lifespan, which creates a new game.
"""

from typing import Dict, Tuple

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketState

from duel_server.domain.grid import Grid
from duel_server.domain.match_rules import GameState
from duel_server.domain.pieces import Kind, Owner, Piece


def piece(identity: str) -> Piece:
    """Build a Piece from its short form, e.g. "A-H1"."""
    owner, kind = identity.split("-")
    return Piece(Owner(owner), Kind(kind))


def make_grid(placements: Dict[Tuple[int, int], str]) -> Grid:
    """Build a grid holding only the given pieces."""
    grid = Grid()
    for (row, col), identity in placements.items():
        grid.place(row, col, piece(identity))
    return grid


class FakeWebSocket:
    """Records what the server sends; stands in for a starlette WebSocket."""

    def __init__(self, fail_on_send: bool = False):
        self.client_state = WebSocketState.CONNECTING
        self.application_state = WebSocketState.CONNECTING
        self.sent = []
        self.fail_on_send = fail_on_send

    async def accept(self):
        self.client_state = WebSocketState.CONNECTED
        self.application_state = WebSocketState.CONNECTED

    async def send_json(self, message):
        if self.fail_on_send:
            raise RuntimeError("socket is gone")
        self.sent.append(message)

    def close_locally(self):
        self.application_state = WebSocketState.DISCONNECTED


@pytest.fixture
def game_state() -> GameState:
    return GameState.new()


@pytest.fixture
def client():
    from duel_server.main import app

    with TestClient(app) as test_client:
        yield test_client
