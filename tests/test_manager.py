import pytest

from conftest import FakeWebSocket
from duel_server.manager import ConnectionManager


@pytest.mark.asyncio
async def test_broadcast_skips_connections_that_are_not_open():
    manager = ConnectionManager()
    open_socket, closing_socket = FakeWebSocket(), FakeWebSocket()
    await manager.connect(open_socket)
    await manager.connect(closing_socket)
    closing_socket.close_locally()

    await manager.broadcast({"type": "state"})

    assert open_socket.sent == [{"type": "state"}]
    assert closing_socket.sent == []


@pytest.mark.asyncio
async def test_failed_send_drops_only_that_connection():
    manager = ConnectionManager()
    broken, healthy = FakeWebSocket(fail_on_send=True), FakeWebSocket()
    await manager.connect(broken)
    await manager.connect(healthy)

    await manager.broadcast({"type": "state"})

    assert healthy.sent == [{"type": "state"}]
    assert manager.active_connections == [healthy]


def test_disconnect_ignores_unknown_websockets():
    manager = ConnectionManager()

    manager.disconnect(FakeWebSocket())

    assert manager.active_connections == []
