import asyncio
import contextlib
import os
import socket

import pytest

from asyncipc.endpoint import Connection, Endpoint, dummy_endpoint
from asyncipc.server import handle_connection, main, run_server


@pytest.fixture
def socket_path():
    path = dummy_endpoint()
    yield path
    with contextlib.suppress(FileNotFoundError):
        os.unlink(path)


async def _wait_for(path):
    for _ in range(200):
        if os.path.exists(path):
            return
        await asyncio.sleep(0.01)


@pytest.mark.asyncio
async def test_handle_connection_answers_ping(capsys):
    left, right = socket.socketpair(socket.AF_UNIX, socket.SOCK_STREAM)
    connection = Connection(*await asyncio.open_unix_connection(sock=left))
    reader, writer = await asyncio.open_unix_connection(sock=right)

    task = asyncio.create_task(handle_connection(connection))
    writer.write(b"ping")
    await writer.drain()
    assert await reader.readexactly(4) == b"pong"

    writer.close()
    await writer.wait_closed()
    await asyncio.wait_for(task, 5)
    out = capsys.readouterr().out
    assert "SEND: PONG" in out
    assert out.rstrip().endswith("Closing socket")


@pytest.mark.asyncio
async def test_run_server_serves_clients(socket_path):
    server = asyncio.create_task(run_server(socket_path))
    await _wait_for(socket_path)

    first = await Endpoint.connect(socket_path)
    second = await Endpoint.connect(socket_path)

    await second.write_all(b"ping")
    assert await second.read_exact(4) == b"pong"

    # Anything other than a ping gets no reply.
    await first.write_all(b"abcd")
    await first.write_all(b"ping")
    assert await first.read_exact(4) == b"pong"

    await first.close()
    await second.close()
    server.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await server
    assert not os.path.exists(socket_path)


def test_main_requires_path():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2