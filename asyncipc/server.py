"""Ping/pong IPC server."""

from __future__ import annotations

import argparse
import asyncio

from asyncipc.endpoint import Connection, Endpoint, SecurityAttributes

PING = b"ping"
PONG = b"pong"


async def handle_connection(connection: Connection) -> None:
    """Answer every ``ping`` on ``connection`` with ``pong`` until it closes."""
    async with connection:
        while True:
            try:
                buf = await connection.read_exact(len(PING))
            except (EOFError, OSError):
                print("Closing socket")
                break
            if buf == PING:
                print("RECEIVED: PING")
                await connection.write_all(PONG)
                print("SEND: PONG")


async def run_server(path: str) -> None:
    """Listen on ``path`` and serve each connection concurrently."""
    endpoint = Endpoint(path, SecurityAttributes.allow_everyone_create())
    tasks: set[asyncio.Task] = set()
    try:
        async with endpoint.incoming() as incoming:
            async for connection in incoming:
                task = asyncio.create_task(handle_connection(connection))
                tasks.add(task)
                task.add_done_callback(tasks.discard)
    finally:
        for task in tasks:
            task.cancel()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run a ping/pong IPC server.")
    parser.add_argument("path", help="socket path to listen on")
    args = parser.parse_args(argv)
    try:
        asyncio.run(run_server(args.path))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())