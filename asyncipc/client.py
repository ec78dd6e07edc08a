"""Ping/pong IPC client."""

from __future__ import annotations

import argparse
import asyncio

from asyncipc.endpoint import Endpoint

PING = b"ping"
PONG = b"pong"


async def run_client(path: str, interval: float = 2.0) -> int:
    """Ping the server at ``path`` until it stops answering ``pong``.

    Returns the number of pongs received. Raises :class:`EOFError` if the
    server closes the connection mid-exchange.
    """
    pongs = 0
    async with await Endpoint.connect(path) as client:
        while True:
            print("SEND: PING")
            await client.write_all(PING)
            reply = await client.read_exact(len(PONG))
            if reply != PONG:
                break
            print("RECEIVED: PONG")
            pongs += 1
            await asyncio.sleep(interval)
    return pongs


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Ping an IPC server.")
    parser.add_argument("path", help="socket path to connect to")
    parser.add_argument("--interval", type=float, default=2.0, help="seconds between pings")
    args = parser.parse_args(argv)
    try:
        asyncio.run(run_client(args.path, args.interval))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())