# asyncipc

Interprocess communication for `asyncio`, carried over Unix domain sockets.

The `asyncipc.endpoint` module provides:

- `Endpoint(path, security_attributes=...)`: a socket path. `incoming()` binds
  the socket, applies the permissions and starts listening; the static
  coroutine `Endpoint.connect(path)` opens a client connection.
- `Incoming`: the listening side. `await incoming.next()` accepts one
  connection; it is also an async iterator and an async context manager.
  `close()` stops listening and removes the socket file.
- `Connection`: a byte stream with `read(size)`, `read_exact(size)`,
  `write_all(data)` and `close()`; usable with `async with`. `read_exact`
  raises `asyncio.IncompleteReadError` (an `EOFError`) if the stream ends
  early.
- `SecurityAttributes`: the permission bits applied to the socket file.
  `SecurityAttributes.empty()` and `SecurityAttributes.allow_everyone_create()`
  leave the permissions alone; `allow_everyone_connect()` sets mode `0o777`;
  `set_mode(mode)` sets a custom mode. Each returns a new value.
- `dummy_endpoint()`: a fresh random socket path under `/tmp`.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Serving connections

```python
import asyncio
from asyncipc.endpoint import Endpoint, SecurityAttributes, dummy_endpoint

async def serve(path):
    endpoint = Endpoint(path, SecurityAttributes.empty().set_mode(0o777))
    async with endpoint.incoming() as incoming:
        async for connection in incoming:
            async with connection:
                data = await connection.read_exact(5)
                await connection.write_all(data)

asyncio.run(serve(dummy_endpoint()))
```

## Connecting

```python
from asyncipc.endpoint import Endpoint

async def talk(path):
    async with await Endpoint.connect(path) as connection:
        await connection.write_all(b"hello")
        reply = await connection.read_exact(5)
```

## Ping-pong demo

Two commands ship with the package. Start a server that answers every
`ping` with `pong`, serving each connection concurrently:

```
asyncipc-server /tmp/demo.sock
```

Then, in another terminal, start a client that sends `ping`, waits for the
reply and repeats every two seconds (change the pause with `--interval`):

```
asyncipc-client /tmp/demo.sock --interval 0.5
```

The client stops when a reply other than `pong` arrives. The same logic is
available as the coroutines `asyncipc.server.run_server(path)`,
`asyncipc.server.handle_connection(connection)` and
`asyncipc.client.run_client(path, interval=2.0)`, which returns the number of
pongs received.

## What it does not do

Only Unix domain sockets are supported; there is no Windows named-pipe
transport, and `SecurityAttributes` manages file permission bits only, not
access-control lists.