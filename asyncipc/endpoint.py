"""IPC endpoints, listeners and connections over Unix domain sockets."""

from __future__ import annotations

import asyncio
import contextlib
import os
import random
import socket
from dataclasses import dataclass, field, replace


def dummy_endpoint() -> str:
    """Return a fresh, randomly named socket path for tests and examples."""
    return f"/tmp/my-uds-{random.getrandbits(64)}"


@dataclass(frozen=True)
class SecurityAttributes:
    """Permissions applied to a listening socket file.

    ``mode`` holds the owner/group/other permission bits; ``None`` leaves
    the file with whatever the process umask gives it.
    """

    mode: int | None = None

    @classmethod
    def empty(cls) -> SecurityAttributes:
        """Default attributes: permissions are left untouched."""
        return cls()

    def allow_everyone_connect(self) -> SecurityAttributes:
        """Attributes that let every user connect to the socket."""
        return replace(self, mode=0o777)

    def set_mode(self, mode: int) -> SecurityAttributes:
        """Attributes with a custom permission mode."""
        return replace(self, mode=mode)

    @classmethod
    def allow_everyone_create(cls) -> SecurityAttributes:
        """Attributes that let everyone create; on Unix this changes nothing."""
        return cls()

    def apply_permissions(self, path: str | os.PathLike[str]) -> None:
        """Apply the configured mode to the file at ``path``, if any."""
        if self.mode is not None:
            os.chmod(path, self.mode)


class Connection:
    """A bidirectional IPC byte stream."""

    def __init__(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        self._reader = reader
        self._writer = writer

    async def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes; an empty result means end of stream."""
        return await self._reader.read(size)

    async def read_exact(self, size: int) -> bytes:
        """Read exactly ``size`` bytes.

        Raises :class:`EOFError` (``asyncio.IncompleteReadError``) if the
        stream ends first.
        """
        return await self._reader.readexactly(size)

    async def write_all(self, data: bytes) -> None:
        """Write all of ``data`` and wait until it has been flushed."""
        self._writer.write(data)
        await self._writer.drain()

    async def close(self) -> None:
        """Shut the connection down."""
        if self._writer.is_closing():
            return
        self._writer.close()
        with contextlib.suppress(ConnectionError):
            await self._writer.wait_closed()

    async def __aenter__(self) -> Connection:
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()


class Incoming:
    """Stream of connections accepted on a listening socket."""

    def __init__(self, sock: socket.socket, path: str) -> None:
        self._sock = sock
        self.path = path
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def next(self) -> Connection:
        """Wait for and return the next incoming connection."""
        if self._closed:
            raise ValueError("incoming connection stream is closed")
        loop = asyncio.get_running_loop()
        conn, _ = await loop.sock_accept(self._sock)
        reader, writer = await asyncio.open_unix_connection(sock=conn)
        return Connection(reader, writer)

    async def close(self) -> None:
        """Stop listening and remove the socket file."""
        if self._closed:
            return
        self._closed = True
        self._sock.close()
        with contextlib.suppress(FileNotFoundError):
            os.unlink(self.path)

    def __aiter__(self) -> Incoming:
        return self

    async def __anext__(self) -> Connection:
        if self._closed:
            raise StopAsyncIteration
        return await self.next()

    async def __aenter__(self) -> Incoming:
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()


@dataclass
class Endpoint:
    """An IPC endpoint bound to a filesystem path."""

    path: str
    security_attributes: SecurityAttributes = field(default_factory=SecurityAttributes.empty)

    def incoming(self) -> Incoming:
        """Bind the socket, apply permissions and start listening."""
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        try:
            sock.bind(self.path)
        except OSError:
            sock.close()
            raise
        try:
            self.security_attributes.apply_permissions(self.path)
            sock.listen()
            sock.setblocking(False)
        except OSError:
            sock.close()
            with contextlib.suppress(FileNotFoundError):
                os.unlink(self.path)
            raise
        return Incoming(sock, self.path)

    @staticmethod
    async def connect(path: str | os.PathLike[str]) -> Connection:
        """Open a client connection to the endpoint at ``path``."""
        reader, writer = await asyncio.open_unix_connection(os.fspath(path))
        return Connection(reader, writer)