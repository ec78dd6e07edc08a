"""Asyncio interprocess communication over Unix domain sockets, with a ping/pong server and client."""

__version__ = "0.7.3"
__all__ = ["__version__"]