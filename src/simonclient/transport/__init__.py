"""Transport between the client and the game server."""

from simonclient.models import ServerConfig

from .channel import ProtocolChannel
from .memory import MemoryChannel
from .websocket import WebSocketChannel


def create_channel(server: ServerConfig) -> ProtocolChannel:
    """Build the network channel for a server configuration."""
    return WebSocketChannel(server.url)


__all__ = ["MemoryChannel", "ProtocolChannel", "WebSocketChannel", "create_channel"]
