"""Duplex channel abstraction between the client and the game server."""

from collections.abc import AsyncIterator
from typing import Protocol, runtime_checkable

from simonclient.models import InboundMessage, OutboundMessage


@runtime_checkable
class ProtocolChannel(Protocol):
    """
    An ordered, reliable, bidirectional stream of typed messages.

    Lifecycle:
        ``await open()`` → any number of ``send()`` calls and one pass of
        ``async for message in channel`` → ``await close()``.

    The inbound iteration ending (for any reason, graceful or not) is the
    stream-end event.
    """

    async def open(self) -> None:
        """Connect to the server."""
        ...

    def send(self, message: OutboundMessage) -> None:
        """
        Queue a message for the server.

        Fire-and-forget: returns immediately, delivery and backpressure are
        the channel's concern.

        Raises:
            ChannelClosedError: If close() has already been called
        """
        ...

    def __aiter__(self) -> AsyncIterator[InboundMessage]:
        """Iterate inbound messages in arrival order until the stream ends."""
        ...

    async def close(self) -> None:
        """Terminate the stream from the client side (idempotent)."""
        ...

    @property
    def closed(self) -> bool:
        """True once close() was called or the stream ended."""
        ...
