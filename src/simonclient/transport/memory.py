"""In-process channel used for local play-throughs and tests."""

import asyncio
import logging
from collections.abc import AsyncIterator

from simonclient.exceptions import ChannelClosedError
from simonclient.models import InboundMessage, OutboundMessage, decode_inbound

logger = logging.getLogger(__name__)

_END = object()


class MemoryChannel:
    """
    Loopback implementation of ProtocolChannel.

    The "server side" is driven by calling ``push()`` / ``push_frame()`` and
    ``end()``; everything the client sends is recorded in ``sent``.
    """

    def __init__(self) -> None:
        self._inbox: asyncio.Queue = asyncio.Queue()
        self._opened = False
        self._closed = False
        self._ended = False
        self.sent: list[OutboundMessage] = []

    async def open(self) -> None:
        self._opened = True
        logger.debug("Memory channel opened")

    def send(self, message: OutboundMessage) -> None:
        if self._closed:
            raise ChannelClosedError(type(message).__name__)
        self.sent.append(message)
        logger.debug(f"Memory channel sent {message!r}")

    # ------------------------------------------------------------------
    # Server side
    # ------------------------------------------------------------------

    def push(self, *messages: InboundMessage) -> None:
        """Deliver messages to the client, in order."""
        for message in messages:
            self._inbox.put_nowait(message)

    def push_frame(self, frame: str) -> None:
        """Deliver a raw JSON frame; unknown frames are dropped like on the wire."""
        message = decode_inbound(frame)
        if message is not None:
            self._inbox.put_nowait(message)

    def end(self) -> None:
        """End the inbound stream."""
        if not self._ended:
            self._ended = True
            self._inbox.put_nowait(_END)

    # ------------------------------------------------------------------
    # Client side
    # ------------------------------------------------------------------

    def __aiter__(self) -> AsyncIterator[InboundMessage]:
        return self._messages()

    async def _messages(self) -> AsyncIterator[InboundMessage]:
        while True:
            item = await self._inbox.get()
            if item is _END:
                return
            yield item

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.end()
        logger.debug("Memory channel closed")

    @property
    def opened(self) -> bool:
        return self._opened

    @property
    def closed(self) -> bool:
        return self._closed or self._ended
