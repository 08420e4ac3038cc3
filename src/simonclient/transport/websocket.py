"""WebSocket implementation of the game channel.

Messages travel as JSON text frames (see simonclient.models.messages).
Outbound messages go through a queue drained by a single writer task, so
``send()`` never blocks and frames leave in the order they were sent.
"""

import asyncio
import logging
from collections.abc import AsyncIterator

import websockets
from websockets.exceptions import ConnectionClosed, ConnectionClosedError, WebSocketException

from simonclient.exceptions import ChannelClosedError, TransportError
from simonclient.models import InboundMessage, OutboundMessage, decode_inbound, encode_message

logger = logging.getLogger(__name__)

WEBSOCKET_OPEN_TIMEOUT = 10.0  # Only applies to the initial handshake
WEBSOCKET_CLOSE_TIMEOUT = 5.0


class WebSocketChannel:
    """Duplex game stream over a single WebSocket connection."""

    def __init__(self, url: str, open_timeout: float = WEBSOCKET_OPEN_TIMEOUT):
        """
        Initialize the channel (does not connect).

        Args:
            url: ws:// or wss:// URL of the game endpoint
            open_timeout: Seconds allowed for the opening handshake
        """
        self.url = url
        self._open_timeout = open_timeout
        self._ws = None
        self._outbox: asyncio.Queue[OutboundMessage | None] = asyncio.Queue()
        self._writer: asyncio.Task | None = None
        self._closed = False
        self._ended = False

    async def open(self) -> None:
        """
        Connect to the server and start the writer task.

        Raises:
            TransportError: If the connection cannot be established
        """
        logger.info(f"Connecting to {self.url}")
        try:
            self._ws = await websockets.connect(
                self.url,
                open_timeout=self._open_timeout,
                close_timeout=WEBSOCKET_CLOSE_TIMEOUT,
                # No keepalive timeout: a silent server is waited on indefinitely
                ping_interval=None,
            )
        except (OSError, asyncio.TimeoutError, WebSocketException) as e:
            raise TransportError(
                user_message=f"Could not connect to the game server at {self.url}",
                technical_message=f"WebSocket connect to {self.url} failed: {e!r}",
                recovery_hint="Check that the server is running and that --server/--port are correct.",
            ) from e

        self._writer = asyncio.create_task(self._write_loop(), name="websocket-writer")
        logger.info(f"Connected to {self.url}")

    def send(self, message: OutboundMessage) -> None:
        if self._closed:
            raise ChannelClosedError(type(message).__name__)
        self._outbox.put_nowait(message)

    async def _write_loop(self) -> None:
        while True:
            message = await self._outbox.get()
            if message is None:
                return
            try:
                await self._ws.send(encode_message(message))
                logger.debug(f"Sent {message!r}")
            except ConnectionClosed as e:
                logger.warning(f"Dropped {message!r}: connection closed ({e})")
                return

    def __aiter__(self) -> AsyncIterator[InboundMessage]:
        return self._messages()

    async def _messages(self) -> AsyncIterator[InboundMessage]:
        if self._ws is None:
            raise TransportError("Channel is not open", technical_message="iterate before open()")
        try:
            async for frame in self._ws:
                message = decode_inbound(frame)
                if message is not None:
                    logger.debug(f"Received {message!r}")
                    yield message
        except ConnectionClosedError as e:
            # Abrupt closure ends the stream exactly like a graceful one
            logger.warning(f"Game stream closed abruptly: {e}")
        except OSError as e:
            logger.warning(f"Game stream failed: {e}")
        finally:
            self._ended = True
        logger.info("Game stream ended")

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True

        if self._writer is not None:
            # Flush queued frames, then stop the writer
            self._outbox.put_nowait(None)
            try:
                await asyncio.wait_for(self._writer, timeout=WEBSOCKET_CLOSE_TIMEOUT)
            except asyncio.TimeoutError:
                logger.warning("Timed out flushing outbound messages")

        if self._ws is not None:
            await self._ws.close()
        logger.info(f"Closed connection to {self.url}")

    @property
    def closed(self) -> bool:
        return self._closed or self._ended
