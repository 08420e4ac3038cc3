"""Wire messages exchanged with the game server.

The shapes mirror the server's request/response oneofs. Outbound frames are
either a join or a press; inbound frames are either a light-up or a turn
phase. The end of the inbound stream has no frame of its own and is
represented by the ``StreamEnd`` marker.

Wire format (JSON text frames)::

    client -> server   {"join": {"id": "Player42"}}
    client -> server   {"press": "GREEN"}
    server -> client   {"lightup": "RED"}
    server -> client   {"turn": "START_TURN"}
"""

import logging
import random
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .enums import Color, TurnPhase

logger = logging.getLogger(__name__)


class Player(BaseModel):
    """The local player, created once per session."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Player identifier sent with the join request")

    @classmethod
    def generate(cls) -> "Player":
        """Create a player with a random 'Player<n>' identifier."""
        return cls(id=f"Player{random.randrange(10000)}")


class JoinMessage(BaseModel):
    """Join the game. Always the first outbound message."""

    model_config = ConfigDict(frozen=True)

    join: Player


class PressMessage(BaseModel):
    """A color press made by the local player."""

    model_config = ConfigDict(frozen=True)

    press: Color


class LightUpMessage(BaseModel):
    """Server asks the client to display a color."""

    model_config = ConfigDict(frozen=True)

    lightup: Color


class TurnMessage(BaseModel):
    """Server announces a game phase."""

    model_config = ConfigDict(frozen=True)

    turn: TurnPhase


class StreamEnd:
    """Marker for the end of the inbound stream."""

    def __repr__(self) -> str:
        return "StreamEnd()"


OutboundMessage = Union[JoinMessage, PressMessage]
InboundMessage = Union[LightUpMessage, TurnMessage]


def encode_message(message: OutboundMessage | InboundMessage) -> str:
    """Serialize a message to its JSON wire form."""
    return message.model_dump_json()


def decode_inbound(frame: str | bytes) -> InboundMessage | None:
    """
    Parse an inbound frame.

    Unknown keys, unknown phase or color values and malformed JSON all
    decode to None so that newer servers do not crash older clients.

    Args:
        frame: Raw text (or bytes) frame received from the server

    Returns:
        The decoded message, or None if the frame is not understood
    """
    for model in (LightUpMessage, TurnMessage):
        try:
            return model.model_validate_json(frame)
        except ValidationError:
            continue
    logger.warning(f"Ignoring unrecognized inbound frame: {frame!r}")
    return None


def decode_outbound(frame: str | bytes) -> OutboundMessage | None:
    """Parse an outbound frame (used by loopback servers and tests)."""
    for model in (JoinMessage, PressMessage):
        try:
            return model.model_validate_json(frame)
        except ValidationError:
            continue
    logger.warning(f"Ignoring unrecognized outbound frame: {frame!r}")
    return None
