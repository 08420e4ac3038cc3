"""Data models for the Simon Says client."""

from .animation import AnimationSequence, AnimationStep
from .config import (
    AnalogInputConfig,
    ClientConfig,
    ConsoleOutputConfig,
    DigitalInputConfig,
    KeyboardInputConfig,
    MidiOutputConfig,
    NullOutputConfig,
    ServerConfig,
    TimingConfig,
    TuiOutputConfig,
)
from .enums import ALL_COLORS, Color, InputModality, TurnPhase, TurnState
from .messages import (
    InboundMessage,
    JoinMessage,
    LightUpMessage,
    OutboundMessage,
    Player,
    PressMessage,
    StreamEnd,
    TurnMessage,
    decode_inbound,
    decode_outbound,
    encode_message,
)

__all__ = [
    "ALL_COLORS",
    "AnalogInputConfig",
    # Animation
    "AnimationSequence",
    "AnimationStep",
    # Config
    "ClientConfig",
    # Enums
    "Color",
    "ConsoleOutputConfig",
    "DigitalInputConfig",
    "InboundMessage",
    "InputModality",
    # Messages
    "JoinMessage",
    "KeyboardInputConfig",
    "LightUpMessage",
    "MidiOutputConfig",
    "NullOutputConfig",
    "OutboundMessage",
    "Player",
    "PressMessage",
    "ServerConfig",
    "StreamEnd",
    "TimingConfig",
    "TuiOutputConfig",
    "TurnMessage",
    "TurnPhase",
    "TurnState",
    "decode_inbound",
    "decode_outbound",
    "encode_message",
]
