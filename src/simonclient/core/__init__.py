"""Core game logic: input gate, turn state machine and session lifecycle."""

from .gate import InputGate
from .session import EXIT_OK, SessionController
from .state_machine import (
    MSG_GAME_STARTED,
    MSG_GOODBYE,
    MSG_LOSE,
    MSG_OTHER_TURN_AFTER_MINE,
    MSG_OTHER_TURN_FIRST,
    MSG_WELCOME,
    MSG_WIN,
    MSG_YOUR_TURN,
    TurnStateMachine,
)

__all__ = [
    "EXIT_OK",
    "MSG_GAME_STARTED",
    "MSG_GOODBYE",
    "MSG_LOSE",
    "MSG_OTHER_TURN_AFTER_MINE",
    "MSG_OTHER_TURN_FIRST",
    "MSG_WELCOME",
    "MSG_WIN",
    "MSG_YOUR_TURN",
    "InputGate",
    "SessionController",
    "TurnStateMachine",
]
