"""Domain events for the observer pattern.

- UI events: what the turn state machine tells user interfaces
"""

from enum import Enum


class UIEvent(Enum):
    """Notifications published by the turn state machine.

    The set is closed: user interfaces only ever receive these kinds.
    """

    LIGHTUP = "lightup"  # Server showed a color; payload is a Color
    MESSAGE = "message"  # Human-readable status text; payload is a str
