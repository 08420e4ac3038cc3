"""Game session and transport exceptions."""

from .base import SimonClientError


class TransportError(SimonClientError):
    """The connection to the game server failed."""
    pass


class ChannelClosedError(TransportError):
    """A message was sent on a channel that is already closed."""

    def __init__(self, what: str = "message"):
        super().__init__(
            user_message="The connection to the game server is closed",
            technical_message=f"Cannot send {what}: channel closed",
        )


class SessionStateError(SimonClientError):
    """An operation was attempted in a session state that does not allow it."""
    pass
