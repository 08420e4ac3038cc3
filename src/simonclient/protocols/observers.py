"""Observer and capability protocols.

- UIObserver: reacts to notifications from the turn state machine
- ActivationHandler: receives activations from an input source
- IndicatorDriver: turns color indicators on and off
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from simonclient.models import Color

from .events import UIEvent


@runtime_checkable
class UIObserver(Protocol):
    """
    Observer that receives UI notifications.

    Publishing is fire-and-forget: the state machine does not wait for or
    expect any acknowledgement.
    """

    def on_ui_event(self, event: UIEvent, payload: "Color | str") -> None:
        """
        Handle a UI notification.

        Args:
            event: The kind of notification
            payload: A Color for LIGHTUP, message text for MESSAGE

        Threading:
            Called on the session's event loop. Implementations should not block.

        Error Handling:
            Exceptions raised by observers are caught and logged. They do not
            propagate to the state machine.
        """
        ...


class ActivationHandler(Protocol):
    """Callable that receives one activated color."""

    def __call__(self, color: "Color") -> None: ...


@runtime_checkable
class IndicatorDriver(Protocol):
    """The four color indicators of one output device."""

    def show(self, colors: "Iterable[Color]") -> None:
        """Light exactly the given colors; every other indicator is turned off."""
        ...

    def clear(self) -> None:
        """Turn every indicator off."""
        ...
