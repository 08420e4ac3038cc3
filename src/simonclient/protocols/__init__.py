"""Protocol definitions for observers and device capabilities.

- Events: notifications published to user interfaces
- Observers: protocols for components that react to these events
- Capabilities: activation handlers and indicator drivers
"""

from .events import UIEvent
from .observers import ActivationHandler, IndicatorDriver, UIObserver

__all__ = [
    "ActivationHandler",
    "IndicatorDriver",
    # Events
    "UIEvent",
    # Observers
    "UIObserver",
]
