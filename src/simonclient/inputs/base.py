"""Common behaviour of every input source."""

import logging
import time
from dataclasses import dataclass, field

from simonclient.models import Color
from simonclient.protocols import ActivationHandler

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ActivationEvent:
    """One filtered 'this color was triggered' signal."""

    color: Color
    timestamp: float = field(default_factory=time.monotonic)


class BaseInputSource:
    """
    Base class for activation producers.

    Subclasses turn raw device events into calls to ``_emit()``. Events are
    forwarded to the handler only while the source is started.
    """

    def __init__(self) -> None:
        self._handler: ActivationHandler | None = None
        self._running = False
        self.activations = 0
        self.last_event: ActivationEvent | None = None

    def set_handler(self, handler: ActivationHandler | None) -> None:
        """Set the callable that receives each activated color."""
        self._handler = handler

    def start(self) -> None:
        """Start forwarding activations."""
        if self._running:
            logger.warning(f"{type(self).__name__} is already running")
            return
        self._running = True
        logger.debug(f"{type(self).__name__} started")

    def stop(self) -> None:
        """Stop forwarding activations."""
        self._running = False
        logger.debug(f"{type(self).__name__} stopped")

    @property
    def is_running(self) -> bool:
        return self._running

    def _emit(self, color: Color) -> None:
        if not self._running:
            logger.debug(f"{type(self).__name__} not running, ignoring {color.value}")
            return
        event = ActivationEvent(color)
        self.activations += 1
        self.last_event = event
        logger.debug(f"Activation: {color.value}")
        if self._handler is not None:
            self._handler(event.color)
