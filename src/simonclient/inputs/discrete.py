"""Discrete inputs: one raw press is one activation."""

import logging

from simonclient.models import Color
from simonclient.models.config import DEFAULT_KEYMAP

from .base import BaseInputSource

logger = logging.getLogger(__name__)


class DiscreteInputSource(BaseInputSource):
    """Input source for buttons, keys and clicks."""

    def __init__(self, keymap: dict[str, Color] | None = None) -> None:
        super().__init__()
        self.keymap = {key.lower(): color for key, color in (keymap or DEFAULT_KEYMAP).items()}

    def press(self, color: Color) -> None:
        """Forward one press of ``color``."""
        self._emit(color)

    def press_key(self, key: str) -> bool:
        """
        Forward the press bound to ``key``.

        Returns:
            True if the key is mapped to a color
        """
        color = self.keymap.get(key.lower())
        if color is None:
            logger.debug(f"Unmapped key: {key!r}")
            return False
        self.press(color)
        return True
