"""Permission to turn activations into presses."""

import logging

logger = logging.getLogger(__name__)


class InputGate:
    """
    Two-sided input permission.

    The gate is active only while the server has opened the player's turn
    and no local debounce cooldown is running. Owned and mutated by the
    turn state machine alone.
    """

    def __init__(self) -> None:
        self._server_open = False
        self._cooling_down = False

    @property
    def active(self) -> bool:
        return self._server_open and not self._cooling_down

    @property
    def server_open(self) -> bool:
        return self._server_open

    @property
    def cooling_down(self) -> bool:
        return self._cooling_down

    def open_turn(self) -> None:
        self._server_open = True
        logger.debug(f"Gate: turn opened (active={self.active})")

    def close_turn(self) -> None:
        self._server_open = False
        logger.debug("Gate: turn closed")

    def start_cooldown(self) -> None:
        self._cooling_down = True

    def end_cooldown(self) -> None:
        self._cooling_down = False
        logger.debug(f"Gate: cooldown over (active={self.active})")

    def force_pause(self) -> None:
        """Close both halves."""
        self._server_open = False
        self._cooling_down = False

    def __repr__(self) -> str:
        return f"InputGate(server_open={self._server_open}, cooling_down={self._cooling_down})"
