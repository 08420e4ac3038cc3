"""Enumerations for the Simon Says client."""

from enum import Enum


class Color(str, Enum):
    """The four game colors, one per physical indicator."""

    RED = "RED"
    GREEN = "GREEN"
    YELLOW = "YELLOW"
    BLUE = "BLUE"

    @property
    def display_name(self) -> str:
        """Human-readable name (e.g. 'Red')."""
        return self.value.capitalize()

    @property
    def style(self) -> str:
        """Terminal style name used by click/rich for this color."""
        return self.value.lower()


# Order used by the boot animation and for iterating over indicators
ALL_COLORS: tuple[Color, ...] = (Color.RED, Color.BLUE, Color.YELLOW, Color.GREEN)


class TurnPhase(str, Enum):
    """Game phases pushed by the server."""

    BEGIN = "BEGIN"            # Both players joined, game starts
    START_TURN = "START_TURN"  # This player may press
    STOP_TURN = "STOP_TURN"    # Input disabled, other player's turn
    WIN = "WIN"                # This player won
    LOSE = "LOSE"              # This player lost


class TurnState(str, Enum):
    """Client-side turn states."""

    IDLE = "idle"              # Nothing sent yet
    JOINING = "joining"        # Join sent, waiting for BEGIN
    WAITING = "waiting"        # Game started, no turn assigned yet
    MY_TURN = "my_turn"        # Server allows this player's input
    OTHER_TURN = "other_turn"  # Opponent is playing
    WIN = "win"                # Game over, won
    LOSE = "lose"              # Game over, lost
    TERMINATED = "terminated"  # Stream ended

    @property
    def is_terminal(self) -> bool:
        """True once the stream has ended."""
        return self is TurnState.TERMINATED


class InputModality(str, Enum):
    """Supported input device families."""

    KEYBOARD = "keyboard"  # Terminal UI keys and clicks
    DIGITAL = "digital"    # MIDI buttons (note on = press)
    ANALOG = "analog"      # Analog sensors sampled over MIDI CC
