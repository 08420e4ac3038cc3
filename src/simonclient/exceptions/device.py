"""Input/output device exceptions."""

from typing import Optional

from .base import SimonClientError


class DeviceError(SimonClientError):
    """A hardware device could not be used."""
    pass


class MidiDeviceNotFoundError(DeviceError):
    """No MIDI port matches the configured name."""

    def __init__(self, direction: str, port_filter: Optional[str], available: list[str]):
        """
        Initialize MIDI device not found error.

        Args:
            direction: "input" or "output"
            port_filter: Configured port name substring (None = any port)
            available: Port names that were available
        """
        wanted = f"matching '{port_filter}'" if port_filter else "of any kind"
        recovery = "Connect the device, or set the port name in your configuration."
        if available:
            recovery += "\nAvailable ports:\n" + "\n".join(f"  - {name}" for name in available)
        else:
            recovery += f"\nNo MIDI {direction} ports are available."
        super().__init__(
            user_message=f"No MIDI {direction} port {wanted} was found",
            technical_message=f"MIDI {direction} lookup failed: filter={port_filter!r}, available={available}",
            recovery_hint=recovery,
        )
        self.direction = direction
        self.port_filter = port_filter
        self.available = available
