"""LED indicators driven over a MIDI output port.

Each color is bound to one note number. Lighting sends note_on with the
configured velocity; turning off sends note_off. Most pad controllers and
Arduino MIDI firmwares light the matching LED on note_on.
"""

import logging
from collections.abc import Iterable

import mido

from simonclient.midi import open_output_port
from simonclient.models import ALL_COLORS, Color

logger = logging.getLogger(__name__)


class MidiLedIndicators:
    """Indicator driver for LEDs addressed by MIDI notes."""

    def __init__(
        self,
        leds: dict[Color, int],
        port_filter: str | None = None,
        velocity: int = 127,
        channel: int = 0,
    ):
        """
        Initialize the driver (does not open the port).

        Args:
            leds: MIDI note number per color
            port_filter: Substring of the output port name (None = first port)
            velocity: note_on velocity used to light an LED
            channel: MIDI channel (0-15)
        """
        self.leds = leds
        self.port_filter = port_filter
        self.velocity = velocity
        self.channel = channel
        self._port: mido.ports.BaseOutput | None = None
        self._lit: frozenset[Color] = frozenset()

    def open(self) -> None:
        """
        Open the MIDI output port and turn every LED off.

        Raises:
            MidiDeviceNotFoundError: If no port matches
        """
        if self._port is not None:
            logger.warning("MIDI LED output already open")
            return
        self._port = open_output_port(self.port_filter)
        self._send_all_off()

    def close(self) -> None:
        """Turn every LED off and close the port."""
        if self._port is None:
            return
        self._send_all_off()
        try:
            self._port.close()
        except Exception as e:
            logger.error(f"Error closing MIDI output port: {e}")
        self._port = None

    def show(self, colors: Iterable[Color]) -> None:
        lit = frozenset(colors)
        for color in ALL_COLORS:
            if color in lit and color not in self._lit:
                self._send(mido.Message("note_on", note=self.leds[color],
                                        velocity=self.velocity, channel=self.channel))
            elif color not in lit and color in self._lit:
                self._send(mido.Message("note_off", note=self.leds[color], channel=self.channel))
        self._lit = lit

    def clear(self) -> None:
        self.show(())

    def _send_all_off(self) -> None:
        for color in ALL_COLORS:
            self._send(mido.Message("note_off", note=self.leds[color], channel=self.channel))
        self._lit = frozenset()

    def _send(self, message: mido.Message) -> None:
        if self._port is None:
            logger.debug(f"MIDI LED output not open, dropping {message}")
            return
        try:
            self._port.send(message)
        except Exception as e:
            logger.error(f"Error sending MIDI message: {e}")
