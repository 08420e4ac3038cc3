"""MIDI-backed input sources.

mido delivers messages on its own I/O thread. Each message is handed to the
event loop with ``call_soon_threadsafe`` so that filtering and the state
machine only ever run on the loop thread.
"""

import asyncio
import logging

import mido

from simonclient.midi import open_input_port
from simonclient.models import Color

from .discrete import DiscreteInputSource
from .threshold import ThresholdInputSource

logger = logging.getLogger(__name__)


class _MidiPortMixin:
    """Owns a mido input port and marshals its messages onto the loop."""

    port_filter: str | None
    _port: mido.ports.BaseInput | None
    _loop: asyncio.AbstractEventLoop | None

    def _open_port(self) -> None:
        self._loop = asyncio.get_running_loop()
        self._port = open_input_port(self.port_filter, self._midi_callback)

    def _close_port(self) -> None:
        if self._port is None:
            return
        try:
            self._port.close()
        except Exception as e:
            logger.error(f"Error closing MIDI input port: {e}")
        self._port = None

    def _midi_callback(self, msg: mido.Message) -> None:
        # mido I/O thread
        loop = self._loop
        if loop is None or loop.is_closed():
            return
        loop.call_soon_threadsafe(self.handle_message, msg)

    def handle_message(self, msg: mido.Message) -> None:
        raise NotImplementedError


class MidiButtonInput(_MidiPortMixin, DiscreteInputSource):
    """Buttons wired to MIDI notes. A note_on with velocity > 0 is one press."""

    def __init__(self, buttons: dict[Color, int], port_filter: str | None = None) -> None:
        super().__init__()
        self.port_filter = port_filter
        self._notes = {note: color for color, note in buttons.items()}
        self._port = None
        self._loop = None

    def start(self) -> None:
        """
        Open the MIDI port and start forwarding presses.

        Must be called from within the running event loop.

        Raises:
            MidiDeviceNotFoundError: If no input port matches
        """
        self._open_port()
        super().start()

    def stop(self) -> None:
        super().stop()
        self._close_port()

    def handle_message(self, msg: mido.Message) -> None:
        """Translate one MIDI message (on the loop thread)."""
        if msg.type != "note_on" or msg.velocity == 0:
            return
        color = self._notes.get(msg.note)
        if color is None:
            logger.debug(f"Unmapped MIDI note: {msg.note}")
            return
        self.press(color)


class MidiSensorInput(_MidiPortMixin, ThresholdInputSource):
    """Analog sensors streamed as MIDI control changes (one CC per color)."""

    def __init__(
        self,
        sensors: dict[Color, int],
        port_filter: str | None = None,
        threshold: int = 10,
        touch_floor: int = 1,
    ) -> None:
        super().__init__(threshold=threshold, touch_floor=touch_floor)
        self.port_filter = port_filter
        self._controls = {control: color for color, control in sensors.items()}
        self._port = None
        self._loop = None

    def start(self) -> None:
        """
        Open the MIDI port and start sampling.

        Raises:
            MidiDeviceNotFoundError: If no input port matches
        """
        self.reset()
        self._open_port()
        super().start()

    def stop(self) -> None:
        super().stop()
        self._close_port()

    def handle_message(self, msg: mido.Message) -> None:
        """Feed one control change into the threshold filter (on the loop thread)."""
        if msg.type != "control_change":
            return
        color = self._controls.get(msg.control)
        if color is None:
            return
        self.sample(color, msg.value)
