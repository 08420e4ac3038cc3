"""MIDI port lookup by name substring."""

import logging
from collections.abc import Callable

import mido

from simonclient.exceptions import MidiDeviceNotFoundError

logger = logging.getLogger(__name__)


def _name_filter(port_filter: str | None) -> Callable[[str], bool]:
    if not port_filter:
        return lambda name: True
    wanted = port_filter.lower()
    return lambda name: wanted in name.lower()


def find_port(available: list[str], port_filter: str | None) -> str | None:
    """
    Find the first available port whose name contains ``port_filter``.

    Matching is case-insensitive. With no filter the first port wins.
    """
    matches = [name for name in available if _name_filter(port_filter)(name)]
    if not matches:
        return None
    if len(matches) > 1:
        logger.debug(f"Several MIDI ports match {port_filter!r}: {matches}, using {matches[0]}")
    return matches[0]


def list_input_ports() -> list[str]:
    """Names of all MIDI input ports."""
    return mido.get_input_names()


def list_output_ports() -> list[str]:
    """Names of all MIDI output ports."""
    return mido.get_output_names()


def open_input_port(
    port_filter: str | None, callback: Callable[[mido.Message], None]
) -> mido.ports.BaseInput:
    """
    Open a MIDI input port with a message callback.

    The callback runs in mido's I/O thread, not on the event loop.

    Raises:
        MidiDeviceNotFoundError: If no input port matches
    """
    available = list_input_ports()
    port_name = find_port(available, port_filter)
    if port_name is None:
        raise MidiDeviceNotFoundError("input", port_filter, available)
    port = mido.open_input(port_name, callback=callback)
    logger.info(f"Opened MIDI input: {port_name}")
    return port


def open_output_port(port_filter: str | None) -> mido.ports.BaseOutput:
    """
    Open a MIDI output port.

    Raises:
        MidiDeviceNotFoundError: If no output port matches
    """
    available = list_output_ports()
    port_name = find_port(available, port_filter)
    if port_name is None:
        raise MidiDeviceNotFoundError("output", port_filter, available)
    port = mido.open_output(port_name)
    logger.info(f"Opened MIDI output: {port_name}")
    return port
