"""MIDI port helpers shared by MIDI inputs and LED outputs."""

from .ports import find_port, list_input_ports, list_output_ports, open_input_port, open_output_port

__all__ = [
    "find_port",
    "list_input_ports",
    "list_output_ports",
    "open_input_port",
    "open_output_port",
]
