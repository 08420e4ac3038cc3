"""Select the input source for an input configuration."""

from simonclient.exceptions import UnknownInputModalityError
from simonclient.models import AnalogInputConfig, DigitalInputConfig, KeyboardInputConfig

from .base import BaseInputSource
from .discrete import DiscreteInputSource
from .midi import MidiButtonInput, MidiSensorInput


def create_input_source(config) -> BaseInputSource:
    """
    Create the input source described by ``config``.

    Raises:
        UnknownInputModalityError: If the configuration names no known modality
    """
    if isinstance(config, KeyboardInputConfig):
        return DiscreteInputSource(config.keymap)
    if isinstance(config, DigitalInputConfig):
        return MidiButtonInput(config.buttons, port_filter=config.port)
    if isinstance(config, AnalogInputConfig):
        return MidiSensorInput(
            config.sensors,
            port_filter=config.port,
            threshold=config.threshold,
            touch_floor=config.touch_floor,
        )
    raise UnknownInputModalityError(getattr(config, "type", type(config).__name__))
