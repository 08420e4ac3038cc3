"""Input sources: everything that produces color activations."""

from .base import ActivationEvent, BaseInputSource
from .discrete import DiscreteInputSource
from .factory import create_input_source
from .midi import MidiButtonInput, MidiSensorInput
from .threshold import NO_BASELINE, ThresholdInputSource

__all__ = [
    "NO_BASELINE",
    "ActivationEvent",
    "BaseInputSource",
    "DiscreteInputSource",
    "MidiButtonInput",
    "MidiSensorInput",
    "ThresholdInputSource",
    "create_input_source",
]
