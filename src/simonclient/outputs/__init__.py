"""Output side: indicator drivers and the animation sequencer."""

from .drivers import ConsoleIndicators, ConsoleMessages, NullIndicators, RecordingIndicators
from .factory import create_indicator_driver
from .midi import MidiLedIndicators
from .sequencer import AnimationSequencer

__all__ = [
    "AnimationSequencer",
    "ConsoleIndicators",
    "ConsoleMessages",
    "MidiLedIndicators",
    "NullIndicators",
    "RecordingIndicators",
    "create_indicator_driver",
]
