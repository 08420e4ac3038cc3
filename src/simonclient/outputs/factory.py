"""Build the indicator driver for an output configuration."""

import logging

from simonclient.exceptions import ConfigurationError
from simonclient.models import ConsoleOutputConfig, MidiOutputConfig, NullOutputConfig
from simonclient.protocols import IndicatorDriver

from .drivers import ConsoleIndicators, NullIndicators
from .midi import MidiLedIndicators

logger = logging.getLogger(__name__)


def create_indicator_driver(output) -> IndicatorDriver:
    """
    Create the indicator driver for ``output``.

    MIDI drivers are returned unopened; the session opens them.

    Raises:
        ConfigurationError: For the tui output, whose pads belong to the terminal UI
    """
    if isinstance(output, ConsoleOutputConfig):
        return ConsoleIndicators()
    if isinstance(output, MidiOutputConfig):
        return MidiLedIndicators(output.leds, port_filter=output.port, velocity=output.velocity)
    if isinstance(output, NullOutputConfig):
        return NullIndicators()
    raise ConfigurationError(
        user_message=f"Output '{output.type}' has no standalone driver",
        technical_message=f"create_indicator_driver() called with {type(output).__name__}",
        recovery_hint="The terminal UI draws its own indicators; run it with 'simonclient play'.",
    )
