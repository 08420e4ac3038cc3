"""Threshold filter for noisy analog sensors.

A sensor reports a stream of values; touching it makes the value jump. A
sample counts as a touch only when it rises more than ``threshold`` above
the previous sample. Samples at or below ``touch_floor`` mean "no signal"
and drop the baseline, so the next sample only re-establishes it.
"""

import logging

from simonclient.models import ALL_COLORS, Color

from .base import BaseInputSource

logger = logging.getLogger(__name__)

NO_BASELINE = -1


class ThresholdInputSource(BaseInputSource):
    """Rising-edge detector with one baseline per color."""

    def __init__(self, threshold: int = 10, touch_floor: int = 1) -> None:
        super().__init__()
        self.threshold = threshold
        self.touch_floor = touch_floor
        self._previous: dict[Color, int] = {color: NO_BASELINE for color in ALL_COLORS}

    def sample(self, color: Color, value: int) -> bool:
        """
        Feed one sensor sample.

        Returns:
            True if the sample produced an activation
        """
        previous = self._previous[color]
        triggered = previous != NO_BASELINE and value > previous + self.threshold
        self._previous[color] = value if value > self.touch_floor else NO_BASELINE
        if triggered:
            logger.debug(f"{color.value} sensor rose {previous} -> {value}")
            self._emit(color)
        return triggered

    def baseline(self, color: Color) -> int:
        """Current baseline of ``color`` (-1 when there is none)."""
        return self._previous[color]

    def reset(self) -> None:
        """Forget every baseline."""
        for color in self._previous:
            self._previous[color] = NO_BASELINE
