"""Animation sequencer: plays AnimationSequences on an indicator driver.

Sequences are queued and played by one runner task, strictly one after the
other. Within a sequence each step lights its colors and holds; after the
last step every indicator is cleared and the completion callback runs.
A driver error ends the current sequence early; its callback still runs.
Only then does the next queued sequence start, so two sequences never
overlap on the same driver.
"""

import asyncio
import logging
from collections import deque
from collections.abc import Awaitable, Callable

from simonclient.models import AnimationSequence
from simonclient.protocols import IndicatorDriver

logger = logging.getLogger(__name__)

CompletionCallback = Callable[[], None]
SleepFunction = Callable[[float], Awaitable[None]]


class AnimationSequencer:
    """
    Single-threaded FIFO player for animation sequences.

    Example:
        ```python
        sequencer = AnimationSequencer(ConsoleIndicators())
        sequencer.play(animation.loss(), on_complete=lambda: print("done"))
        await sequencer.wait_idle()
        ```
    """

    def __init__(self, driver: IndicatorDriver, sleep: SleepFunction = asyncio.sleep):
        """
        Initialize the sequencer.

        Args:
            driver: Indicator driver that renders each step
            sleep: Coroutine used to hold a step (injectable for tests)
        """
        self.driver = driver
        self._sleep = sleep
        self._queue: deque[tuple[AnimationSequence, CompletionCallback | None]] = deque()
        self._runner: asyncio.Task | None = None
        self._current: AnimationSequence | None = None
        self._idle = asyncio.Event()
        self._idle.set()
        self._stopped = False
        self.played: list[str] = []

    def play(self, sequence: AnimationSequence, on_complete: CompletionCallback | None = None) -> None:
        """
        Queue a sequence for playback.

        Must be called from within the running event loop. Returns
        immediately; ``on_complete`` runs after the sequence's last step
        has been cleared.

        Args:
            sequence: Steps to play
            on_complete: Optional callback invoked once the sequence finished
        """
        if self._stopped:
            logger.debug(f"Sequencer stopped, not playing {sequence.name}")
            return

        self._queue.append((sequence, on_complete))
        self._idle.clear()
        logger.debug(f"Queued animation {sequence.name} ({len(self._queue)} pending)")

        if self._runner is None or self._runner.done():
            self._runner = asyncio.get_running_loop().create_task(
                self._run(), name="animation-sequencer"
            )

    async def _run(self) -> None:
        while self._queue:
            sequence, on_complete = self._queue.popleft()
            self._current = sequence
            try:
                await self._play_steps(sequence)
            except Exception as e:
                logger.error(f"Driver failed while playing {sequence.name}: {e}", exc_info=True)
            finally:
                self._current = None
                self._clear_driver()
            self.played.append(sequence.name)
            logger.debug(f"Finished animation {sequence.name}")

            if on_complete is not None:
                try:
                    on_complete()
                except Exception as e:
                    logger.error(f"Error in completion callback of {sequence.name}: {e}", exc_info=True)
        self._idle.set()

    async def _play_steps(self, sequence: AnimationSequence) -> None:
        for step in sequence.steps:
            if step.is_off:
                self.driver.clear()
            else:
                self.driver.show(step.active_colors)
            await self._sleep(step.hold_seconds)

    def _clear_driver(self) -> None:
        try:
            self.driver.clear()
        except Exception as e:
            logger.error(f"Driver failed to clear indicators: {e}", exc_info=True)

    @property
    def idle(self) -> bool:
        """True when nothing is playing or queued."""
        return self._idle.is_set()

    @property
    def current(self) -> AnimationSequence | None:
        """The sequence currently playing, if any."""
        return self._current

    @property
    def pending(self) -> int:
        """Number of queued sequences that have not started yet."""
        return len(self._queue)

    async def wait_idle(self) -> None:
        """Wait until every queued sequence has finished."""
        await self._idle.wait()

    async def stop(self) -> None:
        """Cancel playback, drop queued sequences and turn every indicator off."""
        self._stopped = True
        self._queue.clear()
        if self._runner is not None and not self._runner.done():
            self._runner.cancel()
            try:
                await self._runner
            except asyncio.CancelledError:
                pass
        self._clear_driver()
        self._idle.set()
