"""Tests for the animation sequencer."""

import asyncio

import pytest

from simonclient.models import Color
from simonclient.models import animation
from simonclient.outputs import AnimationSequencer, RecordingIndicators

RED = frozenset({Color.RED})
OFF = frozenset()


class EventLog:
    """Driver that writes frames and callbacks into one ordered log."""

    def __init__(self):
        self.events: list[tuple[str, object]] = []

    def show(self, colors):
        self.events.append(("show", frozenset(colors)))

    def clear(self):
        self.events.append(("clear", None))

    def done(self, name):
        return lambda: self.events.append(("done", name))


class BrokenDriver(RecordingIndicators):
    """Driver whose first ``fail_shows`` calls to show() raise OSError."""

    def __init__(self, fail_shows: int = 1, fail_clear: bool = False):
        super().__init__()
        self.fail_shows = fail_shows
        self.fail_clear = fail_clear

    def show(self, colors):
        if self.fail_shows > 0:
            self.fail_shows -= 1
            raise OSError("device unplugged")
        super().show(colors)

    def clear(self):
        if self.fail_clear:
            raise OSError("device unplugged")
        super().clear()


@pytest.mark.unit
@pytest.mark.asyncio
class TestAnimationSequencer:
    """Playback order, holds and completion callbacks."""

    async def test_light_up_frames(self, sequencer, indicators, fake_sleep):
        """A single-color flash lights the color, holds it, then clears."""
        sequencer.play(animation.light_up(Color.RED))
        await sequencer.wait_idle()

        assert indicators.frames == [RED, OFF]
        assert fake_sleep.calls == [0.2]
        assert sequencer.played == ["light_up:RED"]

    async def test_loss_pulses(self, sequencer, indicators, fake_sleep):
        """The loss animation pulses red three times."""
        sequencer.play(animation.loss())
        await sequencer.wait_idle()

        assert indicators.lit_frames == [RED, RED, RED]
        assert fake_sleep.calls == [0.5, 0.25] * 3
        assert indicators.frames[-1] == OFF

    async def test_closing_starts_with_delay(self, sequencer, indicators, fake_sleep):
        sequencer.play(animation.closing(Color.GREEN, delay_ms=1000))
        await sequencer.wait_idle()

        assert fake_sleep.calls[0] == 1.0
        assert indicators.frames[0] == OFF
        assert indicators.lit_frames == [frozenset({Color.GREEN})] * 3

    async def test_sequences_never_overlap(self, fake_sleep):
        """The next sequence starts only after the previous completion callback."""
        log = EventLog()
        sequencer = AnimationSequencer(log, sleep=fake_sleep)

        sequencer.play(animation.loss(), on_complete=log.done("loss"))
        sequencer.play(animation.light_up(Color.BLUE), on_complete=log.done("blue"))
        assert sequencer.pending == 2

        await sequencer.wait_idle()

        done_loss = log.events.index(("done", "loss"))
        first_blue = log.events.index(("show", frozenset({Color.BLUE})))
        assert done_loss < first_blue
        assert log.events[-1] == ("done", "blue")
        assert sequencer.played == ["loss", "light_up:BLUE"]

    async def test_callback_error_does_not_stop_queue(self, sequencer):
        """A failing completion callback is logged and the queue keeps going."""
        def boom():
            raise RuntimeError("boom")

        sequencer.play(animation.light_up(Color.RED), on_complete=boom)
        sequencer.play(animation.light_up(Color.GREEN))
        await sequencer.wait_idle()

        assert sequencer.played == ["light_up:RED", "light_up:GREEN"]

    async def test_driver_error_still_completes(self, fake_sleep):
        """A driver failure ends the sequence; its callback runs and the queue continues."""
        driver = BrokenDriver(fail_shows=1)
        sequencer = AnimationSequencer(driver, sleep=fake_sleep)
        done = []

        sequencer.play(animation.boot(), on_complete=lambda: done.append("boot"))
        sequencer.play(animation.light_up(Color.RED), on_complete=lambda: done.append("red"))
        await asyncio.wait_for(sequencer.wait_idle(), timeout=1.0)

        assert done == ["boot", "red"]
        assert sequencer.played == ["boot", "light_up:RED"]
        assert RED in driver.frames
        assert sequencer.idle

    async def test_failing_clear_does_not_block(self, fake_sleep):
        driver = BrokenDriver(fail_shows=0, fail_clear=True)
        sequencer = AnimationSequencer(driver, sleep=fake_sleep)
        done = []

        sequencer.play(animation.light_up(Color.GREEN), on_complete=lambda: done.append("green"))
        sequencer.play(animation.light_up(Color.BLUE), on_complete=lambda: done.append("blue"))
        await asyncio.wait_for(sequencer.wait_idle(), timeout=1.0)

        assert done == ["green", "blue"]

    async def test_play_from_callback_is_chained(self, sequencer):
        sequencer.play(
            animation.light_up(Color.RED),
            on_complete=lambda: sequencer.play(animation.light_up(Color.YELLOW)),
        )
        await sequencer.wait_idle()

        assert sequencer.played == ["light_up:RED", "light_up:YELLOW"]

    async def test_idle_state(self, sequencer):
        assert sequencer.idle
        sequencer.play(animation.boot())
        assert not sequencer.idle
        await sequencer.wait_idle()
        assert sequencer.idle
        assert sequencer.current is None

    async def test_stop_drops_queue_and_clears(self, indicators):
        """stop() cancels playback; later play() calls are ignored."""
        sequencer = AnimationSequencer(indicators)  # real sleep, so it is mid-step
        sequencer.play(animation.closing(Color.RED, delay_ms=0))
        sequencer.play(animation.loss())
        await asyncio.sleep(0.01)

        await sequencer.stop()

        assert sequencer.idle
        assert sequencer.played == []
        assert indicators.frames[-1] == OFF

        sequencer.play(animation.boot())
        assert sequencer.idle


@pytest.mark.unit
class TestAnimations:
    """Shape of the named sequences."""

    def test_boot_order(self):
        seq = animation.boot()
        lit = [step.active_colors for step in seq.steps]
        assert lit[:4] == [frozenset({c}) for c in (Color.RED, Color.BLUE, Color.YELLOW, Color.GREEN)]
        assert lit[4] == frozenset(Color)
        assert [step.hold_ms for step in seq.steps] == [200, 200, 200, 200, 100]

    def test_joined(self):
        seq = animation.joined()
        assert seq.steps[0].active_colors == {Color.YELLOW, Color.RED}
        assert seq.steps[1].active_colors == {Color.GREEN, Color.BLUE}
        assert seq.duration_ms == 500

    def test_input_enabled(self):
        seq = animation.input_enabled()
        assert len(seq.steps) == 1
        assert seq.steps[0].active_colors == frozenset(Color)
        assert seq.steps[0].hold_ms == 1000

    def test_closing_duration(self):
        seq = animation.closing(Color.RED, delay_ms=1000)
        assert seq.name == "closing"
        assert seq.duration_ms == 1000 + 3 * (2000 + 250)

    def test_step_hold_cannot_be_negative(self):
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            animation.step([Color.RED], -1)
