"""Pytest fixtures for tests."""

import asyncio
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from simonclient.core import TurnStateMachine
from simonclient.models import ClientConfig, Color, DigitalInputConfig, NullOutputConfig, TimingConfig
from simonclient.outputs import AnimationSequencer, RecordingIndicators
from simonclient.transport import MemoryChannel


class FakeSleep:
    """Sleep replacement that records durations and only yields to the loop."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        await asyncio.sleep(0)


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fake_sleep():
    return FakeSleep()


@pytest.fixture
def fast_timing():
    """Short real timers so tests can wait them out."""
    return TimingConfig(debounce_ms=20, turn_start_delay_ms=10, closing_delay_ms=0)


@pytest.fixture
def indicators():
    return RecordingIndicators()


@pytest.fixture
def sequencer(indicators, fake_sleep):
    return AnimationSequencer(indicators, sleep=fake_sleep)


@pytest.fixture
def channel():
    return MemoryChannel()


@pytest.fixture
def machine(channel, sequencer, fast_timing):
    return TurnStateMachine(channel, sequencer, timing=fast_timing)


@pytest.fixture
def button_mapping():
    return {Color.RED: 60, Color.GREEN: 62, Color.YELLOW: 64, Color.BLUE: 65}


@pytest.fixture
def headless_config(button_mapping, fast_timing):
    """Config with MIDI buttons and no indicators (devices get injected in tests)."""
    return ClientConfig(
        input=DigitalInputConfig(buttons=button_mapping),
        output=NullOutputConfig(),
        timing=fast_timing,
        player_id="Player7",
    )


async def wait_for(predicate, timeout: float = 1.0) -> None:
    """Poll ``predicate`` on the loop until it is true."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not reached in time")
        await asyncio.sleep(0.005)
