"""Smoke tests for the TUI using Textual's test framework."""

from functools import partial

import pytest

from conftest import FakeSleep, wait_for
from simonclient.core import SessionController
from simonclient.models import ClientConfig, Color, PressMessage, TurnMessage, TurnPhase, TurnState
from simonclient.transport import MemoryChannel
from simonclient.tui import SimonSaysApp


@pytest.fixture
def config(fast_timing):
    return ClientConfig(player_id="Player3", timing=fast_timing)


@pytest.fixture
def channel():
    return MemoryChannel()


@pytest.fixture
def app(config, channel):
    return SimonSaysApp(config, channel=channel, session_factory=partial(SessionController, sleep=FakeSleep()))


@pytest.mark.integration
@pytest.mark.asyncio
class TestTUI:
    """The app runs a session and maps keys to presses."""

    async def test_mounts_pads(self, app):
        async with app.run_test() as pilot:
            await pilot.pause()
            for color in Color:
                assert app.pad(color) is not None
            assert app.query_one("StatusBar") is not None

    async def test_joins_on_start(self, app, channel):
        async with app.run_test():
            await wait_for(lambda: app.session.machine.state is TurnState.JOINING)
            assert channel.sent[0].join.id == "Player3"

    async def test_keys_become_presses_during_turn(self, app, channel):
        async with app.run_test() as pilot:
            machine = app.session.machine
            await wait_for(lambda: machine.state is TurnState.JOINING)

            await pilot.press("s")
            assert machine.presses_sent == 0

            channel.push(TurnMessage(turn=TurnPhase.BEGIN), TurnMessage(turn=TurnPhase.START_TURN))
            await wait_for(lambda: machine.gate_active)

            await pilot.press("s")
            assert channel.sent[-1] == PressMessage(press=Color.GREEN)

    async def test_quit_runs_closing_path(self, app):
        async with app.run_test() as pilot:
            machine = app.session.machine
            await wait_for(lambda: machine.state is TurnState.JOINING)

            await pilot.press("ctrl+q")
            await wait_for(lambda: app.return_code is not None)
            assert machine.terminated

        assert app.return_code == 0
