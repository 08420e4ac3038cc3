"""Terminal UI for playing with the keyboard."""

import logging
from collections.abc import Iterable

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.widgets import Footer, Header, RichLog

from simonclient.core import SessionController
from simonclient.exceptions import SimonClientError
from simonclient.inputs import DiscreteInputSource
from simonclient.models import ALL_COLORS, ClientConfig, Color
from simonclient.protocols import UIEvent
from simonclient.transport import ProtocolChannel

from .widgets import ColorPad, StatusBar

logger = logging.getLogger(__name__)


class PadIndicators:
    """IndicatorDriver that lights the app's color pads."""

    def __init__(self, app: "SimonSaysApp"):
        self._app = app

    def show(self, colors: Iterable[Color]) -> None:
        lit = frozenset(colors)
        for color in ALL_COLORS:
            pad = self._app.pad(color)
            if pad is not None:
                pad.set_lit(color in lit)

    def clear(self) -> None:
        self.show(())


class SimonSaysApp(App):
    """
    Textual app that runs one game session.

    The app feeds keys and pad clicks to a DiscreteInputSource, lights its
    four pads through PadIndicators and observes the session messages.
    The session runs as a worker on the app's event loop; when it ends the
    app exits with the session's exit code.

    Implements UIObserver via structural subtyping.
    """

    TITLE = "Simon Says"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
        Binding("escape", "quit", "Quit", show=False),
    ]

    CSS = """
    #pads {
        height: 1fr;
        min-height: 7;
    }

    #messages {
        height: 10;
        border: solid $panel;
    }
    """

    def __init__(
        self,
        config: ClientConfig,
        channel: ProtocolChannel | None = None,
        session_factory=SessionController,
    ):
        """
        Initialize the app.

        Args:
            config: Client configuration (keyboard input, tui output)
            channel: Optional channel to use instead of the configured server
            session_factory: Callable building the session (injectable for tests)
        """
        super().__init__()
        self.config = config
        keymap = getattr(config.input, "keymap", None)
        self.input_source = DiscreteInputSource(keymap)
        self.session = session_factory(
            config,
            channel=channel,
            input_source=self.input_source,
            driver=PadIndicators(self),
        )
        self.session.add_observer(self)
        self.error: SimonClientError | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="pads"):
            for color in ALL_COLORS:
                yield ColorPad(color, key_hint=self._key_hint(color))
        yield RichLog(id="messages", markup=True, wrap=True)
        yield StatusBar(self.session.player.id, self.config.server.url)
        yield Footer()

    def _key_hint(self, color: Color) -> str:
        keys = [key for key, mapped in self.input_source.keymap.items() if mapped is color]
        return " / ".join(keys)

    def on_mount(self) -> None:
        self.set_interval(0.1, self._refresh_status)
        self.run_worker(self._run_session(), name="session", exclusive=True)

    async def _run_session(self) -> None:
        try:
            code = await self.session.run()
        except SimonClientError as e:
            logger.error(f"Session failed: {e.technical_message}")
            self.error = e
            code = e.exit_code
        self.exit(return_code=code)

    def pad(self, color: Color) -> ColorPad | None:
        """Pad widget for ``color`` (None before the app is mounted)."""
        try:
            return self.query_one(f"#pad-{color.style}", ColorPad)
        except NoMatches:
            return None

    # =================================================================
    # Input
    # =================================================================

    def on_key(self, event: events.Key) -> None:
        if event.character and self.input_source.press_key(event.character):
            event.stop()

    def on_color_pad_pressed(self, message: ColorPad.Pressed) -> None:
        self.input_source.press(message.color)

    async def action_quit(self) -> None:
        """Quit: ends the stream and runs the closing animation."""
        if self.session.running:
            await self.session.quit()
        else:
            self.exit(return_code=0)

    # =================================================================
    # UIObserver
    # =================================================================

    def on_ui_event(self, event: UIEvent, payload) -> None:
        log = self.query_one("#messages", RichLog)
        if event is UIEvent.MESSAGE:
            log.write(f"[b]{payload}[/b]")
            self.sub_title = payload
        elif event is UIEvent.LIGHTUP:
            log.write(f"[{payload.style}]{payload.display_name}[/]")

    def _refresh_status(self) -> None:
        machine = self.session.machine
        self.query_one(StatusBar).update_state(machine.state, machine.gate_active)
