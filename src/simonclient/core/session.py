"""Session lifecycle: wire the components together and run one game."""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from simonclient.exceptions import ErrorContext, TransportError
from simonclient.inputs import BaseInputSource, create_input_source
from simonclient.models import ClientConfig, Player, StreamEnd
from simonclient.models import animation
from simonclient.outputs import AnimationSequencer, create_indicator_driver
from simonclient.protocols import IndicatorDriver, UIObserver
from simonclient.transport import ProtocolChannel, create_channel

from .state_machine import MSG_WELCOME, TurnStateMachine

logger = logging.getLogger(__name__)

EXIT_OK = 0


class SessionController:
    """
    Owns every component of one game session.

    Example:
        ```python
        session = SessionController(ClientConfig.load_or_default())
        session.add_observer(my_ui)
        exit_code = await session.run()
        ```

    Components may be injected (the terminal UI passes its own input
    source and pad driver, tests pass a MemoryChannel); anything not
    injected is built from the configuration.
    """

    def __init__(
        self,
        config: ClientConfig,
        channel: ProtocolChannel | None = None,
        input_source: BaseInputSource | None = None,
        driver: IndicatorDriver | None = None,
        player: Player | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Build the session from a configuration.

        Raises:
            UnknownInputModalityError: If the input modality is not supported
            ConfigurationError: If the output cannot be driven standalone
        """
        self.config = config
        if player is None:
            player = Player(id=config.player_id) if config.player_id else Player.generate()
        self.player = player

        self.channel = channel if channel is not None else create_channel(config.server)
        self.input_source = input_source if input_source is not None else create_input_source(config.input)
        self.driver = driver if driver is not None else create_indicator_driver(config.output)

        self.sequencer = AnimationSequencer(self.driver, sleep=sleep)
        self.machine = TurnStateMachine(self.channel, self.sequencer, timing=config.timing)
        self.input_source.set_handler(self.machine.activate)

        self._running = False

    def add_observer(self, observer: UIObserver) -> None:
        """Register a UI observer before (or while) the session runs."""
        self.machine.register_observer(observer)

    @property
    def running(self) -> bool:
        return self._running

    async def run(self) -> int:
        """
        Play one session until the stream ends and the closing animation is over.

        Devices are opened before any network I/O so that a missing device
        aborts startup without touching the server.

        Returns:
            Process exit code (0)

        Raises:
            DeviceError: If a MIDI device cannot be opened
            TransportError: If the server cannot be reached
        """
        if self._running:
            raise RuntimeError("Session is already running")
        self._running = True
        try:
            with ErrorContext("opening devices", logger_instance=logger):
                self._open_driver()
                self.input_source.start()

            self.sequencer.play(animation.boot())
            self.machine.announce(MSG_WELCOME)

            await self.channel.open()
            self.machine.join(self.player)

            await self._pump()
            await self.machine.wait_terminated()
            logger.info(f"Session for {self.player.id} finished")
            return EXIT_OK
        finally:
            await self._shutdown()

    async def _pump(self) -> None:
        """Feed inbound messages to the state machine in arrival order."""
        try:
            async for message in self.channel:
                self.machine.handle(message)
        except TransportError as e:
            logger.warning(f"Game stream failed: {e.technical_message}")
        self.machine.handle(StreamEnd())

    async def quit(self) -> None:
        """End the session from the client side; runs the normal closing path."""
        logger.info("Quit requested")
        await self.channel.close()

    async def _shutdown(self) -> None:
        self.input_source.stop()
        await self.sequencer.stop()
        await self.channel.close()
        self._close_driver()
        self._running = False

    def _open_driver(self) -> None:
        opener = getattr(self.driver, "open", None)
        if callable(opener):
            opener()

    def _close_driver(self) -> None:
        closer = getattr(self.driver, "close", None)
        if callable(closer):
            closer()
