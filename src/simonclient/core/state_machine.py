"""Turn state machine: the core of the client.

Reconciles the server's turn phases, local input activations and the
indicator animations. It is the only writer of the input gate and the turn
state.

States::

    IDLE -> JOINING -> WAITING -> MY_TURN <-> OTHER_TURN -> WIN | LOSE -> TERMINATED
"""

import asyncio
import logging
from collections.abc import Callable

from simonclient.exceptions import SessionStateError, TransportError
from simonclient.models import (
    Color,
    InboundMessage,
    JoinMessage,
    LightUpMessage,
    Player,
    PressMessage,
    StreamEnd,
    TimingConfig,
    TurnMessage,
    TurnPhase,
    TurnState,
)
from simonclient.models import animation
from simonclient.outputs import AnimationSequencer
from simonclient.protocols import UIEvent, UIObserver
from simonclient.transport import ProtocolChannel
from simonclient.utils import ObserverManager

from .gate import InputGate

logger = logging.getLogger(__name__)

MSG_WELCOME = "Welcome to Simon Says!"
MSG_GAME_STARTED = "The game has started"
MSG_YOUR_TURN = "Your Turn!"
MSG_OTHER_TURN_AFTER_MINE = "Nice Job! Now it's the other player's turn"
MSG_OTHER_TURN_FIRST = "It's the other player's turn first"
MSG_WIN = "You Win!"
MSG_LOSE = "You Lost!"
MSG_GOODBYE = "Thanks for Playing"


class TurnStateMachine:
    """
    Turn-gating state machine for one game session.

    Everything runs on the session's event loop: inbound messages, input
    activations and timer callbacks are processed in arrival order.
    """

    def __init__(
        self,
        channel: ProtocolChannel,
        sequencer: AnimationSequencer,
        timing: TimingConfig | None = None,
        on_terminated: Callable[[], None] | None = None,
    ):
        """
        Initialize the state machine.

        Args:
            channel: Channel used to send Join and Press messages
            sequencer: Sequencer that plays feedback animations
            timing: Debounce and delay settings
            on_terminated: Called once the closing animation has finished
        """
        self._channel = channel
        self._sequencer = sequencer
        self._timing = timing or TimingConfig()
        self._on_terminated = on_terminated

        self._state = TurnState.IDLE
        self._gate = InputGate()
        self._had_turn = False
        self._outcome: TurnPhase | None = None
        self._presses_sent = 0
        self._player: Player | None = None

        self._turn_start_timer: asyncio.TimerHandle | None = None
        self._debounce_timer: asyncio.TimerHandle | None = None
        self._terminated = asyncio.Event()

        self._observers = ObserverManager[UIObserver](observer_type_name="UI")

    # =================================================================
    # Observers
    # =================================================================

    def register_observer(self, observer: UIObserver) -> None:
        """Register an observer for lightup and message notifications."""
        self._observers.register(observer)

    def unregister_observer(self, observer: UIObserver) -> None:
        self._observers.unregister(observer)

    def announce(self, text: str) -> None:
        """Publish a status message to every observer."""
        logger.info(f"Message: {text}")
        self._observers.notify("on_ui_event", UIEvent.MESSAGE, text)

    # =================================================================
    # Queries
    # =================================================================

    @property
    def state(self) -> TurnState:
        return self._state

    @property
    def gate_active(self) -> bool:
        """True if an activation would be sent as a press right now."""
        return self._state is TurnState.MY_TURN and self._gate.active

    @property
    def had_turn(self) -> bool:
        """True once this player has been given a turn."""
        return self._had_turn

    @property
    def outcome(self) -> TurnPhase | None:
        """WIN or LOSE once the game has been decided."""
        return self._outcome

    @property
    def presses_sent(self) -> int:
        return self._presses_sent

    @property
    def player(self) -> Player | None:
        return self._player

    @property
    def terminated(self) -> bool:
        """True once the closing animation has completed."""
        return self._terminated.is_set()

    async def wait_terminated(self) -> None:
        """Wait until the closing animation has completed."""
        await self._terminated.wait()

    # =================================================================
    # Outbound
    # =================================================================

    def join(self, player: Player) -> None:
        """
        Send the join request. Only valid once, before anything else.

        Raises:
            SessionStateError: If a join was already sent
        """
        if self._state is not TurnState.IDLE:
            raise SessionStateError(
                user_message="This session has already joined the game",
                technical_message=f"join() called in state {self._state.value}",
            )
        self._player = player
        self._state = TurnState.JOINING
        self._channel.send(JoinMessage(join=player))
        logger.info(f"Joining as {player.id}")

    def activate(self, color: Color) -> None:
        """
        Handle an activation from the input source.

        The activation becomes a press only during this player's turn while
        the gate is active. Sending closes the gate until the debounce timer
        fires.
        """
        if not self.gate_active:
            logger.debug(f"Dropped {color.value}: state={self._state.value}, {self._gate!r}")
            return

        self._gate.start_cooldown()
        try:
            self._channel.send(PressMessage(press=color))
        except TransportError as e:
            logger.warning(f"Could not send press {color.value}: {e}")
            self._gate.end_cooldown()
            return
        self._presses_sent += 1
        logger.info(f"Pressed {color.value}")

        self._cancel_debounce()
        self._debounce_timer = asyncio.get_running_loop().call_later(
            self._timing.debounce_ms / 1000.0, self._debounce_expired
        )

    def _debounce_expired(self) -> None:
        self._debounce_timer = None
        self._gate.end_cooldown()

    # =================================================================
    # Inbound
    # =================================================================

    def handle(self, message: InboundMessage | StreamEnd) -> None:
        """Dispatch one inbound message."""
        if isinstance(message, TurnMessage):
            self.on_turn(message.turn)
        elif isinstance(message, LightUpMessage):
            self.on_light_up(message.lightup)
        elif isinstance(message, StreamEnd):
            self.end_of_stream()
        else:
            logger.warning(f"Ignoring unexpected message: {message!r}")

    def on_turn(self, phase: TurnPhase) -> None:
        """Apply a turn phase pushed by the server."""
        if self._state is TurnState.TERMINATED:
            logger.debug(f"Ignoring {phase.value} after stream end")
            return

        logger.info(f"Phase {phase.value} in state {self._state.value}")
        if phase is TurnPhase.BEGIN:
            self._on_begin()
        elif phase is TurnPhase.START_TURN:
            self._on_start_turn()
        elif phase is TurnPhase.STOP_TURN:
            self._on_stop_turn()
        elif phase is TurnPhase.WIN:
            self._on_game_over(TurnState.WIN, MSG_WIN)
        elif phase is TurnPhase.LOSE:
            self._on_game_over(TurnState.LOSE, MSG_LOSE)
            self._sequencer.play(animation.loss())

    def _on_begin(self) -> None:
        self._close_turn()
        self._state = TurnState.WAITING
        self._sequencer.play(animation.joined())
        self.announce(MSG_GAME_STARTED)

    def _on_start_turn(self) -> None:
        if self._state not in (TurnState.WAITING, TurnState.OTHER_TURN):
            logger.warning(f"Ignoring START_TURN in state {self._state.value}")
            return

        self._state = TurnState.MY_TURN
        self._had_turn = True
        self.announce(MSG_YOUR_TURN)

        self._cancel_turn_start()
        self._turn_start_timer = asyncio.get_running_loop().call_later(
            self._timing.turn_start_delay_ms / 1000.0, self._turn_start_expired
        )

    def _turn_start_expired(self) -> None:
        self._turn_start_timer = None
        if self._state is not TurnState.MY_TURN:
            return
        self._gate.open_turn()
        self._sequencer.play(animation.input_enabled())
        logger.info("Input enabled")

    def _on_stop_turn(self) -> None:
        self._close_turn()
        if self._state not in (TurnState.MY_TURN, TurnState.WAITING):
            logger.warning(f"STOP_TURN in state {self._state.value}, input stays paused")
            return

        self._state = TurnState.OTHER_TURN
        self.announce(MSG_OTHER_TURN_AFTER_MINE if self._had_turn else MSG_OTHER_TURN_FIRST)

    def _on_game_over(self, state: TurnState, text: str) -> None:
        self._close_turn()
        self._state = state
        self._outcome = TurnPhase.WIN if state is TurnState.WIN else TurnPhase.LOSE
        self.announce(text)

    def on_light_up(self, color: Color) -> None:
        """Show one color of the server's pattern."""
        if self._state is TurnState.TERMINATED:
            logger.debug(f"Ignoring light-up {color.value} after stream end")
            return
        self._sequencer.play(animation.light_up(color))
        self._observers.notify("on_ui_event", UIEvent.LIGHTUP, color)

    def end_of_stream(self) -> None:
        """
        Handle the end of the inbound stream (graceful or not).

        Pauses input at once and queues the single closing animation; the
        termination callback runs when it completes. Repeated calls are
        ignored.
        """
        if self._state is TurnState.TERMINATED:
            return

        logger.info(f"Stream ended in state {self._state.value}")
        self._close_turn()
        self._gate.force_pause()
        self._state = TurnState.TERMINATED
        self.announce(MSG_GOODBYE)

        color = Color.GREEN if self._outcome is TurnPhase.WIN else Color.RED
        self._sequencer.play(
            animation.closing(color, delay_ms=self._timing.closing_delay_ms),
            on_complete=self._finish,
        )

    def _finish(self) -> None:
        self._terminated.set()
        logger.info("Session terminated")
        if self._on_terminated is not None:
            self._on_terminated()

    # =================================================================
    # Timers
    # =================================================================

    def _close_turn(self) -> None:
        """Close the server half of the gate and drop any pending timers."""
        self._cancel_turn_start()
        self._cancel_debounce()
        self._gate.close_turn()
        self._gate.end_cooldown()

    def _cancel_turn_start(self) -> None:
        if self._turn_start_timer is not None:
            self._turn_start_timer.cancel()
            self._turn_start_timer = None

    def _cancel_debounce(self) -> None:
        if self._debounce_timer is not None:
            self._debounce_timer.cancel()
            self._debounce_timer = None
