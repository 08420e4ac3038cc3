"""Status bar widget showing player, connection and turn state."""

from textual.widgets import Static

from simonclient.models import TurnState


class StatusBar(Static):
    """Single line with the player id, the server URL and the turn state."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $panel;
        color: $text;
        padding: 0 1;
    }

    StatusBar.my_turn {
        background: $success;
    }

    StatusBar.terminated {
        background: $error 50%;
    }
    """

    def __init__(self, player_id: str = "", server_url: str = "") -> None:
        super().__init__()
        self._player_id = player_id
        self._server_url = server_url
        self._state = TurnState.IDLE
        self._input_open = False
        self._update_display()

    def update_state(self, state: TurnState, input_open: bool) -> None:
        """
        Update the turn information.

        Args:
            state: Current turn state
            input_open: Whether presses are being accepted
        """
        if state == self._state and input_open == self._input_open:
            return
        self._state = state
        self._input_open = input_open
        self.set_class(state is TurnState.MY_TURN, "my_turn")
        self.set_class(state is TurnState.TERMINATED, "terminated")
        self._update_display()

    def _update_display(self) -> None:
        state = self._state.value.replace("_", " ").upper()
        input_status = "[green]● input open[/green]" if self._input_open else "[dim]○ input closed[/dim]"
        self.update(f"{self._player_id}  |  {self._server_url}  |  {state}  |  {input_status}")
