"""Simple indicator drivers (console, null, recording) and console messages."""

from collections.abc import Iterable

import click

from simonclient.models import ALL_COLORS, Color
from simonclient.protocols import UIEvent


class ConsoleIndicators:
    """
    Draws the four indicators as one colored line per change.

    Example output::

        [RED] [ · ] [ · ] [ · ]
    """

    def __init__(self, echo=click.secho):
        self._echo = echo
        self._lit: frozenset[Color] = frozenset()

    def show(self, colors: Iterable[Color]) -> None:
        lit = frozenset(colors)
        if lit == self._lit:
            return
        self._lit = lit
        self._render()

    def clear(self) -> None:
        if not self._lit:
            return
        self._lit = frozenset()
        self._render()

    def _render(self) -> None:
        cells = []
        for color in ALL_COLORS:
            if color in self._lit:
                cells.append(click.style(f"[{color.value:^6}]", fg=color.style, bold=True))
            else:
                cells.append(click.style("[  ·   ]", dim=True))
        self._echo(" ".join(cells))


class NullIndicators:
    """Indicator driver that renders nothing."""

    def show(self, colors: Iterable[Color]) -> None:
        pass

    def clear(self) -> None:
        pass


class RecordingIndicators:
    """Keeps every frame shown; used to inspect animations."""

    def __init__(self) -> None:
        self.frames: list[frozenset[Color]] = []

    def show(self, colors: Iterable[Color]) -> None:
        self.frames.append(frozenset(colors))

    def clear(self) -> None:
        self.frames.append(frozenset())

    @property
    def lit_frames(self) -> list[frozenset[Color]]:
        """Frames with at least one color lit."""
        return [frame for frame in self.frames if frame]


class ConsoleMessages:
    """UI observer that prints session messages and pattern colors to the console."""

    def __init__(self, echo=click.secho):
        self._echo = echo

    def on_ui_event(self, event: UIEvent, payload) -> None:
        if event is UIEvent.MESSAGE:
            self._echo(str(payload), bold=True)
        elif event is UIEvent.LIGHTUP:
            self._echo(payload.display_name, fg=payload.style)
