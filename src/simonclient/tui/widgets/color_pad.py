"""Widget representing one of the four color pads."""

from textual.message import Message
from textual.widgets import Static

from simonclient.models import ALL_COLORS, Color


def _generate_pad_css() -> str:
    """Generate per-color CSS from the Color enum."""
    css_lines = [
        "ColorPad {",
        "    width: 1fr;",
        "    height: 100%;",
        "    border: solid $surface;",
        "    content-align: center middle;",
        "}",
        "",
    ]
    for color in ALL_COLORS:
        css_lines.extend([
            f"ColorPad.{color.style} {{",
            f"    background: {color.style} 15%;",
            f"    border: solid {color.style} 40%;",
            "}",
            "",
            f"ColorPad.{color.style}.lit {{",
            f"    background: {color.style};",
            f"    border: heavy {color.style};",
            "    color: $text;",
            "    text-style: bold;",
            "}",
            "",
        ])
    return "\n".join(css_lines)


class ColorPad(Static):
    """
    One color indicator that can also be clicked.

    Lighting is controlled from outside with ``set_lit()``; a click posts
    ``ColorPad.Pressed`` for the app to forward as an activation.
    """

    DEFAULT_CSS = _generate_pad_css()

    class Pressed(Message):
        """Posted when the pad is clicked."""

        def __init__(self, color: Color):
            super().__init__()
            self.color = color

    def __init__(self, color: Color, key_hint: str = "") -> None:
        super().__init__(id=f"pad-{color.style}", classes=color.style)
        self.color = color
        self.key_hint = key_hint
        self._lit = False
        self.update_display()

    @property
    def lit(self) -> bool:
        return self._lit

    def set_lit(self, lit: bool) -> None:
        if lit != self._lit:
            self._lit = lit
            self.set_class(lit, "lit")
            self.update_display()

    def update_display(self) -> None:
        label = f"[b]{self.color.display_name}[/b]"
        if self.key_hint:
            label += f"\n[dim]{self.key_hint}[/dim]"
        self.update(label)

    def on_click(self) -> None:
        self.post_message(self.Pressed(self.color))
