"""Client configuration model."""

from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from simonclient.utils.persistence import PydanticPersistence

from .enums import ALL_COLORS, Color, InputModality

DEFAULT_CONFIG_DIR = Path.home() / ".simonclient"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.json"

DEFAULT_KEYMAP: dict[str, Color] = {
    "a": Color.RED,
    "s": Color.GREEN,
    "d": Color.YELLOW,
    "f": Color.BLUE,
    "r": Color.RED,
    "g": Color.GREEN,
    "y": Color.YELLOW,
    "b": Color.BLUE,
}


def _require_all_colors(mapping: dict[Color, int], what: str) -> dict[Color, int]:
    """Validate that every color has an entry in a MIDI mapping."""
    missing = [color.value for color in ALL_COLORS if color not in mapping]
    if missing:
        raise ValueError(f"missing {what} mapping for {', '.join(missing)}")
    for color, number in mapping.items():
        if not 0 <= number <= 127:
            raise ValueError(f"{what} number for {color.value} must be 0-127, got {number}")
    return mapping


class ServerConfig(BaseModel):
    """Where the game server lives."""

    host: str = Field(default="localhost", description="Game server host name")
    port: int = Field(default=8080, ge=1, le=65535, description="Game server port")
    path: str = Field(default="/game", description="Game stream endpoint path")
    secure: bool = Field(default=False, description="Use wss:// instead of ws://")

    @property
    def url(self) -> str:
        """WebSocket URL of the game stream."""
        scheme = "wss" if self.secure else "ws"
        path = self.path if self.path.startswith("/") else f"/{self.path}"
        return f"{scheme}://{self.host}:{self.port}{path}"


class KeyboardInputConfig(BaseModel):
    """Keys typed in the terminal UI."""

    type: Literal["keyboard"] = "keyboard"
    keymap: dict[str, Color] = Field(
        default_factory=lambda: dict(DEFAULT_KEYMAP), description="Key to color mapping"
    )

    @field_validator("keymap")
    @classmethod
    def validate_keymap(cls, keymap: dict[str, Color]) -> dict[str, Color]:
        """Every color must be reachable from at least one key."""
        missing = [color.value for color in ALL_COLORS if color not in keymap.values()]
        if missing:
            raise ValueError(f"missing key mapping for {', '.join(missing)}")
        return {key.lower(): color for key, color in keymap.items()}


class DigitalInputConfig(BaseModel):
    """MIDI buttons: a note_on with velocity > 0 is one press."""

    type: Literal["digital"] = "digital"
    port: str | None = Field(
        default=None, description="Substring of the MIDI input port name (None = first port)"
    )
    buttons: dict[Color, int] = Field(description="MIDI note number per color")

    @field_validator("buttons")
    @classmethod
    def validate_buttons(cls, buttons: dict[Color, int]) -> dict[Color, int]:
        return _require_all_colors(buttons, "button")


class AnalogInputConfig(BaseModel):
    """Analog touch sensors streamed as MIDI control changes."""

    type: Literal["analog"] = "analog"
    port: str | None = Field(
        default=None, description="Substring of the MIDI input port name (None = first port)"
    )
    sensors: dict[Color, int] = Field(description="MIDI CC number per color")
    threshold: int = Field(
        default=10, ge=0, description="Rise over the previous sample needed to count as a press"
    )
    touch_floor: int = Field(
        default=1, ge=0, description="Samples at or below this value reset the baseline"
    )

    @field_validator("sensors")
    @classmethod
    def validate_sensors(cls, sensors: dict[Color, int]) -> dict[Color, int]:
        return _require_all_colors(sensors, "sensor")


InputConfig = Annotated[
    Union[KeyboardInputConfig, DigitalInputConfig, AnalogInputConfig],
    Field(discriminator="type"),
]


class TuiOutputConfig(BaseModel):
    """Indicators drawn by the terminal UI."""

    type: Literal["tui"] = "tui"


class ConsoleOutputConfig(BaseModel):
    """Indicators printed as lines on the console."""

    type: Literal["console"] = "console"


class MidiOutputConfig(BaseModel):
    """LEDs driven by note on/off messages on a MIDI output port."""

    type: Literal["midi"] = "midi"
    port: str | None = Field(
        default=None, description="Substring of the MIDI output port name (None = first port)"
    )
    leds: dict[Color, int] = Field(description="MIDI note number per LED")
    velocity: int = Field(default=127, ge=1, le=127, description="Velocity used to light an LED")

    @field_validator("leds")
    @classmethod
    def validate_leds(cls, leds: dict[Color, int]) -> dict[Color, int]:
        return _require_all_colors(leds, "LED")


class NullOutputConfig(BaseModel):
    """No indicators at all."""

    type: Literal["none"] = "none"


OutputConfig = Annotated[
    Union[TuiOutputConfig, ConsoleOutputConfig, MidiOutputConfig, NullOutputConfig],
    Field(discriminator="type"),
]


class TimingConfig(BaseModel):
    """Local timers (milliseconds)."""

    debounce_ms: int = Field(
        default=200, ge=0, description="Cooldown after a press before another is accepted"
    )
    turn_start_delay_ms: int = Field(
        default=1000, ge=0, description="Delay before input opens on START_TURN"
    )
    closing_delay_ms: int = Field(
        default=1000, ge=0, description="Pause before the closing animation"
    )


class ClientConfig(BaseModel):
    """Client configuration and settings."""

    server: ServerConfig = Field(default_factory=ServerConfig, description="Game server")
    input: InputConfig = Field(default_factory=KeyboardInputConfig, description="Input device")
    output: OutputConfig = Field(default_factory=TuiOutputConfig, description="Indicator device")
    timing: TimingConfig = Field(default_factory=TimingConfig, description="Local timers")
    player_id: str | None = Field(
        default=None, description="Fixed player id (None = random 'Player<n>')"
    )

    @model_validator(mode="after")
    def check_terminal_ui_pairing(self) -> "ClientConfig":
        """The terminal UI both reads the keyboard and draws the indicators."""
        uses_keyboard = self.input.type == InputModality.KEYBOARD
        uses_tui = self.output.type == "tui"
        if uses_keyboard != uses_tui:
            raise ValueError("keyboard input and tui output must be used together")
        return self

    @property
    def uses_tui(self) -> bool:
        """True if the session runs inside the terminal UI."""
        return self.output.type == "tui"

    @classmethod
    def load(cls, path: Path) -> "ClientConfig":
        """
        Load config from an explicit path.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json(path, cls)

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "ClientConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.simonclient/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_or_default(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)
