"""Tests for the client configuration and its persistence."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from simonclient.exceptions import (
    ConfigFileInvalidError,
    ConfigValidationError,
    MissingColorMappingError,
    UnknownInputModalityError,
)
from simonclient.models import (
    AnalogInputConfig,
    ClientConfig,
    Color,
    ConsoleOutputConfig,
    DigitalInputConfig,
    KeyboardInputConfig,
    MidiOutputConfig,
    ServerConfig,
    TuiOutputConfig,
)


def write_config(path: Path, data: dict) -> Path:
    path.write_text(json.dumps(data))
    return path


BUTTONS = {"RED": 60, "GREEN": 62, "YELLOW": 64, "BLUE": 65}


@pytest.mark.unit
class TestClientConfigModel:
    """Defaults and validation."""

    def test_defaults(self):
        cfg = ClientConfig()
        assert isinstance(cfg.input, KeyboardInputConfig)
        assert isinstance(cfg.output, TuiOutputConfig)
        assert cfg.uses_tui
        assert cfg.server.url == "ws://localhost:8080/game"
        assert cfg.timing.debounce_ms == 200
        assert cfg.timing.turn_start_delay_ms == 1000
        assert cfg.player_id is None

    def test_server_url(self):
        server = ServerConfig(host="example.org", port=9000, path="play", secure=True)
        assert server.url == "wss://example.org:9000/play"

    def test_digital_with_midi_leds(self):
        cfg = ClientConfig.model_validate({
            "input": {"type": "digital", "port": "Arduino", "buttons": BUTTONS},
            "output": {"type": "midi", "leds": BUTTONS},
        })
        assert isinstance(cfg.input, DigitalInputConfig)
        assert cfg.input.buttons[Color.GREEN] == 62
        assert isinstance(cfg.output, MidiOutputConfig)
        assert not cfg.uses_tui

    def test_analog_defaults(self):
        cfg = AnalogInputConfig(sensors={c: i for i, c in enumerate(Color)})
        assert cfg.threshold == 10
        assert cfg.touch_floor == 1

    def test_keyboard_requires_tui(self):
        with pytest.raises(ValidationError):
            ClientConfig(input=KeyboardInputConfig(), output=ConsoleOutputConfig())

    def test_tui_requires_keyboard(self):
        with pytest.raises(ValidationError):
            ClientConfig(
                input=DigitalInputConfig(buttons={c: 1 for c in Color}),
                output=TuiOutputConfig(),
            )

    def test_missing_button(self):
        with pytest.raises(ValidationError, match="missing button mapping for BLUE"):
            DigitalInputConfig(buttons={Color.RED: 1, Color.GREEN: 2, Color.YELLOW: 3})

    def test_note_out_of_range(self):
        with pytest.raises(ValidationError):
            DigitalInputConfig(buttons={Color.RED: 1, Color.GREEN: 2, Color.YELLOW: 3, Color.BLUE: 128})

    def test_keymap_must_cover_all_colors(self):
        with pytest.raises(ValidationError, match="missing key mapping"):
            KeyboardInputConfig(keymap={"a": Color.RED})

    def test_keymap_lowercased(self):
        cfg = KeyboardInputConfig(keymap={"A": Color.RED, "S": Color.GREEN, "D": Color.YELLOW, "F": Color.BLUE})
        assert cfg.keymap["a"] is Color.RED


@pytest.mark.unit
class TestClientConfigFile:
    """Loading from disk and error conversion."""

    def test_missing_file_gives_defaults(self, tmp_path: Path):
        cfg = ClientConfig.load_or_default(tmp_path / "nope.json")
        assert cfg == ClientConfig()

    def test_load_explicit_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            ClientConfig.load(tmp_path / "nope.json")

    def test_round_trip(self, tmp_path: Path):
        path = tmp_path / "config.json"
        cfg = ClientConfig(
            input=AnalogInputConfig(sensors={Color.RED: 20, Color.GREEN: 21, Color.YELLOW: 22, Color.BLUE: 23}),
            output=ConsoleOutputConfig(),
            player_id="Player5",
        )
        cfg.save(path)

        assert ClientConfig.load(path) == cfg

    def test_save_keeps_backup(self, tmp_path: Path):
        path = tmp_path / "config.json"
        ClientConfig(player_id="first").save(path)
        ClientConfig(player_id="second").save(path)

        backup = ClientConfig.load(path.with_suffix(".json.bak"))
        assert backup.player_id == "first"
        assert ClientConfig.load(path).player_id == "second"

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text('{"server": {"port": 80,}}')

        with pytest.raises(ConfigFileInvalidError):
            ClientConfig.load_or_default(path)

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("   ")

        with pytest.raises(ConfigFileInvalidError, match="empty"):
            ClientConfig.load(path)

    def test_unknown_input_modality(self, tmp_path: Path):
        path = write_config(tmp_path / "config.json", {"input": {"type": "joystick"}})

        with pytest.raises(UnknownInputModalityError) as exc_info:
            ClientConfig.load(path)

        assert isinstance(exc_info.value, ConfigValidationError)
        assert exc_info.value.modality == "joystick"
        assert exc_info.value.field == "input.type"

    def test_missing_color_mapping(self, tmp_path: Path):
        path = write_config(tmp_path / "config.json", {
            "input": {"type": "digital", "buttons": {"RED": 60, "GREEN": 62}},
            "output": {"type": "none"},
        })

        with pytest.raises(MissingColorMappingError) as exc_info:
            ClientConfig.load(path)

        assert isinstance(exc_info.value, ConfigValidationError)
        assert "YELLOW" in exc_info.value.user_message

    def test_invalid_port(self, tmp_path: Path):
        path = write_config(tmp_path / "config.json", {"server": {"port": 0}})

        with pytest.raises(ConfigValidationError) as exc_info:
            ClientConfig.load(path)

        assert exc_info.value.field == "server.port"
        assert "--server" in exc_info.value.recovery_hint
