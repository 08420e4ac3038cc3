"""Tests for indicator drivers and the output factory."""

from unittest.mock import Mock, patch

import pytest

from simonclient.exceptions import ConfigurationError, MidiDeviceNotFoundError
from simonclient.midi import find_port
from simonclient.models import (
    Color,
    ConsoleOutputConfig,
    MidiOutputConfig,
    NullOutputConfig,
    TuiOutputConfig,
)
from simonclient.outputs import (
    ConsoleIndicators,
    ConsoleMessages,
    MidiLedIndicators,
    NullIndicators,
    create_indicator_driver,
)
from simonclient.protocols import IndicatorDriver, UIEvent

LEDS = {Color.RED: 36, Color.GREEN: 38, Color.YELLOW: 40, Color.BLUE: 41}


@pytest.mark.unit
class TestConsoleIndicators:
    def test_renders_changes_only(self):
        echo = Mock()
        driver = ConsoleIndicators(echo=echo)

        driver.show([Color.RED])
        driver.show([Color.RED])
        driver.clear()
        driver.clear()

        assert echo.call_count == 2
        assert "RED" in echo.call_args_list[0].args[0]
        assert "RED" not in echo.call_args_list[1].args[0]

    def test_is_indicator_driver(self):
        assert isinstance(ConsoleIndicators(), IndicatorDriver)
        assert isinstance(NullIndicators(), IndicatorDriver)


@pytest.mark.unit
class TestConsoleMessages:
    def test_prints_messages(self):
        echo = Mock()
        observer = ConsoleMessages(echo=echo)

        observer.on_ui_event(UIEvent.MESSAGE, "Your Turn!")

        echo.assert_called_once_with("Your Turn!", bold=True)

    def test_echoes_light_up_color(self):
        """Each light-up prints the color name in that color."""
        echo = Mock()
        observer = ConsoleMessages(echo=echo)

        observer.on_ui_event(UIEvent.LIGHTUP, Color.RED)

        echo.assert_called_once_with("Red", fg="red")


@pytest.mark.unit
class TestMidiLedIndicators:
    """Note on/off per LED."""

    @patch("simonclient.outputs.midi.open_output_port")
    def test_show_sends_diffs(self, mock_open):
        port = Mock()
        mock_open.return_value = port
        driver = MidiLedIndicators(LEDS, port_filter="Arduino", velocity=100)
        driver.open()
        mock_open.assert_called_once_with("Arduino")
        port.send.reset_mock()

        driver.show([Color.RED, Color.BLUE])
        sent = [m for (m,), _ in port.send.call_args_list]
        assert [(m.type, m.note, m.velocity) for m in sent] == [("note_on", 36, 100), ("note_on", 41, 100)]

        port.send.reset_mock()
        driver.show([Color.BLUE])
        sent = [m for (m,), _ in port.send.call_args_list]
        assert [(m.type, m.note) for m in sent] == [("note_off", 36)]

    @patch("simonclient.outputs.midi.open_output_port")
    def test_close_turns_everything_off(self, mock_open):
        port = Mock()
        mock_open.return_value = port
        driver = MidiLedIndicators(LEDS)
        driver.open()
        driver.show([Color.GREEN])
        port.send.reset_mock()

        driver.close()

        assert port.send.call_count == 4
        port.close.assert_called_once()

    def test_send_before_open_is_dropped(self):
        driver = MidiLedIndicators(LEDS)
        driver.show([Color.RED])  # does not raise

    @patch("simonclient.midi.ports.mido")
    def test_missing_port(self, mock_mido):
        mock_mido.get_output_names.return_value = ["Other Synth"]
        driver = MidiLedIndicators(LEDS, port_filter="Arduino")

        with pytest.raises(MidiDeviceNotFoundError) as exc_info:
            driver.open()

        assert "Other Synth" in exc_info.value.recovery_hint


@pytest.mark.unit
class TestFindPort:
    def test_substring_case_insensitive(self):
        assert find_port(["Foo", "Arduino Leonardo MIDI 1"], "arduino") == "Arduino Leonardo MIDI 1"

    def test_no_filter_takes_first(self):
        assert find_port(["A", "B"], None) == "A"

    def test_no_match(self):
        assert find_port(["A"], "zzz") is None
        assert find_port([], None) is None


@pytest.mark.unit
class TestCreateIndicatorDriver:
    def test_console(self):
        assert isinstance(create_indicator_driver(ConsoleOutputConfig()), ConsoleIndicators)

    def test_none(self):
        assert isinstance(create_indicator_driver(NullOutputConfig()), NullIndicators)

    def test_midi_not_opened(self):
        driver = create_indicator_driver(MidiOutputConfig(port="x", leds=LEDS, velocity=64))
        assert isinstance(driver, MidiLedIndicators)
        assert driver.velocity == 64
        assert driver.port_filter == "x"

    def test_tui_has_no_standalone_driver(self):
        with pytest.raises(ConfigurationError):
            create_indicator_driver(TuiOutputConfig())
