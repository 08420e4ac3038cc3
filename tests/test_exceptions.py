"""Tests for the exception hierarchy and error helpers."""

import logging

import pytest

from simonclient.exceptions import (
    ChannelClosedError,
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    DeviceError,
    ErrorContext,
    MidiDeviceNotFoundError,
    MissingColorMappingError,
    SessionStateError,
    SimonClientError,
    TransportError,
    UnknownInputModalityError,
    format_error_for_display,
    wrap_pydantic_error,
)


@pytest.mark.unit
class TestHierarchy:
    @pytest.mark.parametrize("error, parent", [
        (ConfigFileInvalidError("c.json", "bad"), ConfigurationError),
        (ConfigValidationError("server.port", 0, "too small"), ConfigurationError),
        (UnknownInputModalityError("joystick"), ConfigValidationError),
        (MissingColorMappingError("input.buttons", "missing button mapping for RED"), ConfigValidationError),
        (MidiDeviceNotFoundError("input", None, []), DeviceError),
        (ChannelClosedError(), TransportError),
        (SessionStateError("already joined"), SimonClientError),
    ])
    def test_parents(self, error, parent):
        assert isinstance(error, parent)
        assert isinstance(error, SimonClientError)

    def test_full_message_includes_hint(self):
        error = MidiDeviceNotFoundError("output", "Arduino", ["Synth A"])
        full = error.get_full_message()
        assert "No MIDI output port matching 'Arduino'" in full
        assert "Synth A" in full

    def test_full_message_without_hint(self):
        assert SessionStateError("already joined").get_full_message() == "already joined"

    @pytest.mark.parametrize("error", [
        ConfigValidationError("server.port", 0, "too small"),
        MidiDeviceNotFoundError("input", None, []),
        ChannelClosedError(),
    ])
    def test_session_ending_errors_exit_one(self, error):
        assert error.exit_code == 1

    def test_trailing_comma_hint(self):
        error = ConfigFileInvalidError("c.json", "Trailing comma at line 3")
        assert error.user_message == "Configuration file has a trailing comma"


@pytest.mark.unit
class TestHelpers:
    def test_format_custom_error(self):
        message, hint = format_error_for_display(TransportError("offline", recovery_hint="start it"))
        assert (message, hint) == ("offline", "start it")

    def test_format_plain_error(self):
        message, hint = format_error_for_display(ValueError("nope"))
        assert message == "ValueError: nope"
        assert hint is None

    def test_wrap_non_pydantic_error(self):
        error = wrap_pydantic_error(RuntimeError("weird"), "c.json")
        assert isinstance(error, ConfigValidationError)

    def test_error_context_reraises(self, caplog):
        with caplog.at_level(logging.ERROR):
            with pytest.raises(TransportError):
                with ErrorContext("connect"):
                    raise TransportError("offline")
        assert "Failed to connect" in caplog.text

    def test_error_context_can_suppress(self):
        with ErrorContext("optional step", re_raise=False) as ctx:
            raise ValueError("ignored")
        assert isinstance(ctx.error, ValueError)
