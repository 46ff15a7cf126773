"""Tests for the exception hierarchy and helpers."""

import logging

import pytest

from midipump.exceptions import (
    DeviceNotFoundError,
    ErrorContext,
    MidiPumpError,
    ProtocolError,
    TransportError,
    WrongArityError,
    format_error_for_display,
    wrap_transport_error,
)
from midipump.protocol import StatusType


@pytest.mark.unit
class TestExceptions:

    def test_hierarchy(self):
        assert issubclass(DeviceNotFoundError, TransportError)
        assert issubclass(TransportError, MidiPumpError)
        assert issubclass(WrongArityError, ProtocolError)

    def test_transport_error_keeps_message(self):
        error = TransportError("ALSA error making port connection", operation="open input 0")
        assert str(error) == "ALSA error making port connection"
        assert "open input 0" in error.technical_message

    def test_device_not_found_hint(self):
        error = DeviceNotFoundError("Synth", "output", [])
        assert "Synth" in error.user_message
        assert "No MIDI output ports" in error.recovery_hint

    def test_wrong_arity_message(self):
        error = WrongArityError(StatusType.SYSEX_BEGIN, expected=3, actual=0)
        assert str(error) == "message with status F0 is not a 3 byte message"

    def test_technical_message_defaults_to_user_message(self):
        error = MidiPumpError("port closed")
        assert error.technical_message == "port closed"
        assert error.recovery_hint is None
        assert not error.recoverable


@pytest.mark.unit
class TestHandlers:

    def test_wrap_transport_error(self):
        error = wrap_transport_error(OSError("unknown port 'x'"), "open input 'x'")
        assert isinstance(error, TransportError)
        assert str(error) == "unknown port 'x'"

    def test_wrap_passes_transport_errors_through(self):
        original = TransportError("busy")
        assert wrap_transport_error(original) is original

    def test_wrap_empty_message(self):
        assert str(wrap_transport_error(RuntimeError())) == "RuntimeError"

    def test_format_error_for_display(self):
        message, hint = format_error_for_display(DeviceNotFoundError("Synth", "input", ["Keys"]))
        assert message == "MIDI input port not found: Synth"
        assert "[0] Keys" in hint

        message, hint = format_error_for_display(ValueError("bad"))
        assert message == "ValueError: bad"
        assert hint is None

    def test_error_context_logs_and_reraises(self, caplog):
        with caplog.at_level(logging.ERROR):
            with pytest.raises(TransportError):
                with ErrorContext("open MIDI input"):
                    raise TransportError("busy")
        assert "Failed to open MIDI input: busy" in caplog.text

    def test_error_context_suppress(self):
        with ErrorContext("open MIDI input", re_raise=False) as ctx:
            raise TransportError("busy")
        assert isinstance(ctx.error, TransportError)
