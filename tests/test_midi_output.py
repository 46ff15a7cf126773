"""Tests for MidiOutput and the message encoders."""

from unittest.mock import Mock

import pytest

from midipump.exceptions import DeviceNotFoundError, TransportError
from midipump.midi import MidiInput, MidiOutput, encode_cc, encode_note, encode_nrpn
from midipump.protocol import StatusType


@pytest.mark.unit
class TestEncoding:
    """Test byte encoding and clamping."""

    def test_note_on(self):
        assert encode_note(True, 0, 60, 100) == [0x90, 60, 100]

    def test_note_off(self):
        assert encode_note(False, 9, 36, 0) == [0x89, 36, 0]

    def test_note_clamps(self):
        """Test values above 127 are truncated to 127, not wrapped."""
        assert encode_note(True, 3, 200, 130) == [0x93, 127, 127]
        assert encode_note(True, 0, -1, -20) == [0x90, 0, 0]

    def test_channel_masked(self):
        assert encode_note(True, 0x13, 60, 100)[0] == 0x93
        assert encode_cc(16, 1, 1)[0] == 0xB0

    def test_cc(self):
        assert encode_cc(2, 7, 100) == [0xB2, 7, 100]
        assert encode_cc(2, 300, 128) == [0xB2, 127, 127]

    def test_nrpn_split(self):
        """Test number and value are split into 7-bit MSB/LSB pairs."""
        assert encode_nrpn(0, 1000, 8192) == [
            [0xB0, 99, 1000 >> 7],
            [0xB0, 98, 1000 & 0x7F],
            [0xB0, 6, 64],
            [0xB0, 38, 0],
        ]

    def test_nrpn_clamps(self):
        assert encode_nrpn(1, 16400, 20000) == [
            [0xB1, 99, 127],
            [0xB1, 98, 127],
            [0xB1, 6, 127],
            [0xB1, 38, 127],
        ]


@pytest.mark.unit
class TestMidiOutput:
    """Test sending through the transport."""

    def test_open_by_name(self, transport):
        midi_out = MidiOutput("Fake Drums", transport)
        assert midi_out.name == "Fake Drums"

    def test_unknown_name(self, transport):
        with pytest.raises(DeviceNotFoundError) as exc_info:
            MidiOutput("Fake Keyboard", transport)
        assert exc_info.value.port_type == "output"
        assert transport.opened_outputs == []

    def test_device_list(self, transport):
        assert MidiOutput.device_list(transport) == ["Fake Synth", "Fake Drums"]
        assert MidiOutput.device_count(transport) == 2

    def test_send_note(self, midi_out, output_handle):
        midi_out.send_note(True, 3, 200, 130)
        midi_out.send_note(False, 3, 60, 0)
        assert output_handle.sent == [[0x93, 127, 127], [0x83, 60, 0]]

    def test_send_cc(self, midi_out, output_handle):
        midi_out.send_cc(15, 64, 127)
        assert output_handle.sent == [[0xBF, 64, 127]]

    def test_send_nrpn(self, midi_out, output_handle):
        """Test NRPN goes out as exactly four control changes in order."""
        midi_out.send_nrpn(1, 16400, 20000)

        assert len(output_handle.sent) == 4
        assert [m[1] for m in output_handle.sent] == [99, 98, 6, 38]
        assert all(m[0] == 0xB1 for m in output_handle.sent)
        assert all(m[2] == 127 for m in output_handle.sent)

    def test_nrpn_partial_failure_not_rolled_back(self, transport):
        transport.output_fail_after = 2
        midi_out = MidiOutput(0, transport)

        with pytest.raises(TransportError):
            midi_out.send_nrpn(0, 1, 1)

        assert [m[1] for m in transport.opened_outputs[0].sent] == [99, 98]

    def test_send_after_close(self, midi_out, output_handle):
        midi_out.close()
        assert output_handle.closed
        with pytest.raises(TransportError):
            midi_out.send_cc(0, 1, 1)


@pytest.mark.unit
def test_note_round_trip(transport, midi_out, output_handle):
    """Test an encoded note decodes back to the clamped values."""
    midi_out.send_note(True, 3, 200, 130)

    midi_in = MidiInput(0, transport)
    transport.opened_inputs[0].feed(*output_handle.sent)
    generic = Mock()
    note = Mock()
    midi_in.register_3byte(StatusType.NOTE_ON, generic)
    midi_in.register_note(note)
    midi_in.pump()

    generic.assert_called_once_with(3, 127, 127)
    note.assert_called_once_with(True, 3, 127, 127)
