"""Tests for the mido-backed transport."""

from unittest.mock import Mock, patch

import mido
import pytest

from midipump.exceptions import TransportError
from midipump.midi import MidiInput, MidiOutput
from midipump.transport import MidoInputHandle, MidoOutputHandle, MidoTransport


def make_port(name="Test Port", messages=()):
    """Create a mock mido port whose poll() yields ``messages`` then None."""
    port = Mock()
    port.name = name
    port.poll = Mock(side_effect=list(messages) + [None] * 10)
    return port


@pytest.mark.unit
class TestMidoInputHandle:
    """Test polling and byte conversion."""

    def test_receive_bytes(self):
        port = make_port(messages=[mido.Message("note_on", channel=3, note=60, velocity=100)])
        handle = MidoInputHandle(port)

        assert handle.receive() == [0x93, 60, 100]
        assert handle.receive() == []

    def test_receive_realtime(self):
        handle = MidoInputHandle(make_port(messages=[mido.Message("clock")]))
        assert handle.receive() == [0xF8]

    def test_sysex_skipped(self):
        port = make_port(messages=[
            mido.Message("sysex", data=[0x7E, 0x00]),
            mido.Message("program_change", channel=1, program=5),
        ])
        handle = MidoInputHandle(port)

        assert handle.receive() == [0xC1, 5]

    def test_sysex_kept_when_not_ignored(self):
        port = make_port(messages=[mido.Message("sysex", data=[0x7E, 0x00])])
        handle = MidoInputHandle(port, ignore_sysex=False)

        assert handle.receive() == [0xF0, 0x7E, 0x00, 0xF7]

    def test_poll_error(self):
        port = make_port()
        port.poll = Mock(side_effect=OSError("device gone"))
        handle = MidoInputHandle(port)

        with pytest.raises(TransportError) as exc_info:
            handle.receive()
        assert str(exc_info.value) == "device gone"

    def test_close(self):
        port = make_port()
        MidoInputHandle(port).close()
        port.close.assert_called_once()


@pytest.mark.unit
class TestMidoOutputHandle:

    def test_send(self):
        port = make_port()
        MidoOutputHandle(port).send([0xB2, 7, 100])

        sent = port.send.call_args[0][0]
        assert sent == mido.Message("control_change", channel=2, control=7, value=100)

    def test_send_error(self):
        port = make_port()
        port.send = Mock(side_effect=RuntimeError("write failed"))

        with pytest.raises(TransportError):
            MidoOutputHandle(port).send([0x90, 60, 100])


@pytest.mark.unit
class TestMidoTransport:
    """Test enumeration and opening through mido."""

    def test_list_ports(self):
        with patch("mido.get_input_names", return_value=["In A", "In B"]), \
             patch("mido.get_output_names", return_value=["Out A"]):
            transport = MidoTransport()
            assert transport.list_input_ports() == ["In A", "In B"]
            assert transport.list_output_ports() == ["Out A"]

    def test_list_error(self):
        with patch("mido.get_input_names", side_effect=OSError("no backend")):
            with pytest.raises(TransportError):
                MidoTransport().list_input_ports()

    def test_open_input_by_index(self):
        port = make_port("In B")
        with patch("mido.get_input_names", return_value=["In A", "In B"]), \
             patch("mido.open_input", return_value=port) as open_input:
            handle = MidoTransport().open_input(1)

        open_input.assert_called_once_with("In B")
        assert handle.name == "In B"

    def test_open_output_error(self):
        with patch("mido.get_output_names", return_value=["Out A"]), \
             patch("mido.open_output", side_effect=OSError("port busy")):
            with pytest.raises(TransportError) as exc_info:
                MidoTransport().open_output(0)
        assert "port busy" in str(exc_info.value)

    def test_open_bad_index(self):
        with patch("mido.get_input_names", return_value=[]):
            with pytest.raises(TransportError):
                MidoTransport().open_input(0)

    def test_midi_input_on_mido(self):
        """Test MidiInput pumps messages read through mido."""
        port = make_port("In A", messages=[
            mido.Message("control_change", channel=0, control=1, value=64),
        ])
        with patch("mido.get_input_names", return_value=["In A"]), \
             patch("mido.open_input", return_value=port):
            midi_in = MidiInput("In A", MidoTransport())

        handler = Mock()
        midi_in.register_3byte(0xB0, handler)
        assert midi_in.pump() == 1
        handler.assert_called_once_with(0, 1, 64)

    def test_midi_output_on_mido(self):
        port = make_port("Out A")
        with patch("mido.get_output_names", return_value=["Out A"]), \
             patch("mido.open_output", return_value=port):
            midi_out = MidiOutput(0, MidoTransport())

        midi_out.send_note(True, 0, 60, 100)
        assert port.send.call_args[0][0] == mido.Message("note_on", note=60, velocity=100)
