"""MIDI output: send note, control change and NRPN messages."""

import logging
from collections.abc import Sequence

from midipump.exceptions import TransportError
from midipump.transport import MidiTransport, OutputHandle

from .base_port import BasePort
from .encoding import encode_cc, encode_note, encode_nrpn

logger = logging.getLogger(__name__)


class MidiOutput(BasePort[OutputHandle]):
    """
    MIDI output port.

    Holds no state beyond the open port. Every send goes straight to the
    transport; transport failures raise TransportError.
    """

    @classmethod
    def _list_ports(cls, transport: MidiTransport) -> list[str]:
        return transport.list_output_ports()

    def _open_handle(self, transport: MidiTransport, index: int) -> OutputHandle:
        return transport.open_output(index)

    @classmethod
    def _get_port_type_name(cls) -> str:
        return "output"

    def send(self, message: Sequence[int]) -> None:
        """
        Send one raw MIDI message.

        Raises:
            TransportError: If the port is closed or the send fails
        """
        if self._handle is None:
            raise TransportError("MIDI output port is closed", operation="send")
        self._handle.send(message)

    def send_note(self, on: bool, channel: int, number: int, velocity: int) -> None:
        """
        Send a note on or note off.

        Args:
            on: True for note on, False for note off
            channel: MIDI channel 0-15
            number: Note number, clamped to 0-127
            velocity: Velocity, clamped to 0-127
        """
        self.send(encode_note(on, channel, number, velocity))

    def send_cc(self, channel: int, number: int, value: int) -> None:
        """Send a control change; number and value are clamped to 0-127."""
        self.send(encode_cc(channel, number, value))

    def send_nrpn(self, channel: int, number: int, value: int) -> None:
        """
        Send a 14-bit NRPN parameter change as four control changes.

        Number and value are clamped to 0-16383. The four messages are sent
        one by one; if one fails the earlier ones are not undone.
        """
        for message in encode_nrpn(channel, number, value):
            self.send(message)
        logger.debug(f"Sent NRPN {number}={value} on channel {channel & 0x0F}")
