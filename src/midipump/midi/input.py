"""MIDI input: decode raw messages and dispatch them to registered handlers."""

import logging
from collections.abc import Callable, Sequence
from typing import Optional

from midipump.exceptions import TransportError, WrongArityError
from midipump.protocol import (
    Mask,
    StatusType,
    is_realtime,
    packet_length,
    split_status_byte,
    to_status,
)
from midipump.transport import InputHandle, MidiTransport

from .base_port import BasePort, PortIdentifier

logger = logging.getLogger(__name__)

# chan, data1, data2
Handler3 = Callable[[int, int, int], None]
# chan, data1
Handler2 = Callable[[int, int], None]
# status
Handler1 = Callable[[int], None]
# on, chan, num, velocity
NoteHandler = Callable[[bool, int, int, int], None]
RealtimeHandler = Callable[[int], None]


class MidiInput(BasePort[InputHandle]):
    """
    MIDI input port with per-status handler tables.

    Each of the 3-, 2- and 1-byte tables holds at most one handler per
    status. Registering a handler replaces the previous one; registering
    None removes it. Note and realtime handlers are single optional slots.

    Handlers only run inside pump(), on the caller's thread.

    Example:
        ```python
        with MidiInput("My Keyboard") as midi_in:
            midi_in.register_3byte(StatusType.CONTROL_CHANGE, on_cc)
            midi_in.register_note(on_note)
            while running:
                midi_in.pump()
                time.sleep(0.005)
        ```
    """

    def __init__(self, identifier: PortIdentifier, transport: Optional[MidiTransport] = None):
        self._handlers3: dict[int, Handler3] = {}
        self._handlers2: dict[int, Handler2] = {}
        self._handlers1: dict[int, Handler1] = {}
        self._note_handler: Optional[NoteHandler] = None
        self._realtime_handler: Optional[RealtimeHandler] = None
        super().__init__(identifier, transport)

    @classmethod
    def _list_ports(cls, transport: MidiTransport) -> list[str]:
        return transport.list_input_ports()

    def _open_handle(self, transport: MidiTransport, index: int) -> InputHandle:
        return transport.open_input(index)

    @classmethod
    def _get_port_type_name(cls) -> str:
        return "input"

    # Registration

    def register_3byte(self, status: StatusType, handler: Optional[Handler3]) -> None:
        """
        Set or clear the handler for a 3-byte message type.

        Args:
            status: Status type (channel bits stripped), e.g. StatusType.CONTROL_CHANGE
            handler: Called with (channel, data1, data2), or None to remove

        Raises:
            WrongArityError: If messages with this status are not 3 bytes long
        """
        self._register(self._handlers3, 3, status, handler)

    def register_2byte(self, status: StatusType, handler: Optional[Handler2]) -> None:
        """Set or clear the (channel, data1) handler for a 2-byte message type."""
        self._register(self._handlers2, 2, status, handler)

    def register_1byte(self, status: StatusType, handler: Optional[Handler1]) -> None:
        """Set or clear the (status) handler for a 1-byte system message type."""
        self._register(self._handlers1, 1, status, handler)

    def register_note(self, handler: Optional[NoteHandler]) -> None:
        """Set or clear the (is_note_on, channel, number, velocity) handler."""
        self._note_handler = handler

    def register_realtime(self, handler: Optional[RealtimeHandler]) -> None:
        """Set or clear the handler called with the status of every realtime message."""
        self._realtime_handler = handler

    @staticmethod
    def _register(table: dict, arity: int, status: int, handler: Optional[Callable]) -> None:
        length = packet_length(status)
        if length != arity:
            raise WrongArityError(status, expected=arity, actual=length)

        status = to_status(status)
        if handler is None:
            if table.pop(status, None) is not None:
                logger.debug(f"Removed {arity}-byte handler for {status!r}")
        else:
            table[status] = handler
            logger.debug(f"Registered {arity}-byte handler for {status!r}")

    # Dispatch

    def pump(self) -> int:
        """
        Dispatch every message currently buffered by the port.

        Never blocks: returns as soon as the port has nothing pending.
        Messages with no matching handler, or an unexpected length, are
        dropped silently.

        Returns:
            Number of messages read

        Raises:
            TransportError: If the port is closed or cannot be read
        """
        if self._handle is None:
            raise TransportError("MIDI input port is closed", operation="pump")

        count = 0
        while True:
            message = self._handle.receive()
            if not message:
                return count
            count += 1
            self._dispatch(message)

    def _dispatch(self, message: Sequence[int]) -> None:
        status, channel = split_status_byte(message[0])

        if len(message) == 3:
            handler3 = self._handlers3.get(status)
            if handler3 is not None:
                handler3(channel, message[1], message[2])
            if self._note_handler is not None and status in (StatusType.NOTE_ON, StatusType.NOTE_OFF):
                self._note_handler(status == StatusType.NOTE_ON, channel, message[1], message[2])

        elif len(message) == 2:
            handler2 = self._handlers2.get(status)
            if handler2 is not None:
                handler2(channel, message[1])

        elif len(message) == 1 and (message[0] & Mask.STATUS) == StatusType.SYSEX_BEGIN:
            if self._realtime_handler is not None and is_realtime(status):
                self._realtime_handler(status)
            handler1 = self._handlers1.get(status)
            if handler1 is not None:
                handler1(status)

        else:
            logger.debug(f"Dropped {len(message)}-byte message with status 0x{message[0]:02X}")
