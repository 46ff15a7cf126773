"""MIDI transport backed by mido."""

import logging
from collections.abc import Sequence
from typing import Optional

import mido

from midipump.exceptions import TransportError, wrap_transport_error

logger = logging.getLogger(__name__)


class MidoInputHandle:
    """Non-blocking input handle around a mido input port."""

    def __init__(self, port: mido.ports.BaseInput, ignore_sysex: bool = True):
        """
        Initialize input handle.

        Args:
            port: Opened mido input port (no callback, so messages queue up)
            ignore_sysex: Drop SysEx messages instead of returning them
        """
        self._port = port
        self._ignore_sysex = ignore_sysex
        self.name = port.name

    def receive(self) -> list[int]:
        """Return the bytes of the next pending message, or [] if none."""
        while True:
            try:
                msg = self._port.poll()
            except Exception as e:
                raise wrap_transport_error(e, f"receive from {self.name}") from e

            if msg is None:
                return []
            if self._ignore_sysex and msg.type == "sysex":
                logger.debug(f"Ignoring SysEx message on {self.name}")
                continue
            return msg.bytes()

    def close(self) -> None:
        self._port.close()


class MidoOutputHandle:
    """Output handle around a mido output port."""

    def __init__(self, port: mido.ports.BaseOutput):
        self._port = port
        self.name = port.name

    def send(self, data: Sequence[int]) -> None:
        """Send raw bytes as a single MIDI message."""
        try:
            self._port.send(mido.Message.from_bytes(list(data)))
        except Exception as e:
            raise wrap_transport_error(e, f"send to {self.name}") from e

    def close(self) -> None:
        self._port.close()


class MidoTransport:
    """
    MidiTransport implementation using mido.

    Uses mido's default backend (python-rtmidi) unless a backend module
    name is given, e.g. "mido.backends.portmidi".
    """

    def __init__(self, backend: Optional[str] = None, ignore_sysex: bool = True):
        """
        Initialize transport.

        Args:
            backend: mido backend module name (None = mido default)
            ignore_sysex: Drop incoming SysEx messages at the port
        """
        self._backend_name = backend
        self._ignore_sysex = ignore_sysex
        self._mido = mido.Backend(backend) if backend else mido

    def list_input_ports(self) -> list[str]:
        try:
            return list(self._mido.get_input_names())
        except Exception as e:
            raise wrap_transport_error(e, "list input ports") from e

    def list_output_ports(self) -> list[str]:
        try:
            return list(self._mido.get_output_names())
        except Exception as e:
            raise wrap_transport_error(e, "list output ports") from e

    def open_input(self, index: int) -> MidoInputHandle:
        name = self._port_name(self.list_input_ports(), index, "input")
        try:
            port = self._mido.open_input(name)
        except Exception as e:
            raise wrap_transport_error(e, f"open input {index}") from e
        return MidoInputHandle(port, ignore_sysex=self._ignore_sysex)

    def open_output(self, index: int) -> MidoOutputHandle:
        name = self._port_name(self.list_output_ports(), index, "output")
        try:
            port = self._mido.open_output(name)
        except Exception as e:
            raise wrap_transport_error(e, f"open output {index}") from e
        return MidoOutputHandle(port)

    @staticmethod
    def _port_name(names: list[str], index: int, port_type: str) -> str:
        if not 0 <= index < len(names):
            raise TransportError(
                f"Invalid {port_type} port number {index} ({len(names)} port(s) available)",
                operation=f"open {port_type} {index}",
            )
        return names[index]
