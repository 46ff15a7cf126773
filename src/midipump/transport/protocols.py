"""Transport protocols.

The core only needs a handful of operations from the MIDI library:
enumerate ports, open a port by index, poll raw bytes without blocking,
and send raw bytes. Anything providing these can drive MidiInput and
MidiOutput.
"""

from collections.abc import Sequence
from typing import Protocol


class InputHandle(Protocol):
    """An open MIDI input port."""

    name: str

    def receive(self) -> list[int]:
        """
        Get the next buffered message without blocking.

        Returns:
            Raw message bytes, or an empty list if nothing is pending

        Raises:
            TransportError: If the port cannot be read
        """
        ...

    def close(self) -> None:
        """Close the port."""
        ...


class OutputHandle(Protocol):
    """An open MIDI output port."""

    name: str

    def send(self, data: Sequence[int]) -> None:
        """
        Send one raw message.

        Raises:
            TransportError: If the message cannot be sent
        """
        ...

    def close(self) -> None:
        """Close the port."""
        ...


class MidiTransport(Protocol):
    """Port enumeration and opening."""

    def list_input_ports(self) -> list[str]:
        """List input port names in index order."""
        ...

    def list_output_ports(self) -> list[str]:
        """List output port names in index order."""
        ...

    def open_input(self, index: int) -> InputHandle:
        """Open an input port by index."""
        ...

    def open_output(self, index: int) -> OutputHandle:
        """Open an output port by index."""
        ...
