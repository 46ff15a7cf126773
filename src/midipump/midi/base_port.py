"""Base class for opened MIDI ports."""

import logging
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar, Union

from midipump.exceptions import DeviceNotFoundError, ErrorContext
from midipump.transport import InputHandle, MidiTransport, MidoTransport, OutputHandle

logger = logging.getLogger(__name__)

# Type variable for handle types (InputHandle or OutputHandle)
HandleType = TypeVar("HandleType", InputHandle, OutputHandle)

PortIdentifier = Union[str, int]


class BasePort(ABC, Generic[HandleType]):
    """
    Base for MidiInput and MidiOutput.

    Resolves a port by exact name or by index and opens it on construction.
    A port that fails to open raises and holds no handle. The handle stays
    open until close() (or context manager exit); there is no reconnect.

    Subclasses must implement the abstract methods for port-specific
    operations.
    """

    def __init__(self, identifier: PortIdentifier, transport: Optional[MidiTransport] = None):
        """
        Open a MIDI port.

        Args:
            identifier: Exact port name, or port index
            transport: Transport to use (defaults to MidoTransport)

        Raises:
            DeviceNotFoundError: If no port has the given name
            TransportError: If the transport fails to enumerate or open
        """
        self._transport = transport or MidoTransport()
        self._handle: Optional[HandleType] = None

        port_type = self._get_port_type_name()
        index = self._resolve_index(identifier)
        with ErrorContext(f"open MIDI {port_type} {identifier!r}", logger_instance=logger):
            self._handle = self._open_handle(self._transport, index)
        logger.info(f"Opened MIDI {port_type}: {self._handle.name}")

    @classmethod
    @abstractmethod
    def _list_ports(cls, transport: MidiTransport) -> list[str]:
        """
        Get list of available ports.

        Returns:
            Port names in index order
        """
        pass

    @abstractmethod
    def _open_handle(self, transport: MidiTransport, index: int) -> HandleType:
        """
        Open the port at ``index``.

        Raises:
            TransportError: If port cannot be opened
        """
        pass

    @classmethod
    @abstractmethod
    def _get_port_type_name(cls) -> str:
        """
        Get human-readable port type name for logging.

        Returns:
            "input" or "output"
        """
        pass

    @classmethod
    def device_count(cls, transport: Optional[MidiTransport] = None) -> int:
        """Number of available ports of this type."""
        return len(cls.device_list(transport))

    @classmethod
    def device_list(cls, transport: Optional[MidiTransport] = None) -> list[str]:
        """Names of available ports of this type, in index order."""
        return cls._list_ports(transport or MidoTransport())

    def _resolve_index(self, identifier: PortIdentifier) -> int:
        if isinstance(identifier, int):
            return identifier

        available = self._list_ports(self._transport)
        for index, name in enumerate(available):
            if name == identifier:
                return index
        raise DeviceNotFoundError(identifier, self._get_port_type_name(), available)

    @property
    def name(self) -> Optional[str]:
        """Name of the opened port (None once closed)."""
        return self._handle.name if self._handle else None

    @property
    def is_open(self) -> bool:
        return self._handle is not None

    def close(self) -> None:
        """Close the port. Safe to call more than once."""
        if self._handle is None:
            return
        port_name = self._handle.name
        try:
            self._handle.close()
        finally:
            self._handle = None
        logger.info(f"Closed MIDI {self._get_port_type_name()}: {port_name}")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
