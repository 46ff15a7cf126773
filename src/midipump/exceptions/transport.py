"""Transport-related exceptions.

- TransportError: The underlying MIDI library failed
- DeviceNotFoundError: No port matched the requested name
"""

from typing import Optional

from .base import MidiPumpError


class TransportError(MidiPumpError):
    """The MIDI transport (port enumeration, open, send) failed."""

    def __init__(self, original_error: str, operation: Optional[str] = None):
        """
        Initialize transport error.

        Args:
            original_error: Message from the underlying library, kept verbatim
            operation: What was being attempted (e.g. "open input 2")
        """
        technical = original_error
        if operation:
            technical = f"{operation} failed: {original_error}"

        super().__init__(
            user_message=original_error,
            technical_message=technical,
            recoverable=True,
            recovery_hint="Check that the MIDI device is connected and not used by another application",
        )
        self.original_error = original_error
        self.operation = operation


class DeviceNotFoundError(TransportError):
    """No MIDI port with the requested name exists."""

    def __init__(self, name: str, port_type: str, available: list[str]):
        """
        Initialize device not found error.

        Args:
            name: The port name that was looked up
            port_type: "input" or "output"
            available: Port names that were enumerated
        """
        MidiPumpError.__init__(
            self,
            user_message=f"MIDI {port_type} port not found: {name}",
            technical_message=(
                f"No {port_type} port named {name!r} among {len(available)} port(s): {available}"
            ),
            recoverable=True,
            recovery_hint=_format_available(port_type, available),
        )
        self.original_error = self.technical_message
        self.operation = f"find {port_type} {name!r}"
        self.name = name
        self.port_type = port_type
        self.available = available


def _format_available(port_type: str, available: list[str]) -> str:
    if not available:
        return f"No MIDI {port_type} ports are available. Connect a device and try again."
    hint = f"Available {port_type} ports:\n"
    hint += "\n".join(f"  [{i}] {name}" for i, name in enumerate(available))
    hint += "\nRun 'midipump list' to see all MIDI ports"
    return hint
