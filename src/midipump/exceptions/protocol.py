"""Protocol-related exceptions."""

from .base import MidiPumpError


class ProtocolError(MidiPumpError):
    """A request does not fit the MIDI protocol."""
    pass


class WrongArityError(ProtocolError):
    """A handler was registered for a status whose packet length differs."""

    def __init__(self, status: int, expected: int, actual: int):
        """
        Initialize wrong arity error.

        Args:
            status: The status code the handler was registered for
            expected: Packet length the handler table accepts
            actual: Packet length of the status
        """
        super().__init__(
            user_message=f"message with status {int(status):02X} is not a {expected} byte message",
            technical_message=(
                f"Cannot register {expected}-byte handler for status 0x{int(status):02X} "
                f"(packet length {actual})"
            ),
            recoverable=False,
        )
        self.status = status
        self.expected = expected
        self.actual = actual
