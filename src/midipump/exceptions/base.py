"""Root of the midipump exception tree."""

from typing import Optional


class MidiPumpError(Exception):
    """
    Any error raised by midipump itself.

    ``str(error)`` is the short message meant for people. Logs use
    ``technical_message``, which adds the port, status code or library
    detail. ``recovery_hint`` is printed by the CLI under the message.
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        # False for programming errors such as registering the wrong arity
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message
