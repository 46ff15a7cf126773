"""
Centralized error handling utilities.

Low-level errors (mido, python-rtmidi, pydantic, OS) are translated into
MidiPumpError subclasses here so the CLI can show a friendly message and
a recovery hint while the log keeps the technical details.

| Scenario | Use This |
|----------|----------|
| mido / rtmidi call failed | `raise wrap_transport_error(e, "open input 0") from e` |
| Config JSON failed validation | `raise wrap_pydantic_error(e, str(path)) from e` |
| Show an error to the user | `message, hint = format_error_for_display(e)` |
| Critical section with auto-logging | `with ErrorContext("open input port"): ...` |
"""

import logging
from typing import Optional

from .base import MidiPumpError
from .config import ConfigFileInvalidError, ConfigValidationError
from .transport import TransportError

logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Context manager for error handling with automatic logging.

    Example:
        ```python
        with ErrorContext("open output port", logger_instance=logger):
            handle = transport.open_output(index)
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True,
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
            re_raise: Whether to re-raise exceptions
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[BaseException] = None

    def __enter__(self):
        """Enter the context."""
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Exit the context and handle any exceptions.

        Returns:
            True if exception should be suppressed, False otherwise
        """
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val

        if isinstance(exc_val, MidiPumpError):
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)

        return not self.re_raise


def wrap_transport_error(error: Exception, operation: Optional[str] = None) -> TransportError:
    """
    Convert a MIDI library exception to a TransportError.

    The original message is kept verbatim. MidiPumpErrors pass through
    unchanged when they already are TransportErrors.

    Args:
        error: The exception raised by mido or python-rtmidi
        operation: What was being attempted

    Returns:
        A TransportError describing the failure
    """
    if isinstance(error, TransportError):
        return error
    return TransportError(str(error) or type(error).__name__, operation=operation)


def wrap_pydantic_error(error: Exception, file_path: str) -> MidiPumpError:
    """
    Convert Pydantic validation errors to midipump exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg
        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get("loc", ("unknown",)))
            return ConfigValidationError(
                field=field,
                value=first_error.get("input"),
                error_msg=first_error.get("msg", "validation failed"),
                file_path=file_path,
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get("loc", ("unknown",)))
                error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")
            combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)
            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=combined_msg,
                file_path=file_path,
            )

    return ConfigValidationError(field="unknown", value=None, error_msg=error_msg, file_path=file_path)


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, MidiPumpError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
