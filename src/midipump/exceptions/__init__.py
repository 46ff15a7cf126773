"""
Custom exception hierarchy for midipump.

```
MidiPumpError (base)
├── TransportError
│   └── DeviceNotFoundError
├── ProtocolError
│   └── WrongArityError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All exceptions carry a `user_message` for display, a `technical_message`
for logs and an optional `recovery_hint`.

```python
from midipump.exceptions import WrongArityError

try:
    midi_in.register_3byte(StatusType.SYSEX_BEGIN, handler)
except WrongArityError as e:
    print(e)  # "message with status F0 is not a 3 byte message"
```
"""

from .base import MidiPumpError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorContext,
    format_error_for_display,
    wrap_pydantic_error,
    wrap_transport_error,
)
from .protocol import ProtocolError, WrongArityError
from .transport import DeviceNotFoundError, TransportError

__all__ = [
    # Base
    "MidiPumpError",
    # Transport
    "DeviceNotFoundError",
    "TransportError",
    # Protocol
    "ProtocolError",
    "WrongArityError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
    "wrap_pydantic_error",
    "wrap_transport_error",
]
