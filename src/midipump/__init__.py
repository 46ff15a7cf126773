"""midipump: callback-based MIDI input dispatch and output encoding."""

__version__ = "0.1.0"

from .exceptions import DeviceNotFoundError, MidiPumpError, TransportError, WrongArityError
from .midi import MidiInput, MidiOutput
from .protocol import Mask, StatusType, is_realtime, packet_length

__all__ = [
    "DeviceNotFoundError",
    "Mask",
    "MidiInput",
    "MidiOutput",
    "MidiPumpError",
    "StatusType",
    "TransportError",
    "WrongArityError",
    "is_realtime",
    "packet_length",
]
