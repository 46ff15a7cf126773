"""MIDI transport layer."""

from .mido_transport import MidoInputHandle, MidoOutputHandle, MidoTransport
from .protocols import InputHandle, MidiTransport, OutputHandle

__all__ = [
    "InputHandle",
    "MidiTransport",
    "MidoInputHandle",
    "MidoOutputHandle",
    "MidoTransport",
    "OutputHandle",
]
