"""MIDI ports: handler dispatch on input, message encoding on output."""

from .base_port import BasePort, PortIdentifier
from .encoding import encode_cc, encode_note, encode_nrpn
from .input import MidiInput
from .output import MidiOutput

__all__ = [
    "BasePort",
    "MidiInput",
    "MidiOutput",
    "PortIdentifier",
    "encode_cc",
    "encode_note",
    "encode_nrpn",
]
