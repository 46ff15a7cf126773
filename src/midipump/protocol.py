"""MIDI protocol vocabulary.

Status codes, bit masks and the fixed packet length of every status type.
Channel-voice statuses carry the channel in the low nibble of the status
byte; system and realtime statuses occupy the whole byte (0xF0-0xFF).
"""

from enum import IntEnum
from typing import Union


class StatusType(IntEnum):
    """MIDI status codes."""

    # Channel voice (low nibble = channel)
    NOTE_OFF = 0x80
    NOTE_ON = 0x90
    AFTERTOUCH = 0xA0
    CONTROL_CHANGE = 0xB0
    PROGRAM_CHANGE = 0xC0
    CHANNEL_PRESSURE = 0xD0
    PITCH_BEND = 0xE0

    # System common
    SYSEX_BEGIN = 0xF0
    TC_QUARTER_FRAME = 0xF1
    SONG_POSITION = 0xF2
    SONG_SELECT = 0xF3
    TUNE_REQUEST = 0xF6
    SYSEX_END = 0xF7

    # Realtime
    CLOCK = 0xF8
    TICK = 0xF9
    START = 0xFA
    CONTINUE = 0xFB
    STOP = 0xFC
    ACTIVE_SENSE = 0xFE
    RESET = 0xFF


class Mask(IntEnum):
    """Bit masks for status and data bytes."""

    CHANNEL = 0x0F
    STATUS = 0xF0
    VALUE = 0x7F


DATA_MAX = 127
NRPN_MAX = 16383

# NRPN controller numbers
NRPN_PARAM_MSB = 99
NRPN_PARAM_LSB = 98
DATA_ENTRY_MSB = 6
DATA_ENTRY_LSB = 38

# Total over StatusType; 0 means "not a fixed-arity message"
_PACKET_LENGTHS: dict[StatusType, int] = {
    StatusType.NOTE_OFF: 3,
    StatusType.NOTE_ON: 3,
    StatusType.AFTERTOUCH: 3,
    StatusType.CONTROL_CHANGE: 3,
    StatusType.PROGRAM_CHANGE: 2,
    StatusType.CHANNEL_PRESSURE: 2,
    StatusType.PITCH_BEND: 3,
    StatusType.SYSEX_BEGIN: 0,
    StatusType.TC_QUARTER_FRAME: 2,
    StatusType.SONG_POSITION: 3,
    StatusType.SONG_SELECT: 2,
    StatusType.TUNE_REQUEST: 1,
    StatusType.SYSEX_END: 0,
    StatusType.CLOCK: 1,
    StatusType.TICK: 1,
    StatusType.START: 1,
    StatusType.CONTINUE: 1,
    StatusType.STOP: 1,
    StatusType.ACTIVE_SENSE: 1,
    StatusType.RESET: 1,
}


def to_status(code: int) -> Union[StatusType, int]:
    """Return the StatusType for ``code``, or the plain int if it has none."""
    try:
        return StatusType(code)
    except ValueError:
        return code


def packet_length(status: Union[StatusType, int]) -> int:
    """
    Get the total byte length of a message with this status.

    Args:
        status: Status code (channel bits must already be stripped)

    Returns:
        3, 2 or 1 for fixed-arity messages, 0 for SysEx framing markers
        and unknown codes
    """
    status = to_status(status)
    if not isinstance(status, StatusType):
        return 0
    return _PACKET_LENGTHS[status]


def is_realtime(status: Union[StatusType, int]) -> bool:
    """Check if a status is a realtime message (anything from CLOCK up)."""
    return int(status) >= StatusType.CLOCK


def is_channel_voice(byte: int) -> bool:
    """Check if a status byte belongs to a channel-voice message."""
    return 0x80 <= byte < StatusType.SYSEX_BEGIN


def split_status_byte(byte: int) -> tuple[Union[StatusType, int], int]:
    """
    Split a raw status byte into (status, channel).

    Channel-voice bytes lose their channel bits. System bytes keep the
    whole byte as the status; their channel value is meaningless.
    """
    channel = byte & Mask.CHANNEL
    if is_channel_voice(byte):
        return to_status(byte & Mask.STATUS), channel
    return to_status(byte), channel


def clamp(value: int, upper: int) -> int:
    """Clamp ``value`` to ``[0, upper]``."""
    return max(0, min(int(value), upper))
