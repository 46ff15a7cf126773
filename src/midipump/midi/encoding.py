"""Encode outbound channel messages into raw bytes.

Data values are clamped, never rejected: anything above the range is
sent as the maximum and negative values as 0.
"""

from midipump.protocol import (
    DATA_ENTRY_LSB,
    DATA_ENTRY_MSB,
    DATA_MAX,
    NRPN_MAX,
    NRPN_PARAM_LSB,
    NRPN_PARAM_MSB,
    Mask,
    StatusType,
    clamp,
)


def status_byte(status: StatusType, channel: int) -> int:
    """Combine a channel-voice status with a channel (masked to 0-15)."""
    return int(status) | (channel & Mask.CHANNEL)


def encode_note(on: bool, channel: int, number: int, velocity: int) -> list[int]:
    """Encode a note on/off message."""
    status = StatusType.NOTE_ON if on else StatusType.NOTE_OFF
    return [
        status_byte(status, channel),
        clamp(number, DATA_MAX),
        clamp(velocity, DATA_MAX),
    ]


def encode_cc(channel: int, number: int, value: int) -> list[int]:
    """Encode a control change message."""
    return [
        status_byte(StatusType.CONTROL_CHANGE, channel),
        clamp(number, DATA_MAX),
        clamp(value, DATA_MAX),
    ]


def encode_nrpn(channel: int, number: int, value: int) -> list[list[int]]:
    """
    Encode a 14-bit NRPN parameter change.

    Returns four control change messages in send order: parameter MSB
    (CC99), parameter LSB (CC98), data entry MSB (CC6), data entry LSB
    (CC38).
    """
    number = clamp(number, NRPN_MAX)
    value = clamp(value, NRPN_MAX)
    return [
        encode_cc(channel, NRPN_PARAM_MSB, (number >> 7) & Mask.VALUE),
        encode_cc(channel, NRPN_PARAM_LSB, number & Mask.VALUE),
        encode_cc(channel, DATA_ENTRY_MSB, (value >> 7) & Mask.VALUE),
        encode_cc(channel, DATA_ENTRY_LSB, value & Mask.VALUE),
    ]
