"""
Command encoding for the PulseAudio native protocol

Only the pieces needed to address a device by name and change its volume or
mute flag live here. Framing, authentication and the reply format belong to
the transport.
"""

import math
import struct
from enum import Enum, IntEnum
from typing import List, Sequence, Union

from ..errors import ProtocolError

# Fixed-point volume that represents unity gain
VOLUME_NORM = 0xFFFF
# Index sentinel: address the device by name, not by numeric handle
INVALID_INDEX = 0xFFFFFFFF

U32_MASK = 0xFFFFFFFF

Field = Union[int, str, bool, bytes, Sequence[int]]


class Command(IntEnum):
    SET_SINK_VOLUME = 36
    SET_SINK_MUTE = 39
    SET_SOURCE_MUTE = 40


class Tag(bytes, Enum):
    U32 = b"L"
    STRING = b"t"
    CVOLUME = b"v"
    TRUE = b"1"
    FALSE = b"0"


def volume_to_raw(volume: float, norm: int = VOLUME_NORM) -> int:
    """Convert a normalized volume to its fixed-point form.

    The result is truncated, not rounded, and is never clamped: values above
    1.0 are boosts and anything past the 32-bit range wraps. The server decides
    what to do with it.
    """
    if not math.isfinite(volume):
        raise ProtocolError(f"Volume {volume} is not a finite number")
    return int(volume * norm) & U32_MASK


def raw_to_volume(raw: int, norm: int = VOLUME_NORM) -> float:
    return raw / norm


def mute_command(muted: bool) -> bytes:
    """Single byte carried by set-mute commands"""
    return Tag.TRUE.value if muted else Tag.FALSE.value


def _encode_u32(value: int) -> bytes:
    if not 0 <= value <= U32_MASK:
        raise ProtocolError(f"Value {value} does not fit in an unsigned 32-bit field")
    return Tag.U32.value + struct.pack(">I", value)


def _encode_string(value: str) -> bytes:
    data = value.encode("utf-8")
    if b"\0" in data:
        raise ProtocolError(f"String field contains a NUL byte: {value!r}")
    return Tag.STRING.value + data + b"\0"


def _encode_cvolume(channels: Sequence[int]) -> bytes:
    if not 0 < len(channels) <= 0xFF:
        raise ProtocolError(f"Invalid channel count {len(channels)} for cvolume")
    for value in channels:
        if not 0 <= value <= U32_MASK:
            raise ProtocolError(f"Channel volume {value} out of range")
    return (
        Tag.CVOLUME.value
        + struct.pack(">B", len(channels))
        + struct.pack(f">{len(channels)}I", *channels)
    )


def encode_fields(*fields: Field) -> bytes:
    """Encode fields in call order.

    bool -> boolean byte, int -> u32, str -> NUL-terminated string,
    list/tuple of ints -> cvolume, bytes -> copied unchanged.
    """
    out = bytearray()
    for field in fields:
        if isinstance(field, bool):
            out += mute_command(field)
        elif isinstance(field, int):
            out += _encode_u32(field)
        elif isinstance(field, str):
            out += _encode_string(field)
        elif isinstance(field, (bytes, bytearray)):
            out += field
        elif isinstance(field, (list, tuple)):
            out += _encode_cvolume(field)
        else:
            raise ProtocolError(f"Cannot encode field of type {type(field).__name__}")
    return bytes(out)


def decode_fields(payload: bytes) -> List[Field]:
    """Parse a payload built by encode_fields back into Python values"""
    fields: List[Field] = []
    pos = 0
    while pos < len(payload):
        tag = payload[pos : pos + 1]
        pos += 1
        if tag == Tag.U32.value:
            if pos + 4 > len(payload):
                raise ProtocolError("Truncated u32 field")
            (value,) = struct.unpack_from(">I", payload, pos)
            fields.append(value)
            pos += 4
        elif tag == Tag.STRING.value:
            end = payload.find(b"\0", pos)
            if end < 0:
                raise ProtocolError("Unterminated string field")
            fields.append(payload[pos:end].decode("utf-8"))
            pos = end + 1
        elif tag == Tag.CVOLUME.value:
            if pos >= len(payload):
                raise ProtocolError("Truncated cvolume field")
            count = payload[pos]
            pos += 1
            if pos + 4 * count > len(payload):
                raise ProtocolError("Truncated cvolume field")
            fields.append(list(struct.unpack_from(f">{count}I", payload, pos)))
            pos += 4 * count
        elif tag == Tag.TRUE.value:
            fields.append(True)
        elif tag == Tag.FALSE.value:
            fields.append(False)
        else:
            raise ProtocolError(f"Unknown field tag {tag!r} at offset {pos - 1}")
    return fields


def set_volume_payload(name: str, cvolume: Sequence[int]) -> bytes:
    return encode_fields(INVALID_INDEX, name, list(cvolume))


def set_mute_payload(name: str, muted: bool) -> bytes:
    return encode_fields(INVALID_INDEX, name, mute_command(muted))
