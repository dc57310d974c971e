# lorawan_encode.py
# Pack a rolling average into a 4-byte little-endian binary32 LoRaWAN payload.

from __future__ import annotations

import base64
import struct


def encode_float_le(value: float) -> bytes:
    """
    Payload layout (4 bytes total):
      [rolling_avg f32, little-endian]
    Values outside the binary32 range raise OverflowError from struct.
    """
    return struct.pack("<f", float(value))


def to_hex(payload: bytes) -> str:
    return payload.hex().upper()


def to_base64(payload: bytes) -> str:
    return base64.b64encode(payload).decode("ascii")
