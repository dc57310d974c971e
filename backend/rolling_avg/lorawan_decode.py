# lorawan_decode.py
# Unpack a little-endian IEEE-754 binary32 value from a LoRaWAN payload.

from __future__ import annotations

import math
from typing import Sequence, Union

ByteBuffer = Union[bytes, bytearray, memoryview, Sequence[int]]

FLOAT_SIZE = 4

_SIGN_BIT = 0x80000000
_EXPONENT_MASK = 0xFF
_MANTISSA_MASK = 0x7FFFFF
_IMPLICIT_ONE = 0x800000
_EXPONENT_BIAS = 127
_MANTISSA_BITS = 23


def _assemble_bits(buffer: ByteBuffer, offset: int) -> int:
    # buffer[offset] is the least significant byte
    bits = (
        buffer[offset]
        | (buffer[offset + 1] << 8)
        | (buffer[offset + 2] << 16)
        | (buffer[offset + 3] << 24)
    )
    return bits & 0xFFFFFFFF


def decode_float_le(buffer: ByteBuffer, offset: int = 0) -> float:
    """
    Decode the binary32 float stored in ``buffer[offset:offset + 4]``.

    Layout of the assembled 32-bit word:
        Sign | Exponent  |  Mantissa
        31   | [30 - 23] |  [22 - 0]

    value = sign * (0x800000 | mantissa) * 2 ** (exponent - 127 - 23)

    The caller guarantees at least four bytes from ``offset``. Only normalized
    finite inputs are decoded exactly; subnormal and Inf/NaN patterns go
    through the same formula. An all-zero exponent and mantissa is signed zero.
    """
    bits = _assemble_bits(buffer, offset)

    sign = -1.0 if bits & _SIGN_BIT else 1.0
    exponent_field = (bits >> _MANTISSA_BITS) & _EXPONENT_MASK
    mantissa = bits & _MANTISSA_MASK

    if exponent_field == 0 and mantissa == 0:
        return sign * 0.0

    significand = mantissa | _IMPLICIT_ONE
    exponent = exponent_field - _EXPONENT_BIAS
    # ldexp keeps the scaling exact; binary64 holds every binary32 significand
    return sign * math.ldexp(significand, exponent - _MANTISSA_BITS)
