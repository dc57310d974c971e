"""Payload formatter for rolling-average uplinks.

Mirrors the network-server formatter contract: the result is either
``{"data": {...}}`` or ``{"errors": [...]}``, never both.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .lorawan_decode import FLOAT_SIZE, ByteBuffer, decode_float_le

logger = logging.getLogger(__name__)

ROLLING_AVG_KEY = "rolling_avg"
NOT_ENOUGH_BYTES = "Not enough bytes for float"


class InsufficientPayloadLength(ValueError):
    """Raised when an uplink carries fewer bytes than one float needs."""

    def __init__(self, length: int):
        super().__init__(NOT_ENOUGH_BYTES)
        self.length = length


def _payload_bytes(uplink: Any) -> ByteBuffer:
    if isinstance(uplink, Mapping):
        return uplink["bytes"]
    return uplink.bytes


def _require_float(payload: ByteBuffer) -> None:
    if len(payload) < FLOAT_SIZE:
        raise InsufficientPayloadLength(len(payload))


def decode_uplink(uplink: Any) -> dict[str, Any]:
    """Decode the rolling average carried in the first four payload bytes."""

    payload = _payload_bytes(uplink)
    try:
        _require_float(payload)
    except InsufficientPayloadLength as exc:
        logger.debug("Rejecting %d byte payload: %s", exc.length, exc)
        return {"errors": [str(exc)]}

    return {"data": {ROLLING_AVG_KEY: decode_float_le(payload, 0)}}
