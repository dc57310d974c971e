import sys
import types
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from rolling_avg import formatter  # noqa: E402
from rolling_avg.lorawan_decode import decode_float_le  # noqa: E402


@pytest.mark.parametrize("payload", [[], [0x3F], [0x3F, 0x80], [0x00, 0x80, 0x3F]])
def test_short_payload_reports_error(payload):
    result = formatter.decode_uplink({"bytes": payload})

    assert result == {"errors": ["Not enough bytes for float"]}
    assert "data" not in result


def test_trailing_byte_is_ignored():
    result = formatter.decode_uplink({"bytes": [0x00, 0x00, 0x80, 0x3F, 0xFF]})

    assert result == {"data": {"rolling_avg": 1.0}}
    assert "errors" not in result


def test_accepts_object_with_bytes_attribute():
    uplink = types.SimpleNamespace(bytes=b"\x00\x00\xa0\xc0", fPort=1)

    assert formatter.decode_uplink(uplink) == {"data": {"rolling_avg": -5.0}}


def test_success_matches_decoder_at_offset_zero():
    payload = [0x66, 0x66, 0xB2, 0x41, 0x01, 0x02]

    result = formatter.decode_uplink({"bytes": payload})

    assert result["data"]["rolling_avg"] == decode_float_le(payload, 0)


def test_short_payload_never_reaches_decoder(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("decoder must not run for short payloads")

    monkeypatch.setattr(formatter, "decode_float_le", fail)

    assert formatter.decode_uplink({"bytes": b"\x01"}) == {
        "errors": ["Not enough bytes for float"]
    }


def test_insufficient_length_error_carries_length():
    exc = formatter.InsufficientPayloadLength(3)

    assert isinstance(exc, ValueError)
    assert exc.length == 3
    assert str(exc) == "Not enough bytes for float"
