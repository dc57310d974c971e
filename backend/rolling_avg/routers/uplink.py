import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ..formatter import ROLLING_AVG_KEY, decode_uplink
from ..forwarding import ForwardingError, forward_reading
from ..schemas import (
    DecodeRequest,
    DecodeResult,
    PayloadEncodingError,
    UplinkAck,
    UplinkWebhook,
)
from ..settings import Settings, load_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["uplink"])


def get_settings() -> Settings:
    return load_settings()


@router.post("/decode", response_model=DecodeResult, response_model_exclude_none=True)
async def decode(body: DecodeRequest):
    return decode_uplink(body.as_uplink())


@router.post("/webhooks/ttn/uplink", response_model=UplinkAck, response_model_exclude_none=True)
async def ttn_uplink(body: UplinkWebhook, settings: Settings = Depends(get_settings)):
    device_id = body.end_device_ids.device_id
    message = body.uplink_message
    try:
        payload = message.payload_bytes()
    except PayloadEncodingError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))

    result = decode_uplink({"bytes": payload})
    if "errors" in result:
        # acknowledged with ok=False, never retried
        logger.warning(
            "Dropping uplink from %s (f_cnt=%s, %d bytes): %s",
            device_id,
            message.f_cnt,
            len(payload),
            "; ".join(result["errors"]),
        )
        return UplinkAck(ok=False, device_id=device_id, f_cnt=message.f_cnt, result=result)

    value = result["data"][ROLLING_AVG_KEY]
    attributes = {
        "device_id": device_id,
        "dev_eui": body.end_device_ids.dev_eui,
        "f_port": message.f_port,
        "f_cnt": message.f_cnt,
        "received_at": message.received_at or body.received_at,
    }
    try:
        forwarded = await forward_reading(
            settings,
            value,
            {k: v for k, v in attributes.items() if v is not None},
        )
    except ForwardingError as exc:
        logger.error("Forwarding uplink from %s failed: %s", device_id, exc)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))

    return UplinkAck(
        ok=True,
        device_id=device_id,
        f_cnt=message.f_cnt,
        result=result,
        forwarded=forwarded,
    )
