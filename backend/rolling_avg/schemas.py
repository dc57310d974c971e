import base64
import binascii
from typing import Annotated, Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

Octet = Annotated[int, Field(ge=0, le=255)]


class PayloadEncodingError(ValueError):
    """Raised when frm_payload is not valid base64."""


class DecodeRequest(BaseModel):
    payload: list[Octet] = Field(validation_alias=AliasChoices("bytes", "payload"))

    def as_uplink(self) -> dict[str, Any]:
        return {"bytes": bytes(self.payload)}


class EndDeviceIds(BaseModel):
    device_id: str
    dev_eui: Optional[str] = None
    model_config = ConfigDict(extra="ignore")


class UplinkMessage(BaseModel):
    f_port: Optional[int] = None
    f_cnt: Optional[int] = None
    frm_payload: Optional[str] = None
    received_at: Optional[str] = None
    model_config = ConfigDict(extra="ignore")

    def payload_bytes(self) -> bytes:
        if not self.frm_payload:
            return b""
        try:
            return base64.b64decode(self.frm_payload, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise PayloadEncodingError("frm_payload is not valid base64") from exc


class UplinkWebhook(BaseModel):
    end_device_ids: EndDeviceIds
    uplink_message: UplinkMessage
    received_at: Optional[str] = None
    model_config = ConfigDict(extra="ignore")


class DecodedData(BaseModel):
    rolling_avg: float


class DecodeResult(BaseModel):
    data: Optional[DecodedData] = None
    errors: Optional[list[str]] = None


class UplinkAck(BaseModel):
    ok: bool
    device_id: str
    f_cnt: Optional[int] = None
    result: DecodeResult
    forwarded: bool = False
