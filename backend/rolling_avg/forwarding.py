"""Forward decoded rolling averages to a downstream ingest service."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .settings import Settings

logger = logging.getLogger(__name__)


class ForwardingError(Exception):
    """Raised when the ingest service cannot accept a reading."""


def _extract_error_detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        text = response.text.strip()
        return text or f"Ingest service returned HTTP {response.status_code}"

    detail = payload.get("detail") if isinstance(payload, dict) else None
    if isinstance(detail, str) and detail:
        return detail
    return f"Ingest service returned HTTP {response.status_code}"


async def forward_reading(
    settings: Settings,
    value: float,
    attributes: dict[str, Any] | None = None,
) -> bool:
    """Post one reading to the ingest endpoint.

    Returns ``False`` when forwarding is not configured.
    """

    if not settings.forwarding_enabled:
        return False

    body = {
        "sensor_id": settings.ingest_sensor_id,
        "value": value,
        "attributes": attributes or {},
    }
    timeout = httpx.Timeout(settings.forward_timeout, read=settings.forward_timeout)
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.post(settings.ingest_url, json=body)
    except httpx.RequestError as exc:
        raise ForwardingError("Failed to contact ingest service") from exc

    if response.status_code >= 400:
        raise ForwardingError(_extract_error_detail(response))

    logger.info("Forwarded rolling_avg=%s to %s", value, settings.ingest_url)
    return True
