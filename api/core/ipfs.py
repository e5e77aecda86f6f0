"""
nft.storage client helpers.

Used endpoints:
- GET  <image url>          -> raw image bytes
- POST /upload (Bearer)     -> {"ok": true, "value": {"cid": "bafy..."}}
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from . import settings
from .errors import UpstreamError

logger = logging.getLogger(__name__)


def gateway_url_for(cid: str, gateway: str | None = None) -> str:
    base = gateway or settings.ipfs_gateway_url()
    return base.rstrip("/") + "/" + cid


async def upload_image(
    image_url: str,
    *,
    token: str | None = None,
    base_url: str | None = None,
    timeout_s: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """
    Download `image_url` and pin its bytes on nft.storage. Returns the CID.
    """
    token = (token if token is not None else settings.ipfs_storage_token()).strip()
    if not token:
        raise UpstreamError("IPFS storage token is not set.")
    if not (image_url or "").strip():
        raise UpstreamError("Artwork has no image url to mirror.")

    timeout = timeout_s if timeout_s is not None else settings.ipfs_timeout_s()
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            img_resp = await client.get(image_url)
            if img_resp.status_code != 200:
                raise UpstreamError(f"Image download failed: {img_resp.status_code} {image_url}")

            content_type = img_resp.headers.get("content-type") or "image/png"
            resp = await client.post(
                (base_url or settings.ipfs_storage_url()).rstrip("/") + "/upload",
                headers={
                    "Authorization": f"Bearer {token}",
                    "Content-Type": content_type,
                },
                content=img_resp.content,
            )
    except httpx.HTTPError as e:
        raise UpstreamError(f"IPFS upload request failed: {e}") from e

    if resp.status_code != 200:
        body = resp.text[:500]
        raise UpstreamError(f"IPFS upload failed: {resp.status_code} {body}")

    try:
        data: dict[str, Any] = resp.json()
    except ValueError as e:
        raise UpstreamError("IPFS upload returned a non-JSON body.") from e

    value = data.get("value") if isinstance(data, dict) else None
    cid = value.get("cid") if isinstance(value, dict) else None
    if not isinstance(cid, str) or not cid.strip():
        raise UpstreamError("IPFS upload returned no cid.")

    logger.info("ipfs_upload_complete cid=%s bytes=%s", cid, len(img_resp.content))
    return cid.strip()
