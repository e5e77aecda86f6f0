"""
seaart.ai community search client.

Used endpoint:
- POST /api/v1/artwork/list -> {"data": {"items": [{...}, ...]}, ...}

The payload is returned untouched; `items_of()` is the only place that looks
at the envelope.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from . import settings
from .errors import ExtractionError, UpstreamError

SEARCH_PATH = "/api/v1/artwork/list"
PAGE_SIZE = 60
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/108.0.0.0 Safari/537.36"
)

logger = logging.getLogger(__name__)


def normalize_keyword(keyword: str) -> str:
    # Keywords often arrive URL-style: "8K+gundam+mecha".
    return (keyword or "").replace("+", " ").strip()


def build_search_payload(keyword: str, page: int, tags: list[str]) -> dict[str, Any]:
    return {
        "keyword": normalize_keyword(keyword),
        "order_by": "hot",
        "page": page,
        "page_size": PAGE_SIZE,
        "tags": list(tags),
        "type": "community",
    }


async def search_artworks(
    keyword: str,
    page: int = 1,
    tags: list[str] | None = None,
    *,
    base_url: str | None = None,
    timeout_s: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[str, Any]:
    """
    Run one page of the community search and return the decoded JSON body.
    """
    if page < 1:
        raise ValueError("page must be >= 1.")

    payload = build_search_payload(keyword, page, tags or [])
    logger.debug("seaart_search keyword=%r page=%s tags=%s", payload["keyword"], page, payload["tags"])

    try:
        async with httpx.AsyncClient(
            base_url=(base_url or settings.seaart_base_url()).rstrip("/"),
            timeout=timeout_s if timeout_s is not None else settings.seaart_timeout_s(),
            headers={"User-Agent": USER_AGENT},
            transport=transport,
        ) as client:
            resp = await client.post(SEARCH_PATH, json=payload)
    except httpx.HTTPError as e:
        raise UpstreamError(f"seaart search request failed: {e}") from e

    if resp.status_code != 200:
        body = resp.text[:500]
        raise UpstreamError(f"seaart search request failed: {resp.status_code} {body}")

    try:
        data = resp.json()
    except ValueError as e:
        raise UpstreamError("seaart search returned a non-JSON body.") from e

    if not isinstance(data, dict):
        raise UpstreamError("seaart search returned a non-object JSON body.")
    return data


def items_of(payload: Any) -> list[Any]:
    """
    Return `data.items` of a search response, or raise ExtractionError.
    """
    data = payload.get("data") if isinstance(payload, dict) else None
    items = data.get("items") if isinstance(data, dict) else None
    if not isinstance(items, list):
        raise ExtractionError("seaart response has no `data.items` array.")
    return items
