"""
Batch ingestion: one page of seaart search results -> artwork rows.

Flow:
1) Search seaart (UpstreamError aborts the batch)
2) Take `data.items` (ExtractionError aborts the batch, nothing is inserted)
3) For each item: extract metadata, run a Create operation
4) Count inserts and failures; a PersistenceError on one item is logged and
   counted, the remaining items still run

Items are processed one after another. Rows committed before a cancellation
stay committed.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import asdict, dataclass
from typing import Any

from artworks import operations
from artworks.models import NO_IPFS
from artworks.operations import ArtworkStore
from core import seaart
from core.errors import PersistenceError

from . import extractor

logger = logging.getLogger(__name__)

SearchFn = Callable[[str, int, list[str]], Awaitable[dict[str, Any]]]


@dataclass(frozen=True)
class IngestStats:
    inserted_count: int
    failed_count: int

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


def create_operation(item: Any, *, category: str | None) -> operations.Create:
    """
    Build the Create operation for one search item.

    The category comes from the batch, never from the item.
    """
    meta = extractor.extract(item)
    return operations.Create(
        image=meta.image_url,
        ipfs_image_url=NO_IPFS,
        category=category,
        width=meta.width,
        height=meta.height,
        prompt=meta.prompt,
        hash_id=meta.hash_id,
    )


async def ingest(
    keyword: str,
    page: int = 1,
    tags: list[str] | None = None,
    category: str | None = None,
    *,
    store: ArtworkStore,
    search: SearchFn | None = None,
) -> IngestStats:
    search = search or seaart.search_artworks
    payload = await search(keyword, page, list(tags or []))
    items = seaart.items_of(payload)

    inserted = 0
    failed = 0
    for index, item in enumerate(items):
        operation = create_operation(item, category=category)
        try:
            await operations.execute(operation, store)
        except PersistenceError as e:
            failed += 1
            logger.warning(
                "ingest_item_failed keyword=%r page=%s index=%s hash_id=%s error=%s",
                keyword,
                page,
                index,
                operation.hash_id,
                e.message,
            )
            continue
        inserted += 1

    logger.info(
        "ingest_complete keyword=%r page=%s items=%s inserted=%s failed=%s",
        keyword,
        page,
        len(items),
        inserted,
        failed,
    )
    return IngestStats(inserted_count=inserted, failed_count=failed)
