"""
Mirror an artwork's image to IPFS and record the gateway url.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from artworks import operations
from artworks.models import NO_IPFS, ArtworkView
from artworks.repository import ArtworkRepository
from core import ipfs
from core.errors import NotFoundError

logger = logging.getLogger(__name__)

UploadFn = Callable[[str], Awaitable[str]]


async def mirror_artwork(
    artwork_id: int,
    *,
    store: ArtworkRepository,
    upload: UploadFn | None = None,
    force: bool = False,
) -> ArtworkView:
    """
    Upload the artwork image to IPFS, then point `ipfs_image_url` at it.

    Rows already mirrored are returned untouched unless `force` is set.
    """
    row = await store.read_one(artwork_id)
    if row is None:
        raise NotFoundError(f"Artwork {artwork_id} not found.")

    if row.ipfs_image_url != NO_IPFS and not force:
        return row.view()

    upload = upload or ipfs.upload_image
    cid = await upload(row.image)

    result = await operations.execute(
        operations.Update(id=artwork_id, ipfs_image_url=ipfs.gateway_url_for(cid)),
        store,
    )
    logger.info("artwork_mirrored id=%s cid=%s", artwork_id, cid)
    return result.view
