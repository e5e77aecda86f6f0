"""
FastAPI router for ingestion endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from artworks.dependencies import get_repository
from artworks.repository import ArtworkRepository
from core import seaart

from . import mirror, schemas, service

router = APIRouter()


@router.post("/begin_insert")
async def begin_insert(
    request: schemas.IngestRequest,
    store: ArtworkRepository = Depends(get_repository),
) -> dict:
    """
    Import one page of seaart search results as artwork rows.

    Per-item failures only show up in `failed_count`.
    """
    stats = await service.ingest(
        request.keyword,
        request.page,
        request.tags,
        request.category,
        store=store,
    )
    return stats.as_dict()


@router.get("/test_search_query")
async def test_search_query(
    q: str = Query(..., min_length=1, max_length=500),
    page: int = Query(1, ge=1),
) -> dict:
    """
    Raw upstream payload for a keyword, for checking what an import would see.
    """
    return await seaart.search_artworks(q, page, [])


@router.post("/mirror_data/{artwork_id}")
async def mirror_data(
    artwork_id: int,
    force: bool = Query(False),
    store: ArtworkRepository = Depends(get_repository),
) -> dict:
    view = await mirror.mirror_artwork(artwork_id, store=store, force=force)
    return view.as_dict()
