"""
Artwork CRUD endpoints.

Handlers only translate HTTP <-> operations; everything goes through
`operations.execute()`.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from . import operations, schemas
from .dependencies import get_repository
from .repository import ArtworkRepository

router = APIRouter()


@router.get("/get_all")
async def get_all(store: ArtworkRepository = Depends(get_repository)) -> list[dict]:
    result = await operations.execute(operations.Fetch(), store)
    return [view.as_dict() for view in result.views]


@router.get("/get_all_raw")
async def get_all_raw(store: ArtworkRepository = Depends(get_repository)) -> list[dict]:
    """
    Full stored rows, including width/height/prompt/hash_id. Diagnostic only.
    """
    rows = await store.read_all()
    return [row.as_dict() for row in rows]


@router.post("/create_data")
async def create_data(
    request: schemas.CreateArtworkRequest,
    store: ArtworkRepository = Depends(get_repository),
) -> dict:
    result = await operations.execute(
        operations.Create(
            image=request.image,
            ipfs_image_url=request.ipfs_image_url,
            category=request.category,
            width=request.width,
            height=request.height,
            prompt=request.prompt,
            hash_id=request.hash_id,
        ),
        store,
    )
    return result.as_dict()


@router.patch("/update_data/{artwork_id}")
async def update_data(
    artwork_id: int,
    request: schemas.UpdateArtworkRequest,
    store: ArtworkRepository = Depends(get_repository),
) -> dict:
    result = await operations.execute(
        operations.Update(
            id=artwork_id,
            image=request.image,
            ipfs_image_url=request.ipfs_image_url,
            category=request.category,
        ),
        store,
    )
    return result.view.as_dict()


@router.delete("/delete_data/{artwork_id}")
async def delete_data(
    artwork_id: int,
    store: ArtworkRepository = Depends(get_repository),
) -> dict:
    result = await operations.execute(operations.Delete(id=artwork_id), store)
    if result.rows_affected:
        message = f"{artwork_id} successfully deleted"
    else:
        message = f"{artwork_id} was already absent"
    return {"rows_affected": result.rows_affected, "message": message}
