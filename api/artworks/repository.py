"""
Artwork persistence (raw SQL over an injected asyncpg pool).

Create, update and delete each run in their own transaction so the values the
database assigns (`id`, `updated_date`) are read back atomically with the
write. Schema: `db/migrations/*_create_ipfs_image.sql`.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import asyncpg

from core.errors import NotFoundError, PersistenceError

from .models import ArtworkView, StoredArtwork

logger = logging.getLogger(__name__)

# Everything the driver or the socket can raise while we hold a connection.
_DB_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)

_VIEW_COLUMNS = "id, image, time_created, ipfs_image_url, category, updated_date"
_ALL_COLUMNS = (
    "id, image, time_created, ipfs_image_url, category, updated_date, "
    "width, height, prompt, hash_id"
)


# `ipfs_image.id` is a serial (int4) column.
MAX_ARTWORK_ID = 2**31 - 1


def _storable_id(artwork_id: int) -> bool:
    return 1 <= artwork_id <= MAX_ARTWORK_ID


def _rows_affected(status: str) -> int:
    # asyncpg returns the command tag, e.g. "DELETE 1".
    try:
        return int((status or "").rsplit(" ", 1)[-1])
    except ValueError:
        return 0


class ArtworkRepository:
    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    @asynccontextmanager
    async def _connection(self, action: str) -> AsyncIterator[asyncpg.Connection]:
        try:
            async with self._pool.acquire() as conn:
                yield conn
        except _DB_ERRORS as e:
            logger.warning("db_error action=%s error=%s", action, e)
            raise PersistenceError(f"{action} failed: {e}") from e

    @asynccontextmanager
    async def _transaction(self, action: str) -> AsyncIterator[asyncpg.Connection]:
        async with self._connection(action) as conn:
            async with conn.transaction():
                yield conn

    async def create_row(
        self,
        *,
        image: str,
        ipfs_image_url: str,
        category: str | None,
        width: int,
        height: int,
        prompt: str | None,
        hash_id: str,
    ) -> dict[str, Any]:
        """
        Insert one artwork. Returns {id, image, ipfs_image_url, category, hash_id}.
        """
        async with self._transaction("create artwork") as conn:
            row = await conn.fetchrow(
                """
                INSERT INTO ipfs_image (image, ipfs_image_url, category, width, height, prompt, hash_id)
                VALUES ($1, $2, $3, $4, $5, $6, $7)
                RETURNING id, image, ipfs_image_url, category, hash_id
                """,
                image,
                ipfs_image_url,
                category,
                width,
                height,
                prompt,
                hash_id,
            )
        if row is None:
            raise PersistenceError("create artwork failed: no row returned.")

        logger.debug("artwork_created id=%s hash_id=%s", row["id"], row["hash_id"])
        return dict(row)

    async def read_all(self) -> list[StoredArtwork]:
        async with self._connection("read artworks") as conn:
            rows = await conn.fetch(f"SELECT {_ALL_COLUMNS} FROM ipfs_image ORDER BY id")
        return [StoredArtwork.from_row(r) for r in rows]

    async def read_all_projected(self) -> list[ArtworkView]:
        async with self._connection("read artworks") as conn:
            rows = await conn.fetch(f"SELECT {_VIEW_COLUMNS} FROM ipfs_image ORDER BY id")
        return [ArtworkView.from_row(r) for r in rows]

    async def read_one(self, artwork_id: int) -> StoredArtwork | None:
        if not _storable_id(artwork_id):
            return None
        async with self._connection("read artwork") as conn:
            row = await conn.fetchrow(
                f"SELECT {_ALL_COLUMNS} FROM ipfs_image WHERE id = $1",
                artwork_id,
            )
        return StoredArtwork.from_row(row) if row is not None else None

    async def update(
        self,
        artwork_id: int,
        *,
        image: str | None = None,
        ipfs_image_url: str | None = None,
        category: str | None = None,
    ) -> ArtworkView:
        """
        Overwrite the given fields, keep the None ones, always bump `updated_date`.

        Raises NotFoundError when no row has `artwork_id`.
        """
        if not _storable_id(artwork_id):
            raise NotFoundError(f"Artwork {artwork_id} not found.")
        async with self._transaction("update artwork") as conn:
            row = await conn.fetchrow(
                f"""
                UPDATE ipfs_image
                SET
                    image = COALESCE($1, image),
                    ipfs_image_url = COALESCE($2, ipfs_image_url),
                    category = COALESCE($3, category),
                    updated_date = now()
                WHERE id = $4
                RETURNING {_VIEW_COLUMNS}
                """,
                image,
                ipfs_image_url,
                category,
                artwork_id,
            )
        if row is None:
            raise NotFoundError(f"Artwork {artwork_id} not found.")
        return ArtworkView.from_row(row)

    async def delete_by_id(self, artwork_id: int) -> int:
        """
        Delete one artwork. Returns rows affected; 0 means it was already gone.
        """
        if not _storable_id(artwork_id):
            return 0
        async with self._transaction("delete artwork") as conn:
            status = await conn.execute("DELETE FROM ipfs_image WHERE id = $1", artwork_id)
        rows = _rows_affected(status)
        logger.debug("artwork_deleted id=%s rows=%s", artwork_id, rows)
        return rows
