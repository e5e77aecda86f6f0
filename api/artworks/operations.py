"""
Artwork operations.

`execute()` is the single entry point for CRUD on artworks. Each operation
maps to exactly one store primitive; the result is reshaped into the matching
result type. Store errors (PersistenceError, NotFoundError) propagate as-is.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, Union

from .models import ArtworkView


class ArtworkStore(Protocol):
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
    ) -> dict[str, Any]: ...

    async def read_all_projected(self) -> list[ArtworkView]: ...

    async def update(
        self,
        artwork_id: int,
        *,
        image: str | None = None,
        ipfs_image_url: str | None = None,
        category: str | None = None,
    ) -> ArtworkView: ...

    async def delete_by_id(self, artwork_id: int) -> int: ...


@dataclass(frozen=True)
class Create:
    image: str
    ipfs_image_url: str
    width: int
    height: int
    hash_id: str
    category: str | None = None
    prompt: str | None = None


@dataclass(frozen=True)
class Fetch:
    pass


@dataclass(frozen=True)
class Update:
    id: int
    image: str | None = None
    ipfs_image_url: str | None = None
    category: str | None = None


@dataclass(frozen=True)
class Delete:
    id: int


Operation = Union[Create, Fetch, Update, Delete]


@dataclass(frozen=True)
class Created:
    id: int
    image: str
    ipfs_image_url: str
    category: str | None
    hash_id: str

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "image": self.image,
            "ipfs_image_url": self.ipfs_image_url,
            "category": self.category,
            "hash_id": self.hash_id,
        }


@dataclass(frozen=True)
class Updated:
    view: ArtworkView


@dataclass(frozen=True)
class Fetched:
    views: list[ArtworkView] = field(default_factory=list)


@dataclass(frozen=True)
class Deleted:
    rows_affected: int


OperationResult = Union[Created, Updated, Fetched, Deleted]


async def execute(operation: Operation, store: ArtworkStore) -> OperationResult:
    if isinstance(operation, Create):
        row = await store.create_row(
            image=operation.image,
            ipfs_image_url=operation.ipfs_image_url,
            category=operation.category,
            width=operation.width,
            height=operation.height,
            prompt=operation.prompt,
            hash_id=operation.hash_id,
        )
        return Created(
            id=int(row["id"]),
            image=str(row["image"]),
            ipfs_image_url=str(row["ipfs_image_url"]),
            category=row["category"],
            hash_id=str(row["hash_id"]),
        )

    if isinstance(operation, Fetch):
        return Fetched(views=await store.read_all_projected())

    if isinstance(operation, Update):
        view = await store.update(
            operation.id,
            image=operation.image,
            ipfs_image_url=operation.ipfs_image_url,
            category=operation.category,
        )
        return Updated(view=view)

    if isinstance(operation, Delete):
        return Deleted(rows_affected=await store.delete_by_id(operation.id))

    raise TypeError(f"Unsupported artwork operation: {operation!r}")
