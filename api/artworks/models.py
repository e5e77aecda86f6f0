"""
Write-side rows and the read-side projection of the `ipfs_image` table.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any

# `ipfs_image_url` value for rows whose image is not mirrored on IPFS yet.
NO_IPFS = "NO_IPFS"


def timestamp_to_text(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


@dataclass(frozen=True)
class StoredArtwork:
    id: int
    image: str
    ipfs_image_url: str
    category: str | None
    width: int
    height: int
    prompt: str | None
    hash_id: str
    time_created: datetime | None
    updated_date: datetime | None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> StoredArtwork:
        return cls(
            id=int(row["id"]),
            image=str(row["image"]),
            ipfs_image_url=str(row["ipfs_image_url"]),
            category=row["category"],
            width=int(row["width"]),
            height=int(row["height"]),
            prompt=row["prompt"],
            hash_id=str(row["hash_id"]),
            time_created=row["time_created"],
            updated_date=row["updated_date"],
        )

    def as_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["time_created"] = timestamp_to_text(self.time_created)
        data["updated_date"] = timestamp_to_text(self.updated_date)
        return data

    def view(self) -> ArtworkView:
        return ArtworkView(
            id=self.id,
            image=self.image,
            ipfs_image_url=self.ipfs_image_url,
            category=self.category,
            created=timestamp_to_text(self.time_created),
            updated_date=timestamp_to_text(self.updated_date),
        )


@dataclass(frozen=True)
class ArtworkView:
    """
    What callers get to see of a stored artwork.

    `created` / `updated_date` are ISO-8601 text, or None when the column is
    NULL. `as_dict()` leaves None timestamps out instead of emitting "".
    """

    id: int
    image: str
    ipfs_image_url: str
    category: str | None
    created: str | None
    updated_date: str | None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> ArtworkView:
        return cls(
            id=int(row["id"]),
            image=str(row["image"]),
            ipfs_image_url=str(row["ipfs_image_url"]),
            category=row["category"],
            created=timestamp_to_text(row["time_created"]),
            updated_date=timestamp_to_text(row["updated_date"]),
        )

    def as_dict(self) -> dict[str, Any]:
        data = asdict(self)
        for key in ("created", "updated_date"):
            if data[key] is None:
                del data[key]
        return data
