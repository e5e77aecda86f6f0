"""
Pydantic schemas for artwork CRUD endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CreateArtworkRequest(BaseModel):
    image: str = Field(..., min_length=1)
    ipfs_image_url: str = Field(..., min_length=1)
    category: str | None = None
    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)
    prompt: str | None = None
    hash_id: str = Field(..., min_length=1)


class UpdateArtworkRequest(BaseModel):
    # Omitted (or null) fields keep their stored value.
    image: str | None = Field(default=None, min_length=1)
    ipfs_image_url: str | None = Field(default=None, min_length=1)
    category: str | None = None
