"""
Pydantic schemas for ingestion endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class IngestRequest(BaseModel):
    keyword: str = Field(..., min_length=1, max_length=500)
    page: int = Field(default=1, ge=1)
    tags: list[str] = Field(default_factory=list)
    # Applied to every row of the batch.
    category: str | None = None
