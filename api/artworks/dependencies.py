"""
FastAPI dependencies for artwork routes.
"""

from __future__ import annotations

from core import db

from .repository import ArtworkRepository


def get_repository() -> ArtworkRepository:
    return ArtworkRepository(db.pool())
