"""
Metadata extraction for seaart search items.

This is the only module that knows what a search item looks like. Items are
decoded leniently: a missing or wrongly-typed string becomes "", a missing,
wrongly-typed or negative number becomes 0. Extraction never raises, so one
malformed item cannot take down a batch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _str_or_empty(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _dimension_or_zero(value: Any) -> int:
    # bool is an int subclass; JSON true is not a dimension.
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return max(value, 0)


def _object_or_empty(value: Any) -> Any:
    return value if isinstance(value, dict) else {}


LenientStr = Annotated[str, BeforeValidator(_str_or_empty)]
Dimension = Annotated[int, BeforeValidator(_dimension_or_zero)]


class SeaArtBanner(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: LenientStr = ""
    width: Dimension = 0
    height: Dimension = 0


class SeaArtItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: LenientStr = ""
    prompt: LenientStr = ""
    banner: Annotated[SeaArtBanner, BeforeValidator(_object_or_empty)] = Field(
        default_factory=SeaArtBanner
    )


@dataclass(frozen=True)
class ArtworkMetadata:
    image_url: str
    hash_id: str
    prompt: str
    width: int
    height: int


def extract(item: Any) -> ArtworkMetadata:
    decoded = SeaArtItem.model_validate(_object_or_empty(item))
    return ArtworkMetadata(
        image_url=decoded.banner.url,
        hash_id=decoded.id,
        prompt=decoded.prompt,
        width=decoded.banner.width,
        height=decoded.banner.height,
    )
