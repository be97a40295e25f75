"""Pydantic models describing a pack manifest input record."""

from __future__ import annotations

from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class WallpaperEntry(BaseModel):
    """Metadata for a single wallpaper contributed to a pack."""

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    title: str = Field(validation_alias=AliasChoices("title", "t"))
    artist: str = Field(validation_alias=AliasChoices("artist", "contributor"))
    license: str = Field(validation_alias=AliasChoices("license", "l"))


class PackManifestInput(BaseModel):
    """Everything the renderer needs to produce a pack manifest.

    ``date`` is pre-formatted by the caller and ``wallpapers`` is kept in
    rendering order.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    name: str
    date: str
    comments: str = ""
    wallpapers: List[WallpaperEntry] = Field(default_factory=list)


__all__ = ["PackManifestInput", "WallpaperEntry"]
