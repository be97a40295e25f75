"""Detection of values that collide with manifest delimiters.

The renderer never escapes its input. These helpers only report collisions so
the caller can decide whether to sanitise, warn, or refuse.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from .models import PackManifestInput

TABLE_DELIMITER = "|"
FENCE_DELIMITER = "```"
ENTRY_FIELDS = ("title", "artist", "license")


class DelimiterCollision(BaseModel):
    """A field value that would corrupt the rendered markdown."""

    model_config = ConfigDict(frozen=True)

    field: str
    index: Optional[int] = None
    token: str

    def describe(self) -> str:
        location = self.field if self.index is None else f"wallpapers[{self.index}].{self.field}"
        return f"{location} contains {self.token!r}"


def find_delimiter_collisions(manifest: PackManifestInput) -> List[DelimiterCollision]:
    """Return every collision in `manifest`, comments first then entries in order."""

    collisions: list[DelimiterCollision] = []
    if FENCE_DELIMITER in manifest.comments:
        collisions.append(DelimiterCollision(field="comments", token=FENCE_DELIMITER))

    for index, entry in enumerate(manifest.wallpapers):
        for field in ENTRY_FIELDS:
            if TABLE_DELIMITER in getattr(entry, field):
                collisions.append(DelimiterCollision(field=field, index=index, token=TABLE_DELIMITER))
    return collisions


__all__ = ["DelimiterCollision", "find_delimiter_collisions"]
