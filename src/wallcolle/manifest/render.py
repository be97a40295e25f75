"""Markdown rendering for pack manifests."""

from __future__ import annotations

from typing import Any, Mapping

from .models import PackManifestInput, WallpaperEntry

HEADING = "# Pack Manifest"
FENCE = "```"
TABLE_HEADER = "Title | Contributor | License"
TABLE_SEPARATOR = "------|-------------|--------"


def render_pack_manifest(manifest: PackManifestInput | Mapping[str, Any]) -> str:
    """Render `manifest` as a markdown document.

    Every value is inserted raw. A ``|`` in a wallpaper field or a triple
    backtick in ``comments`` will corrupt the output; see
    :func:`wallcolle.manifest.lint.find_delimiter_collisions`.
    """

    if not isinstance(manifest, PackManifestInput):
        manifest = PackManifestInput.model_validate(manifest)

    lines = [
        HEADING,
        "",
        f"- Name: {manifest.name}",
        f"- Date: {manifest.date}",
        f"- Entries: {len(manifest.wallpapers)}",
        "- Comments:",
        FENCE,
        manifest.comments,
        FENCE,
        "",
        TABLE_HEADER,
        TABLE_SEPARATOR,
    ]
    lines.extend(render_row(entry) for entry in manifest.wallpapers)
    return "\n".join(lines) + "\n"


def render_row(entry: WallpaperEntry) -> str:
    return f"{entry.title} | {entry.artist} | {entry.license}"


__all__ = ["render_pack_manifest", "render_row", "TABLE_HEADER", "TABLE_SEPARATOR"]
