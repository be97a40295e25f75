"""Pack manifest models, rendering and input handling."""

from .lint import DelimiterCollision, find_delimiter_collisions
from .loader import InputError, load_pack_input
from .models import PackManifestInput, WallpaperEntry
from .render import render_pack_manifest

__all__ = [
    "DelimiterCollision",
    "InputError",
    "PackManifestInput",
    "WallpaperEntry",
    "find_delimiter_collisions",
    "load_pack_input",
    "render_pack_manifest",
]
