"""Name normalisation for pack manifest files."""

from __future__ import annotations

import re
import unicodedata

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
DEFAULT_FILENAME = "manifest.md"


def slugify(text: str) -> str:
    """Lowercase ASCII slug with runs of other characters collapsed to ``-``."""
    ascii_text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    return _NON_ALNUM.sub("-", ascii_text.lower()).strip("-")


def normalize_pack_name(name: str) -> str:
    """Return the dotted pack name, e.g. ``"Autumn Pack"`` -> ``"Autumn.pack"``."""
    slug = slugify(name)
    return (slug[:1].upper() + slug[1:]).replace("-", ".")


def manifest_filename(name: str) -> str:
    normalized = normalize_pack_name(name)
    if not normalized:
        return DEFAULT_FILENAME
    return f"{normalized}.md"


__all__ = ["manifest_filename", "normalize_pack_name", "slugify"]
