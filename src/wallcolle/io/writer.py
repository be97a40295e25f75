"""Write rendered pack manifests to disk."""

from __future__ import annotations

from pathlib import Path


def write_pack_manifest(text: str, dest: Path) -> Path:
    """Persist `text` at `dest`, replacing any existing file atomically.

    The ``.tmp`` sibling is removed again when the write or the swap fails.
    """

    dest.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = dest.with_suffix(dest.suffix + ".tmp")
    try:
        tmp_path.write_text(text, encoding="utf-8")
        tmp_path.replace(dest)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise
    return dest


__all__ = ["write_pack_manifest"]
