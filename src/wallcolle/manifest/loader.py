"""Load pack manifest input records from structured files."""

from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any, Mapping

from pydantic import ValidationError

from wallcolle.util.structured import read_structured_file

from .models import PackManifestInput

logger = logging.getLogger("wallcolle.manifest")


class InputError(RuntimeError):
    """Raised when a pack input file cannot be read or validated."""


def load_pack_input(
    path: Path,
    *,
    overrides: Mapping[str, Any] | None = None,
    default_date: str | None = None,
) -> PackManifestInput:
    """Read `path` and validate it into a :class:`PackManifestInput`.

    `overrides` replaces top-level keys from the file. `default_date` is used
    only when neither the file nor the overrides provide a date.
    """

    try:
        payload = read_structured_file(path)
    except FileNotFoundError as exc:
        raise InputError(f"Pack input {path} does not exist.") from exc
    except ValueError as exc:
        raise InputError(str(exc)) from exc

    if not isinstance(payload, Mapping):
        raise InputError(f"Expected mapping data in {path}, got {type(payload)!r}.")

    data: dict[str, Any] = dict(payload)
    if overrides:
        data.update(overrides)

    # A blank YAML key loads as None.
    if data.get("comments") is None:
        data["comments"] = ""
    if data.get("wallpapers") is None:
        data["wallpapers"] = []

    if data.get("date") is None:
        if default_date is None:
            raise InputError(f"Pack input {path} has no 'date' and no default was given.")
        data["date"] = default_date
    elif isinstance(data["date"], (date, datetime)):
        # YAML turns unquoted ISO dates into date objects.
        data["date"] = data["date"].isoformat()

    try:
        manifest = PackManifestInput.model_validate(data)
    except ValidationError as exc:
        raise InputError(f"Invalid pack input {path}:\n{exc}") from exc

    logger.debug("Loaded pack %r with %s entries from %s", manifest.name, len(manifest.wallpapers), path)
    return manifest


__all__ = ["InputError", "load_pack_input"]
