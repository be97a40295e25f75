"""Readers for YAML/TOML/JSON documents shared by config and input loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for earlier interpreters
    import tomli as tomllib  # type: ignore[assignment]

STRUCTURED_SUFFIXES = {".yaml", ".yml", ".toml", ".json"}


def read_structured_file(path: Path) -> Any:
    """Return the parsed contents of a YAML/TOML/JSON file.

    Raises ``FileNotFoundError`` for a missing path and ``ValueError`` for an
    unsupported suffix or a document that fails to parse.
    """

    if not path.exists():
        raise FileNotFoundError(path)

    suffix = path.suffix.lower()
    if suffix not in STRUCTURED_SUFFIXES:
        raise ValueError(f"Unsupported file format for {path}")

    text = path.read_text(encoding="utf-8")
    try:
        if suffix in {".yaml", ".yml"}:
            return yaml.safe_load(text) or {}
        if suffix == ".toml":
            return tomllib.loads(text)
        return json.loads(text)
    except (yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise ValueError(f"Could not parse {path}: {exc}") from exc


__all__ = ["STRUCTURED_SUFFIXES", "read_structured_file"]
