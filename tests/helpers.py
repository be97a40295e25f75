from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

import yaml

from wallcolle.manifest import PackManifestInput, WallpaperEntry

EXAMPLE_MARKDOWN = (
    "# Pack Manifest\n"
    "\n"
    "- Name: Autumn Pack\n"
    "- Date: 2024-03-01\n"
    "- Entries: 2\n"
    "- Comments:\n"
    "```\n"
    "First release\n"
    "```\n"
    "\n"
    "Title | Contributor | License\n"
    "------|-------------|--------\n"
    "Sunset | Jo | CC0\n"
    "Forest | Ana | CC-BY\n"
)


def example_payload() -> dict[str, Any]:
    """Plain-data form of the Autumn Pack example."""

    return {
        "name": "Autumn Pack",
        "date": "2024-03-01",
        "comments": "First release",
        "wallpapers": [
            {"title": "Sunset", "artist": "Jo", "license": "CC0"},
            {"title": "Forest", "artist": "Ana", "license": "CC-BY"},
        ],
    }


def example_manifest() -> PackManifestInput:
    return PackManifestInput(
        name="Autumn Pack",
        date="2024-03-01",
        comments="First release",
        wallpapers=[
            WallpaperEntry(title="Sunset", artist="Jo", license="CC0"),
            WallpaperEntry(title="Forest", artist="Ana", license="CC-BY"),
        ],
    )


def write_input(directory: Path, payload: Mapping[str, Any], *, suffix: str = ".yaml") -> Path:
    """Write `payload` as a pack input file in YAML or JSON."""

    path = directory / f"pack{suffix}"
    if suffix == ".json":
        path.write_text(json.dumps(payload), encoding="utf-8")
    else:
        path.write_text(yaml.safe_dump(dict(payload), sort_keys=False), encoding="utf-8")
    return path


def table_rows(markdown: str) -> list[str]:
    """Return the data rows that follow the table separator."""

    lines = markdown.splitlines()
    start = lines.index("------|-------------|--------") + 1
    return lines[start:]


def quiet_logging(*_args: Any, **_kwargs: Any) -> logging.Logger:
    """Stand-in for configure_logging that adds no handlers bound to CliRunner streams."""

    return logging.getLogger("wallcolle")
