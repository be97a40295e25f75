"""Config loading entry points for wallcolle."""

from __future__ import annotations

import json
import os
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from wallcolle.util.structured import read_structured_file

from .models import WallcolleConfig

DEFAULT_CONFIG_NAME = "wallcolle.default.yaml"
OUTPUT_ROOT_ENV = "WALLCOLLE_OUTPUT_ROOT"


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


def load_config(
    path: Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> WallcolleConfig:
    """Load the wallcolle configuration applying optional overrides.

    Precedence: packaged defaults, then `path`, then `overrides`, then the
    ``WALLCOLLE_OUTPUT_ROOT`` environment variable.
    """

    default_data = _read_default_config()

    if path:
        config_data = _expect_mapping(_read_config_file(path), path)
    else:
        config_data = {}

    merged: dict[str, Any] = _deep_merge(default_data, config_data)

    if overrides:
        merged = _deep_merge(merged, _expand_override_keys(overrides))

    env_root = os.getenv(OUTPUT_ROOT_ENV)
    if env_root:
        merged = _deep_merge(merged, {"runtime": {"output_root": env_root}})

    try:
        return WallcolleConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration:\n{exc}") from exc


def dump_example_config(dest: Path) -> None:
    """Write the default configuration to ``dest``."""

    if dest.suffix.lower() == ".toml":
        raise ConfigError("TOML export is not supported yet; use a YAML destination.")

    dest.parent.mkdir(parents=True, exist_ok=True)
    merged = _read_default_config()
    if dest.suffix.lower() in {".json"}:
        dest.write_text(json.dumps(merged, indent=2), encoding="utf-8")
        return
    dest.write_text(
        yaml.safe_dump(merged, sort_keys=False),
        encoding="utf-8",
    )


def _read_default_config() -> dict[str, Any]:
    """Read the defaults shipped as package data next to this module."""

    resource = importlib_resources.files("wallcolle.config").joinpath(DEFAULT_CONFIG_NAME)
    with importlib_resources.as_file(resource) as path:
        return _expect_mapping(_read_config_file(Path(path)), Path(path))


def _read_config_file(path: Path) -> Any:
    try:
        return read_structured_file(path)
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file {path} does not exist.") from exc
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc


def _expect_mapping(payload: Any, source: Path) -> dict[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ConfigError(f"Expected mapping data in {source}, got {type(payload)!r}.")
    return dict(payload)


def _deep_merge(base: Mapping[str, Any], extra: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge two mappings returning a new dictionary."""

    result: dict[str, Any] = {key: value for key, value in base.items()}
    for key, value in extra.items():
        if (
            key in result
            and isinstance(result[key], Mapping)
            and isinstance(value, Mapping)
        ):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _expand_override_keys(overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Support dotted-notation overrides like ``render.strict``."""

    result: dict[str, Any] = {}
    for key, value in overrides.items():
        result = _deep_merge(result, _expand_single_override(key, value))
    return result


def _expand_single_override(key: Any, value: Any) -> dict[str, Any]:
    if isinstance(key, str) and "." in key:
        *parents, leaf = key.split(".")
        root: dict[str, Any] = {leaf: value}
        for segment in reversed(parents):
            root = {segment: root}
        return root
    return {key: value}


__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_NAME",
    "OUTPUT_ROOT_ENV",
    "load_config",
    "dump_example_config",
]
