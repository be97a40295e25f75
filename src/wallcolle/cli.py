"""Command-line entry points for rendering wallpaper pack manifests."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

import typer

from wallcolle.config import ConfigError, WallcolleConfig, dump_example_config, load_config
from wallcolle.io.writer import write_pack_manifest
from wallcolle.manifest import (
    InputError,
    PackManifestInput,
    find_delimiter_collisions,
    load_pack_input,
    render_pack_manifest,
)
from wallcolle.util.logging import configure_logging
from wallcolle.util.naming import manifest_filename

app = typer.Typer(add_completion=False, help="Wallpaper pack manifest CLI")


def _settings(config_path: Optional[Path]) -> WallcolleConfig:
    try:
        return load_config(config_path)
    except ConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)


def _load_input(
    cfg: WallcolleConfig, input_path: Path, *, overrides: dict[str, str] | None = None
) -> PackManifestInput:
    today = date.today().strftime(cfg.render.date_format)
    try:
        return load_pack_input(input_path, overrides=overrides, default_date=today)
    except InputError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)


def _saved_manifest_path(cfg: WallcolleConfig, manifest: PackManifestInput) -> Path:
    """Return where `--save` puts the manifest for this pack."""
    return cfg.runtime.output_root.expanduser().resolve() / manifest_filename(manifest.name)


@app.command()
def render(
    input_path: Path = typer.Argument(..., help="Pack input file (YAML/JSON/TOML)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the manifest to this path"),
    name: Optional[str] = typer.Option(None, help="Override the pack name"),
    date_value: Optional[str] = typer.Option(None, "--date", help="Override the pre-formatted date"),
    comments: Optional[str] = typer.Option(None, help="Override the comments block"),
    save: bool = typer.Option(False, "--save", help="Write under runtime.output_root using the normalised pack name"),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--no-strict", help="Refuse to render when values collide with delimiters"
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to a config file"),
) -> None:
    """Render a pack manifest as markdown."""

    cfg = _settings(config)
    logger = configure_logging(log_path=cfg.logging.log_path, level=cfg.logging.level)

    overrides = {
        key: value
        for key, value in (("name", name), ("date", date_value), ("comments", comments))
        if value is not None
    }
    manifest = _load_input(cfg, input_path, overrides=overrides)

    collisions = find_delimiter_collisions(manifest)
    for collision in collisions:
        logger.warning("Delimiter collision: %s", collision.describe())

    strict_mode = cfg.render.strict if strict is None else strict
    if collisions and strict_mode:
        typer.echo(f"Refusing to render {len(collisions)} delimiter collision(s) in strict mode.", err=True)
        raise typer.Exit(code=1)

    text = render_pack_manifest(manifest)

    if output is None and save:
        output = _saved_manifest_path(cfg, manifest)

    if output is None:
        typer.echo(text, nl=False)
        return

    dest = write_pack_manifest(text, output)
    logger.info("Wrote manifest for %r entries=%s -> %s", manifest.name, len(manifest.wallpapers), dest)
    typer.echo(f"Wrote {dest}")


@app.command()
def check(
    input_path: Path = typer.Argument(..., help="Pack input file (YAML/JSON/TOML)"),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to a config file"),
) -> None:
    """Report values that would corrupt the rendered manifest."""

    cfg = _settings(config)
    configure_logging(log_path=cfg.logging.log_path, level=cfg.logging.level)
    manifest = _load_input(cfg, input_path)

    collisions = find_delimiter_collisions(manifest)
    for collision in collisions:
        typer.echo(collision.describe())
    if collisions:
        raise typer.Exit(code=1)
    typer.echo(f"OK: {len(manifest.wallpapers)} entries, no delimiter collisions.")


@app.command("dump-config")
def dump_config(dest: Path = typer.Argument(..., help="Destination (.yaml/.yml/.json)")) -> None:
    """Write the default configuration to DEST."""

    try:
        dump_example_config(dest)
    except ConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    typer.echo(f"Wrote {dest}")


def main() -> None:
    app()


__all__ = ["main", "app"]
