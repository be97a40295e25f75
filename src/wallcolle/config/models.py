"""Pydantic models describing wallcolle configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RuntimeConfig(BaseModel):
    """Execution-time settings such as where saved manifests land."""

    model_config = ConfigDict(extra="allow")

    output_root: Path = Path("./out")


class LoggingConfig(BaseModel):
    """Console and file logging options."""

    model_config = ConfigDict(extra="allow")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_path: Optional[Path] = None

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class RenderConfig(BaseModel):
    """Rendering policy applied by the CLI."""

    model_config = ConfigDict(extra="allow")

    date_format: str = Field(default="%Y-%m-%d", min_length=1)
    strict: bool = False


class WallcolleConfig(BaseModel):
    """Root configuration object."""

    model_config = ConfigDict(extra="allow")

    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)


__all__ = ["LoggingConfig", "RenderConfig", "RuntimeConfig", "WallcolleConfig"]
