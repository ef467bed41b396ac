"""Pydantic models for config validation.

``Config.validated()`` returns a typed, validated ``LogKeeperConfig``.
Dict-based access through ``Config.get()`` keeps working unchanged.
"""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from logkeeper.levels import ConsoleMode


class RegistryConfig(BaseModel):
    """Where log files live and how they are kept tidy."""

    directory: Path = Path("logs")
    expiration_days: float = Field(default=30, ge=0)
    max_file_size_bytes: int = Field(default=5_000_000, ge=0)
    console: str = "all"
    create_default: bool = False

    @field_validator("directory", mode="before")
    @classmethod
    def _expand_user(cls, v: Any) -> Any:
        if isinstance(v, str):
            return Path(v).expanduser()
        if isinstance(v, Path):
            return v.expanduser()
        return v

    @field_validator("console", mode="before")
    @classmethod
    def _check_console(cls, v: Any) -> Any:
        if isinstance(v, bool):
            v = "all" if v else "none"
        ConsoleMode.parse(v)
        return v

    @property
    def expiration(self) -> timedelta:
        return timedelta(days=self.expiration_days)

    @property
    def console_mode(self) -> ConsoleMode:
        return ConsoleMode.parse(self.console)


class FormatConfig(BaseModel):
    """Which segments each log line carries."""

    include_timestamp: bool = True
    include_caller_path: bool = True
    include_caller_member: bool = True


class LogKeeperConfig(BaseModel):
    """Root configuration model.

    Uses ``extra="allow"`` so applications can keep their own sections in
    the same file.
    """

    model_config = ConfigDict(extra="allow")

    registry: RegistryConfig = RegistryConfig()
    format: FormatConfig = FormatConfig()
