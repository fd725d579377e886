"""
Centralized configuration for codegraph-routes.

Every path the tool reads is a workspace convention; nothing is passed on
the command line. Conventions can be overridden with environment variables
using the CODEGRAPH_ROUTES_ prefix (or a `.env` file).

Usage:
    from codegraph_routes.infra.config import get_settings

    settings = get_settings()
    entry = settings.workspace.entry_file

    # Override for a specific run
    custom = RouteMapSettings(workspace=WorkspaceConfig(entry_file="src/app/app.routes.ts"))
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class WorkspaceConfig(BaseModel):
    """Where the TypeScript workspace lives and what gets parsed."""

    root: Path = Field(default=Path("."))
    """Workspace root; every other path is relative to it"""

    entry_file: str = Field(default="apps/funsel/src/app/app-routing.module.ts")
    """Root routing unit the resolution starts from"""

    alias_config_file: str = Field(default="tsconfig.base.json")
    """TypeScript config document holding compilerOptions.paths"""

    source_globs: list[str] = Field(default_factory=lambda: ["apps/funsel/**/*.ts", "libs/**/*.ts"])
    """Globs of units loaded into the source index"""


class TitleConfig(BaseModel):
    """Title metadata lookup."""

    decorator_name: str = Field(default="FunselPage")
    """Class decorator whose first argument carries the `title` member"""


class LoggingConfig(BaseModel):
    """Diagnostics output."""

    level: str = Field(default="INFO")
    format: Literal["console", "json"] = Field(default="console")


class RouteMapSettings(BaseSettings):
    """
    codegraph-routes settings.

    Environment variables use the CODEGRAPH_ROUTES_ prefix and `__` for
    nesting, e.g. CODEGRAPH_ROUTES_WORKSPACE__ENTRY_FILE.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CODEGRAPH_ROUTES_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    workspace: WorkspaceConfig = Field(default_factory=WorkspaceConfig)
    title: TitleConfig = Field(default_factory=TitleConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


@lru_cache(maxsize=1)
def get_settings() -> RouteMapSettings:
    """
    Get the global settings instance.

    The settings are cached. To reload, call get_settings.cache_clear() first.
    """
    return RouteMapSettings()
