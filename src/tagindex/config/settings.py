"""Site configuration models.

Values come from ``_config.yml`` in the site source directory and may be
overridden by environment variables prefixed ``TAGINDEX_``
(e.g. ``TAGINDEX_POSTS_DIR``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DefaultsScope(BaseModel):
    """Where a front-matter defaults rule applies."""

    model_config = ConfigDict(extra="ignore")

    path: str = Field(default="", description="Relative path or glob the rule applies to ('' = everywhere)")
    type: str | None = Field(default=None, description="Document type the rule applies to (None = any)")

    @field_validator("path", mode="before")
    @classmethod
    def _none_path_is_everywhere(cls, value: Any) -> Any:
        return "" if value is None else value


class DefaultsRule(BaseModel):
    """One entry of the ``defaults:`` list in ``_config.yml``."""

    model_config = ConfigDict(extra="ignore")

    scope: DefaultsScope = Field(default_factory=DefaultsScope)
    values: dict[str, Any] = Field(default_factory=dict)

    @field_validator("values", mode="before")
    @classmethod
    def _none_values_are_empty(cls, value: Any) -> Any:
        return {} if value is None else value


class SiteConfig(BaseSettings):
    """Root configuration for a site build."""

    source: Path = Field(default_factory=Path.cwd, description="Site source directory")
    posts_dir: Path = Field(default=Path("_posts"), description="Posts directory, relative to source")
    defaults: list[DefaultsRule] = Field(default_factory=list)

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="TAGINDEX_",
        env_nested_delimiter="__",
    )

    @property
    def abs_posts_dir(self) -> Path:
        if self.posts_dir.is_absolute():
            return self.posts_dir
        return self.source / self.posts_dir
