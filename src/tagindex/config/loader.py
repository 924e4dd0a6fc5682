"""Loads ``_config.yml`` and applies environment variable overrides."""

from __future__ import annotations

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from tagindex.config.exceptions import ConfigLoadError, ConfigValidationError
from tagindex.config.settings import SiteConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "_config.yml"
ENV_PREFIX = "TAGINDEX_"


class ConfigLoader:
    """Loads and validates site configuration.

    Priority (highest to lowest):
    1. Environment variables (TAGINDEX_SECTION__KEY)
    2. ``_config.yml`` in the site source directory
    3. Defaults
    """

    def __init__(self, source: Path | None = None) -> None:
        self.source = source if source is not None else Path.cwd()

    @property
    def config_path(self) -> Path:
        return self.source / CONFIG_FILENAME

    def load(self) -> SiteConfig:
        file_config = self._load_from_file()
        file_config["source"] = self.source
        try:
            env_config = SiteConfig(source=self.source)
            merged = self._merge_config(
                base=env_config.model_dump(),
                override=file_config,
                env_override_paths=self._collect_env_override_paths(),
            )
            return SiteConfig.model_validate(merged)
        except ValidationError as e:
            raise ConfigValidationError(e.errors()) from e

    def _load_from_file(self) -> dict[str, Any]:
        config_path = self.config_path
        if not config_path.exists():
            logger.info("No %s found in %s, using defaults", CONFIG_FILENAME, self.source)
            return {}

        logger.debug("Loading config from %s", config_path)
        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(str(config_path), str(e)) from e

        if not isinstance(data, dict):
            msg = f"configuration root must be a mapping, got {type(data).__name__}"
            raise ConfigLoadError(str(config_path), msg)
        return data

    def _collect_env_override_paths(self) -> set[tuple[str, ...]]:
        """Return the set of config paths defined via environment variables."""
        env_paths: set[tuple[str, ...]] = set()
        for key in os.environ:
            if not key.startswith(ENV_PREFIX):
                continue
            parts = [part.lower() for part in key[len(ENV_PREFIX) :].split("__") if part]
            if parts:
                env_paths.add(tuple(parts))
        return env_paths

    def _merge_config(
        self,
        base: dict[str, Any],
        override: dict[str, Any],
        env_override_paths: set[tuple[str, ...]],
        current_path: tuple[str, ...] = (),
    ) -> dict[str, Any]:
        """Merge override into base, skipping keys provided via env vars."""
        merged = deepcopy(base)

        for key, value in override.items():
            path = (*current_path, str(key).lower())
            if path in env_override_paths:
                continue

            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = self._merge_config(merged[key], value, env_override_paths, path)
            else:
                merged[key] = value

        return merged


def load_site_config(source: Path) -> SiteConfig:
    """Load the configuration for the site rooted at ``source``."""
    return ConfigLoader(source).load()
