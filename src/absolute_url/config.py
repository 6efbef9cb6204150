"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Environment variables  (ABSOLUTE_URL__CACHE__MAX_SIZE=5000)
  2. absolute-url.yaml      (searched in cwd, then platform config dir)
  3. Hardcoded defaults

Only the command-line entrypoint reads settings. ``is_absolute_url`` always
uses the built-in defaults so that library callers get the same answer on
every machine.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, PositiveInt
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_CACHE_MAX_SIZE = 1000
DEFAULT_BENCHMARK_ITERATIONS = 1_000_000

_CONFIG_FILE_NAME = "absolute-url.yaml"


def _find_config_file() -> str | None:
    """Return the path of the first absolute-url.yaml found, or None."""
    candidates = [
        Path(_CONFIG_FILE_NAME),
        Path(platformdirs.user_config_dir("absolute-url")) / _CONFIG_FILE_NAME,
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class ClassifierSettings(BaseModel):
    http_only: bool = True


class CacheSettings(BaseModel):
    max_size: PositiveInt = DEFAULT_CACHE_MAX_SIZE


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class BenchmarkSettings(BaseModel):
    iterations: PositiveInt = DEFAULT_BENCHMARK_ITERATIONS


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: ABSOLUTE_URL__LOGGING__LEVEL=DEBUG
        env_prefix="ABSOLUTE_URL__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    classifier: ClassifierSettings = ClassifierSettings()
    cache: CacheSettings = CacheSettings()
    logging: LoggingSettings = LoggingSettings()
    benchmark: BenchmarkSettings = BenchmarkSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )
