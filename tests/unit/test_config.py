"""Unit tests for absolute_url.config."""

from __future__ import annotations

from typing import TYPE_CHECKING

import platformdirs
import pytest
from pydantic import ValidationError

from absolute_url import config
from absolute_url.config import (
    DEFAULT_BENCHMARK_ITERATIONS,
    DEFAULT_CACHE_MAX_SIZE,
    CacheSettings,
    Settings,
    _find_config_file,
)

if TYPE_CHECKING:
    from pathlib import Path


class TestDefaults:
    def test_settings_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(Settings.model_config, "yaml_file", None)
        settings = Settings()

        assert settings.classifier.http_only is True
        assert settings.cache.max_size == DEFAULT_CACHE_MAX_SIZE == 1000
        assert settings.logging.level == "INFO"
        assert settings.logging.format == "json"
        assert settings.benchmark.iterations == DEFAULT_BENCHMARK_ITERATIONS

    def test_max_size_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            CacheSettings(max_size=0)


class TestEnvironment:
    def test_nested_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(Settings.model_config, "yaml_file", None)
        monkeypatch.setenv("ABSOLUTE_URL__CACHE__MAX_SIZE", "25")
        monkeypatch.setenv("ABSOLUTE_URL__CLASSIFIER__HTTP_ONLY", "false")
        monkeypatch.setenv("ABSOLUTE_URL__LOGGING__FORMAT", "text")

        settings = Settings()

        assert settings.cache.max_size == 25
        assert settings.classifier.http_only is False
        assert settings.logging.format == "text"

    def test_yaml_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        yaml_path = tmp_path / "absolute-url.yaml"
        yaml_path.write_text("cache:\n  max_size: 10\nbenchmark:\n  iterations: 5\n")
        monkeypatch.setitem(Settings.model_config, "yaml_file", str(yaml_path))

        settings = Settings()

        assert settings.cache.max_size == 10
        assert settings.benchmark.iterations == 5

    def test_env_beats_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        yaml_path = tmp_path / "absolute-url.yaml"
        yaml_path.write_text("cache:\n  max_size: 10\n")
        monkeypatch.setitem(Settings.model_config, "yaml_file", str(yaml_path))
        monkeypatch.setenv("ABSOLUTE_URL__CACHE__MAX_SIZE", "20")

        assert Settings().cache.max_size == 20


class TestConfigFileDiscovery:
    def test_cwd_file_found_first(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "absolute-url.yaml").write_text("{}\n")

        assert _find_config_file() == "absolute-url.yaml"

    def test_platform_config_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        (config_dir / "absolute-url.yaml").write_text("{}\n")
        monkeypatch.setattr(config.platformdirs, "user_config_dir", lambda _name: str(config_dir))

        assert _find_config_file() == str(config_dir / "absolute-url.yaml")

    def test_no_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(
            platformdirs, "user_config_dir", lambda _name: str(tmp_path / "missing")
        )

        assert _find_config_file() is None
