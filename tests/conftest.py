"""Shared test fixtures for the absolute_url test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog

from absolute_url.cache import ResultCache
from absolute_url.classifier import Classifier

if TYPE_CHECKING:
    from collections.abc import Iterator, MutableMapping
    from typing import Any


@pytest.fixture(autouse=True)
def captured_logs() -> Iterator[list[MutableMapping[str, Any]]]:
    """Route structlog into a list so nothing is printed during tests."""
    with structlog.testing.capture_logs() as logs:
        yield logs


@pytest.fixture()
def cache() -> ResultCache:
    """Small cache so eviction is easy to trigger."""
    return ResultCache(max_size=4)


@pytest.fixture()
def classifier(cache: ResultCache) -> Classifier:
    return Classifier(cache)
