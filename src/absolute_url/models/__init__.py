from __future__ import annotations

from absolute_url.models.benchmark import BenchmarkCase, BenchmarkResult
from absolute_url.models.cache import CacheKey, CacheStats
from absolute_url.models.policy import Policy

__all__ = [
    # policy
    "Policy",
    # cache
    "CacheKey",
    "CacheStats",
    # benchmark
    "BenchmarkCase",
    "BenchmarkResult",
]
