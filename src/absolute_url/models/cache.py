from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel

from absolute_url.models.policy import Policy


class CacheKey(NamedTuple):
    """Memoization key. The same URL under two policies is two entries."""

    url: str
    policy: Policy


class CacheStats(BaseModel):
    """Point-in-time counters for a ResultCache."""

    size: int
    max_size: int
    hits: int = 0
    misses: int = 0
