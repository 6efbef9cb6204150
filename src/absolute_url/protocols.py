"""Protocol interfaces for swappable components.

Classifier references ResultCacheProtocol, not ResultCache. This allows:
- Tests to use a recording or always-missing cache
- Callers to plug in a shared cache of their own without touching the rules
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from absolute_url.models.cache import CacheKey


class ResultCacheProtocol(Protocol):
    """Interface for the classification memoization cache."""

    def get(self, key: CacheKey) -> bool | None: ...

    def set(self, key: CacheKey, result: bool) -> None: ...
