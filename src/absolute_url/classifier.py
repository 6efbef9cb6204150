"""Absolute URL classification.

A string is an absolute URL when it starts with an RFC 3986 scheme followed by
a colon (https://tools.ietf.org/html/rfc3986#section-3.1). Under the default
HTTP-only policy the scheme must also be ``http`` or ``https``.

Rules are evaluated in a fixed order, each one short-circuiting:

1. Windows drive paths (``C:\\...``) are never absolute. This runs before the
   scheme rule because ``C:`` is otherwise a valid one-letter scheme.
2. HTTP-only fast path: an ``http:``/``https:`` prefix is accepted at once.
3. General scheme rule, then the HTTP-only restriction if it applies.

``c:/windows`` (forward slash) is not a drive path under rule 1 and is
classified by the scheme rule as scheme ``c``.

All patterns are ASCII-only. Unicode case folding must not let ``httpſ:`` or
``\u212attp:`` through, and ``\\d`` must not accept non-ASCII digits.
"""

from __future__ import annotations

import functools
import re
from typing import TYPE_CHECKING

from absolute_url.cache import ResultCache
from absolute_url.errors import InvalidInputTypeError
from absolute_url.models.cache import CacheKey
from absolute_url.models.policy import Policy

if TYPE_CHECKING:
    from absolute_url.protocols import ResultCacheProtocol

_SCHEME_RE = re.compile(r"[a-zA-Z][a-zA-Z0-9+\-.]*:")
_HTTP_SCHEME_RE = re.compile(r"https?:", re.IGNORECASE | re.ASCII)
_WINDOWS_PATH_RE = re.compile(r"[a-zA-Z]:\\")


def is_windows_path(url: str) -> bool:
    """Return True for a drive-letter path such as ``C:\\Users``."""
    return _WINDOWS_PATH_RE.match(url) is not None


def has_scheme(url: str) -> bool:
    return _SCHEME_RE.match(url) is not None


def has_http_scheme(url: str) -> bool:
    return _HTTP_SCHEME_RE.match(url) is not None


def classify(url: str, policy: Policy) -> bool:
    """Evaluate the classification rules without any caching."""
    if is_windows_path(url):
        return False

    if policy is Policy.HTTP_ONLY and has_http_scheme(url):
        return True

    if not has_scheme(url):
        return False

    if policy is Policy.HTTP_ONLY:
        return has_http_scheme(url)
    return True


class Classifier:
    """Memoizing front end for ``classify``.

    The cache is injected so its size and sharing are decided by the caller.
    Two classifiers built on the same cache share their results.
    """

    def __init__(
        self,
        cache: ResultCacheProtocol | None = None,
        *,
        http_only: bool = True,
    ) -> None:
        self._cache: ResultCacheProtocol = cache if cache is not None else ResultCache()
        self._default_policy = Policy.from_http_only(http_only)

    @property
    def cache(self) -> ResultCacheProtocol:
        return self._cache

    @property
    def default_policy(self) -> Policy:
        return self._default_policy

    def is_absolute(self, url: str, *, http_only: bool | None = None) -> bool:
        """Return whether ``url`` is an absolute URL.

        ``http_only=None`` uses the policy the classifier was built with.
        Raises InvalidInputTypeError if ``url`` is not a ``str``.
        """
        if not isinstance(url, str):
            raise InvalidInputTypeError(url)

        policy = self._default_policy if http_only is None else Policy.from_http_only(http_only)
        key = CacheKey(url, policy)

        cached = self._cache.get(key)
        if cached is not None:
            return cached

        result = classify(url, policy)
        self._cache.set(key, result)
        return result


@functools.cache
def get_default_classifier() -> Classifier:
    """Return the process-wide classifier behind ``is_absolute_url``."""
    return Classifier(ResultCache())


def is_absolute_url(url: str, *, http_only: bool = True) -> bool:
    """Return whether ``url`` starts with an accepted URL scheme.

    >>> is_absolute_url("https://example.com")
    True
    >>> is_absolute_url("ftp://example.com")
    False
    >>> is_absolute_url("ftp://example.com", http_only=False)
    True
    >>> is_absolute_url("C:\\\\Windows")
    False
    """
    return get_default_classifier().is_absolute(url, http_only=http_only)
