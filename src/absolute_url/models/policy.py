from __future__ import annotations

from enum import StrEnum


class Policy(StrEnum):
    """Which scheme prefixes count as absolute."""

    HTTP_ONLY = "http_only"  # http: and https: only
    ANY_SCHEME = "any_scheme"  # any RFC 3986 scheme

    @classmethod
    def from_http_only(cls, http_only: bool) -> Policy:
        return cls.HTTP_ONLY if http_only else cls.ANY_SCHEME
