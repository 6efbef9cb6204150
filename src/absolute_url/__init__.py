"""absolute-url: decide whether a string is an absolute URL."""

from __future__ import annotations

import warnings
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("absolute-url")
except PackageNotFoundError:
    # Source-tree execution without installed package metadata.
    warnings.warn(
        "Package metadata for 'absolute-url' not found; using fallback version '0.0.0+unknown'.",
        RuntimeWarning,
        stacklevel=2,
    )
    __version__ = "0.0.0+unknown"

from absolute_url.cache import ResultCache  # noqa: E402
from absolute_url.classifier import Classifier, classify, is_absolute_url  # noqa: E402
from absolute_url.errors import AbsoluteUrlError, ErrorCode, InvalidInputTypeError  # noqa: E402
from absolute_url.models import Policy  # noqa: E402

__all__ = [
    "AbsoluteUrlError",
    "Classifier",
    "ErrorCode",
    "InvalidInputTypeError",
    "Policy",
    "ResultCache",
    "classify",
    "is_absolute_url",
]
