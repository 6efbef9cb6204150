from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    INVALID_INPUT_TYPE = "INVALID_INPUT_TYPE"


class AbsoluteUrlError(Exception):
    """Base class for errors raised by absolute_url.

    Callers that pass untrusted values can catch this (or the builtin it
    mixes in) and serialise it with ``to_dict``.
    """

    def __init__(self, code: ErrorCode, message: str, suggestion: str = "") -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "suggestion": self.suggestion,
            }
        }


class InvalidInputTypeError(AbsoluteUrlError, TypeError):
    """Raised when the value to classify is not a ``str``."""

    def __init__(self, value: object) -> None:
        self.received_type = type(value).__name__
        super().__init__(
            code=ErrorCode.INVALID_INPUT_TYPE,
            message=f"Expected a `str`, got `{self.received_type}`",
            suggestion="Decode bytes and convert other values to str before classifying.",
        )
