"""Failure taxonomy for decoding JSON string literals."""

from __future__ import annotations

from enum import Enum
from typing import Optional

USER_MESSAGE = (
    "Invalid JSON format. Input must be a valid JSON-encoded string "
    "(e.g., wrapped in double quotes)."
)


class DecodeErrorKind(str, Enum):
    MALFORMED_JSON = "malformed_json"
    NOT_A_STRING = "not_a_string"


class DecodeError(ValueError):
    """Raised when escaped text does not decode to a JSON string.

    ``kind`` keeps the two causes apart for logging and tests, while
    ``user_message`` is the same for both so hosts render one message.
    """

    user_message = USER_MESSAGE

    def __init__(
        self,
        message: str,
        *,
        kind: DecodeErrorKind,
        lineno: Optional[int] = None,
        colno: Optional[int] = None,
        found_type: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.lineno = lineno
        self.colno = colno
        self.found_type = found_type

    @classmethod
    def malformed(
        cls,
        detail: str,
        *,
        lineno: Optional[int] = None,
        colno: Optional[int] = None,
    ) -> "DecodeError":
        return cls(
            f"Malformed JSON: {detail}",
            kind=DecodeErrorKind.MALFORMED_JSON,
            lineno=lineno,
            colno=colno,
        )

    @classmethod
    def not_a_string(cls, found_type: str) -> "DecodeError":
        return cls(
            f"Expected a JSON string, found {found_type}",
            kind=DecodeErrorKind.NOT_A_STRING,
            found_type=found_type,
        )


__all__ = ["USER_MESSAGE", "DecodeError", "DecodeErrorKind"]
