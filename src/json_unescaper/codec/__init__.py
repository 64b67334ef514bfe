"""JSON string literal codec."""

from .errors import USER_MESSAGE, DecodeError, DecodeErrorKind
from .json_string import decode, encode, is_blank

__all__ = [
    "USER_MESSAGE",
    "DecodeError",
    "DecodeErrorKind",
    "decode",
    "encode",
    "is_blank",
]
