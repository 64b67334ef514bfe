"""Pure conversions between JSON string literals and raw text."""

from __future__ import annotations

import json
import re
from typing import Any, NoReturn

from .errors import DecodeError

# WhiteSpace and LineTerminator as JavaScript's String.prototype.trim sees them.
_JS_WHITESPACE = (
    "\t\n\v\f\r \xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# A surrogate that is not half of a high+low pair.
_LONE_SURROGATE = re.compile(
    "[\ud800-\udbff](?![\udc00-\udfff])|(?<![\ud800-\udbff])[\udc00-\udfff]"
)


def _reject_constant(token: str) -> NoReturn:
    # json.loads accepts NaN/Infinity; JSON itself does not.
    raise DecodeError.malformed(f"'{token}' is not valid JSON")


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def decode(escaped: str) -> str:
    """Return the text a JSON string literal represents.

    Raises ``DecodeError`` with kind ``MALFORMED_JSON`` when ``escaped`` is
    not JSON at all, and ``NOT_A_STRING`` when it is valid JSON of another
    type. Blank input is malformed here; callers that want to treat it as
    "nothing to decode" must check first (see ``is_blank``).
    """

    try:
        value = json.loads(escaped, parse_constant=_reject_constant)
    except DecodeError:
        raise
    except json.JSONDecodeError as exc:
        raise DecodeError.malformed(
            exc.msg, lineno=exc.lineno, colno=exc.colno
        ) from exc
    except RecursionError as exc:
        raise DecodeError.malformed("nesting too deep") from exc

    if not isinstance(value, str):
        raise DecodeError.not_a_string(_json_type_name(value))
    return value


def encode(raw: str) -> str:
    """Return ``raw`` as a double-quoted JSON string literal.

    Quotes, backslashes, control characters and lone surrogates are
    escaped; everything else, non-ASCII included, is kept verbatim.
    """

    literal = json.dumps(raw, ensure_ascii=False)
    return _LONE_SURROGATE.sub(lambda match: f"\\u{ord(match.group()):04x}", literal)


def is_blank(text: str) -> bool:
    """True when ``text`` is empty once JavaScript-style trimmed.

    ``str.strip`` is broader: it also drops \\x1c-\\x1f and \\x85, which are
    not whitespace to a JSON parser and must reach ``decode``.
    """

    return not text.strip(_JS_WHITESPACE)


__all__ = ["decode", "encode", "is_blank"]
