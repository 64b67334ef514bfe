import pytest

from json_unescaper.codec import (
    USER_MESSAGE,
    DecodeError,
    DecodeErrorKind,
    decode,
    encode,
    is_blank,
)


def decode_error(text: str) -> DecodeError:
    with pytest.raises(DecodeError) as info:
        decode(text)
    return info.value


def test_decode_resolves_escapes() -> None:
    assert decode('"Hello\\nWorld!"') == "Hello\nWorld!"
    assert decode('"tab\\there"') == "tab\there"
    assert decode('"quote \\" and slash \\\\"') == 'quote " and slash \\'
    assert decode('"\\u00e9\\u4e2d"') == "é中"


def test_decode_allows_surrounding_whitespace() -> None:
    assert decode('  "padded"\n') == "padded"


@pytest.mark.parametrize(
    ("text", "found"),
    [
        ("42", "number"),
        ("-1.5e3", "number"),
        ("null", "null"),
        ("true", "boolean"),
        ("[1,2]", "array"),
        ('{"a":1}', "object"),
    ],
)
def test_decode_rejects_non_strings(text: str, found: str) -> None:
    error = decode_error(text)

    assert error.kind is DecodeErrorKind.NOT_A_STRING
    assert error.found_type == found


@pytest.mark.parametrize(
    "text",
    ["not json", '"unterminated', "", "   ", "'single quoted'", '"a" "b"', "NaN", "-Infinity"],
)
def test_decode_rejects_malformed_input(text: str) -> None:
    error = decode_error(text)

    assert error.kind is DecodeErrorKind.MALFORMED_JSON


def test_decode_error_reports_position() -> None:
    error = decode_error('"line one\\n"\n  oops')

    assert error.lineno == 2
    assert error.colno == 3


def test_decode_rejects_raw_control_characters() -> None:
    error = decode_error('"two\nlines"')

    assert error.kind is DecodeErrorKind.MALFORMED_JSON


def test_all_kinds_share_the_user_message() -> None:
    malformed = decode_error("not json")
    not_a_string = decode_error("42")

    assert malformed.user_message == not_a_string.user_message == USER_MESSAGE
    assert "must be a valid JSON-encoded string" in USER_MESSAGE


def test_encode_escapes_quotes_backslashes_and_controls() -> None:
    assert encode('He said "hi"') == '"He said \\"hi\\""'
    assert encode("a\\b") == '"a\\\\b"'
    assert encode("line\nnext\ttab") == '"line\\nnext\\ttab"'
    assert encode("\x00\x1f") == '"\\u0000\\u001f"'


def test_encode_keeps_non_ascii_verbatim() -> None:
    assert encode("naïve — 中文 😀") == '"naïve — 中文 😀"'


@pytest.mark.parametrize(
    "raw",
    ["", "plain", 'He said "hi"', "back\\slash", "# Title\n\n- item\r\n", "\x07\x7f", "é😀"],
)
def test_encode_is_quoted_and_round_trips(raw: str) -> None:
    escaped = encode(raw)

    assert escaped.startswith('"') and escaped.endswith('"')
    assert decode(escaped) == raw


def test_is_blank() -> None:
    assert is_blank("")
    assert is_blank(" \t\r\n")
    assert is_blank("\ufeff ")
    assert not is_blank(' "" ')
    assert is_blank("\u00a0\u2028\u3000\v")
    assert not is_blank("\x1c")
    assert not is_blank("\x1f")
    assert not is_blank("\x85")


def test_encode_escapes_lone_surrogates() -> None:
    assert encode("\ud800") == '"\\ud800"'
    assert encode("a\udfffb") == '"a\\udfffb"'
    assert decode(encode("\ud800")) == "\ud800"
    assert decode(encode("x\udc00\ud800y")) == "x\udc00\ud800y"


def test_encode_keeps_surrogate_pairs_together() -> None:
    pair = "\ud83d\ude00"

    assert encode(pair) == f'"{pair}"'
    assert decode(encode(pair)) == pair
