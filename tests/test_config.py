import pytest

from json_unescaper.codec import decode
from json_unescaper.config import (
    DEMO_ESCAPED_TEXT,
    DEMO_RAW_TEXT,
    ConfigError,
    SessionConfig,
    load_config,
    parse_direction,
)
from json_unescaper.direction import Direction, Side


def test_demo_escaped_text_is_a_valid_literal() -> None:
    assert DEMO_ESCAPED_TEXT.startswith('"## Welcome!\\n\\n')
    assert decode(DEMO_ESCAPED_TEXT) == DEMO_RAW_TEXT
    assert "`\\n`" in DEMO_RAW_TEXT


def test_defaults_without_environment() -> None:
    config = load_config({})

    assert config == SessionConfig()
    assert config.initial_escaped == DEMO_ESCAPED_TEXT
    assert config.initial_raw == ""
    assert config.initial_direction is Direction.LEFT_TO_RIGHT
    assert config.resync_on_focus is False
    assert config.derive_on_start is True


def test_environment_overrides() -> None:
    config = load_config(
        {
            "JSON_UNESCAPER_DIRECTION": "rtl",
            "JSON_UNESCAPER_RESYNC_ON_FOCUS": "yes",
            "JSON_UNESCAPER_DERIVE_ON_START": "0",
        }
    )

    assert config.initial_direction is Direction.RIGHT_TO_LEFT
    assert config.resync_on_focus is True
    assert config.derive_on_start is False


def test_invalid_flag_is_rejected() -> None:
    with pytest.raises(ConfigError) as info:
        load_config({"JSON_UNESCAPER_RESYNC_ON_FOCUS": "sometimes"})

    assert info.value.key == "RESYNC_ON_FOCUS"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("ltr", Direction.LEFT_TO_RIGHT),
        (" Left_To_Right ", Direction.LEFT_TO_RIGHT),
        ("RTL", Direction.RIGHT_TO_LEFT),
        ("right-to-left", Direction.RIGHT_TO_LEFT),
    ],
)
def test_parse_direction(value: str, expected: Direction) -> None:
    assert parse_direction(value) is expected


def test_parse_direction_rejects_unknown_values() -> None:
    with pytest.raises(ConfigError):
        parse_direction("up")


def test_with_overrides_skips_none() -> None:
    config = SessionConfig().with_overrides(resync_on_focus=True, derive_on_start=None)

    assert config.resync_on_focus is True
    assert config.derive_on_start is True


def test_direction_follows_side() -> None:
    assert Direction.for_side(Side.ESCAPED) is Direction.LEFT_TO_RIGHT
    assert Direction.for_side(Side.RAW) is Direction.RIGHT_TO_LEFT
    assert Direction.LEFT_TO_RIGHT.source is Side.ESCAPED
    assert Direction.LEFT_TO_RIGHT.target is Side.RAW
    assert Direction.RIGHT_TO_LEFT.arrow == "←"
