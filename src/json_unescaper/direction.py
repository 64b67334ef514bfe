"""Conversion direction and the input surfaces that select it."""

from __future__ import annotations

from enum import Enum


class Side(str, Enum):
    """The two input surfaces a host exposes."""

    ESCAPED = "escaped"
    RAW = "raw"


class Direction(str, Enum):
    """Which buffer is authoritative.

    ``LEFT_TO_RIGHT`` means the escaped buffer drives the raw one;
    ``RIGHT_TO_LEFT`` the reverse.
    """

    LEFT_TO_RIGHT = "ltr"
    RIGHT_TO_LEFT = "rtl"

    @classmethod
    def for_side(cls, side: Side) -> "Direction":
        return _DIRECTION_BY_SIDE[Side(side)]

    @property
    def source(self) -> Side:
        return Side.ESCAPED if self is Direction.LEFT_TO_RIGHT else Side.RAW

    @property
    def target(self) -> Side:
        return Side.RAW if self is Direction.LEFT_TO_RIGHT else Side.ESCAPED

    @property
    def arrow(self) -> str:
        return "→" if self is Direction.LEFT_TO_RIGHT else "←"


_DIRECTION_BY_SIDE = {
    Side.ESCAPED: Direction.LEFT_TO_RIGHT,
    Side.RAW: Direction.RIGHT_TO_LEFT,
}


__all__ = ["Direction", "Side"]
