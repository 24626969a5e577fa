# cardface/core/game_components/suit.py

from enum import Enum, unique
from typing import Any

from cardface.core.utils.exceptions import InvalidCardError


@unique
class Suit(Enum):
    """The four suits of a standard deck. Each member's value is its display glyph."""
    HEART = "♥"
    DIAMOND = "♦"
    CLUB = "♣"
    SPADE = "♠"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Any, allow_name: bool = False) -> "Suit":
        """
        Resolves a suit from a member or its glyph. With `allow_name`, the
        member name is accepted too (case-insensitive, e.g. "spade").

        Raises:
            InvalidCardError: If the value names none of the four suits.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for suit in cls:
                if value == suit.value or (allow_name and value.upper() == suit.name):
                    return suit
        raise InvalidCardError(f"Invalid card suit: {value!r}")

    def __str__(self) -> str:
        return self.value
