# cardface/core/game_components/rank.py

from enum import IntEnum, unique
from typing import Any

from cardface.core.utils.exceptions import InvalidCardError


@unique
class Rank(IntEnum):
    """Card ranks, Ace low. Compares equal to the raw integer 1-13."""
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def symbol(self) -> str:
        """The rank as printed in the corner of the card (A, 2-10, J, Q, K)."""
        return _FACE_SYMBOLS.get(self, str(self.value))

    @classmethod
    def parse(cls, value: Any) -> "Rank":
        """
        Resolves a rank from a member, an integer in 1-13 or a display symbol.

        Raises:
            InvalidCardError: If the value is out of range or not a rank at all.
        """
        if isinstance(value, cls):
            return value
        # bool is an int subclass; True must not pass as an Ace
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise InvalidCardError(f"Invalid card rank: {value!r}") from None
        if isinstance(value, str):
            for rank in cls:
                if value.upper() == rank.symbol:
                    return rank
        raise InvalidCardError(f"Invalid card rank: {value!r}")

    def __str__(self) -> str:
        return self.symbol


_FACE_SYMBOLS = {
    Rank.ACE: "A",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}
