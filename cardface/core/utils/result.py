# cardface/core/utils/result.py

from typing import TYPE_CHECKING, Optional

from cardface.core.utils.exceptions import InvalidCardError, NullCardError

if TYPE_CHECKING:
    from cardface.core.game_components.card import Card


class CardResult:
    """
    Outcome of a non-raising card construction: either a card or the reason
    none could be built. Lets the caller choose how to react instead of
    catching an exception.

    Attributes:
        card (Optional[Card]): The constructed card on success, None otherwise.
        reason (Optional[str]): Why construction failed, None on success.
        null_input (bool): Whether the failure was caused by a missing source card.
    """
    def __init__(self, card: Optional["Card"] = None, reason: Optional[str] = None, null_input: bool = False):
        if (card is None) == (reason is None):
            raise ValueError("CardResult needs exactly one of card or reason")
        self.card = card
        self.reason = reason
        self.null_input = null_input

    @classmethod
    def success(cls, card: "Card") -> "CardResult":
        return cls(card=card)

    @classmethod
    def failure(cls, reason: str, null_input: bool = False) -> "CardResult":
        return cls(reason=reason, null_input=null_input)

    @property
    def ok(self) -> bool:
        return self.card is not None

    def unwrap(self) -> "Card":
        """
        Returns the card, or raises the error the failure stands for.

        Raises:
            NullCardError: If the result came from copying a missing card.
            InvalidCardError: If the result came from an invalid rank or suit.
        """
        if self.card is not None:
            return self.card
        if self.null_input:
            raise NullCardError(self.reason)
        raise InvalidCardError(self.reason)

    def __bool__(self) -> bool:
        return self.ok

    def __repr__(self) -> str:
        if self.ok:
            return f"CardResult.success({self.card!r})"
        return f"CardResult.failure({self.reason!r})"
