# cardface/core/game_components/card.py

import logging
from typing import Any

from cardface.core.game_components.rank import Rank
from cardface.core.game_components.suit import Suit
from cardface.core.utils.exceptions import InvalidCardError
from cardface.core.utils.result import CardResult
from cardface.core.utils.spaces import DiscreteSpace, EnumSpace, TupleSpace

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO) # DEBUG traces every rejected setter call

DEFAULT_RANK = Rank.ACE
DEFAULT_SUIT = Suit.HEART

RANK_SPACE = DiscreteSpace(int(Rank.ACE), int(Rank.KING))
SUIT_SPACE = EnumSpace(Suit)
CARD_SPACE = TupleSpace([RANK_SPACE, SUIT_SPACE])


class Card:
    """
    Represents a single playing card from a standard 52-card deck.

    The rank is stored as a `Rank` (an int from 1 to 13, Ace low) and the suit
    as a `Suit`. Every mutation is validated first, so a card is never left
    holding an out-of-range rank or an unknown suit; rejected input leaves
    both fields untouched.

    >>> card = Card(12, Suit.SPADE)
    >>> print(card)
    Q ♠
    """
    __hash__ = None # mutable, compared by value

    def __init__(self, rank: Any = DEFAULT_RANK, suit: Any = DEFAULT_SUIT):
        """
        Args:
            rank (int | Rank): The rank, 1-13. Defaults to Ace.
            suit (Suit | str): A suit member or its glyph. Defaults to Hearts.

        Raises:
            InvalidCardError: If either value is outside the standard deck.
        """
        if not CARD_SPACE.contains((rank, suit)):
            raise InvalidCardError(f"Invalid card data: rank={rank!r}, suit={suit!r}")
        self._rank: Rank = Rank(rank)
        self._suit: Suit = Suit.parse(suit)

    @classmethod
    def new_default(cls) -> "Card":
        """Returns the default card, the Ace of Hearts."""
        return cls()

    @classmethod
    def create(cls, rank: Any, suit: Any) -> CardResult:
        """
        Builds a card without raising on bad input.

        Returns:
            CardResult: Holding the card, or the reason it could not be built.
        """
        try:
            return CardResult.success(cls(rank, suit))
        except InvalidCardError as e:
            logger.debug(f"Card creation rejected: {e}")
            return CardResult.failure(str(e))

    @classmethod
    def copy_of(cls, source: Any) -> CardResult:
        """
        Duplicates `source` into an independent card.

        Returns:
            CardResult: The copy, or a null-input failure if `source` is None
                        or not a card at all.
        """
        if source is None:
            return CardResult.failure("Cannot copy a card from None", null_input=True)
        if not isinstance(source, Card):
            return CardResult.failure(f"Cannot copy a card from {type(source).__name__}", null_input=True)
        return CardResult.success(source.copy())

    @classmethod
    def from_string(cls, text: str) -> "Card":
        """
        Parses the compact form produced by `str(card)`, e.g. "10 ♦".
        Display symbols and suit names are accepted too ("q spade").

        Raises:
            InvalidCardError: If the text does not name a card.
        """
        if not isinstance(text, str):
            raise InvalidCardError(f"Invalid card string: {text!r}")
        parts = text.split()
        if len(parts) != 2:
            raise InvalidCardError(f"Invalid card string: {text!r}")
        return cls(Rank.parse(parts[0]), Suit.parse(parts[1], allow_name=True))

    def copy(self) -> "Card":
        return type(self)(self._rank, self._suit)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> "Card":
        return self.copy()

    def set_rank(self, rank: Any) -> bool:
        """Sets the rank if it lies in 1-13. Returns whether the card changed."""
        if not RANK_SPACE.contains(rank):
            logger.debug(f"Rejected rank {rank!r} for {self!r}")
            return False
        self._rank = Rank(rank)
        return True

    def set_suit(self, suit: Any) -> bool:
        """Sets the suit if it names one of the four suits. Returns whether the card changed."""
        if not SUIT_SPACE.contains(suit):
            logger.debug(f"Rejected suit {suit!r} for {self!r}")
            return False
        self._suit = Suit.parse(suit)
        return True

    def set_all(self, rank: Any, suit: Any) -> bool:
        """Sets both fields only if both are valid; otherwise neither changes."""
        if not CARD_SPACE.contains((rank, suit)):
            logger.debug(f"Rejected rank {rank!r} / suit {suit!r} for {self!r}")
            return False
        self._rank = Rank(rank)
        self._suit = Suit.parse(suit)
        return True

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def suit(self) -> Suit:
        return self._suit

    def get_rank(self) -> int:
        return int(self._rank)

    def get_suit(self) -> Suit:
        return self._suit

    @property
    def display_rank(self) -> str:
        """The rank as printed on the card: A, 2-10, J, Q or K."""
        return self._rank.symbol

    def render_full_deck(self) -> str:
        """
        Renders all 52 cards as a grid: one line per suit (hearts, diamonds,
        clubs, spades), ranks Ace to King, each card followed by a space.
        The output does not depend on this card's own rank or suit.
        """
        # Local import, deck builds Card instances
        from cardface.core.game_components.deck import render_full_deck
        return render_full_deck()

    def print_full_deck(self) -> None:
        """Prints the full deck grid to stdout."""
        print(self.render_full_deck())

    def __str__(self) -> str:
        return f"{self.display_rank} {self._suit.symbol}"

    def __repr__(self) -> str:
        return f"Card(rank={self._rank.name}, suit={self._suit.name})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._rank == other._rank and self._suit == other._suit

    def equals(self, other: object) -> bool:
        return isinstance(other, Card) and self == other
