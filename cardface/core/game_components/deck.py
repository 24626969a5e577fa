# cardface/core/game_components/deck.py

import logging
from typing import List, Tuple

import numpy as np

from cardface.core.game_components.card import Card
from cardface.core.game_components.rank import Rank
from cardface.core.game_components.suit import Suit

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO) # Set to DEBUG to trace deck construction

# Row and column order of the rendered grid
SUIT_ORDER: Tuple[Suit, ...] = (Suit.HEART, Suit.DIAMOND, Suit.CLUB, Suit.SPADE)
RANK_ORDER: Tuple[Rank, ...] = tuple(Rank)


def full_deck() -> List[Card]:
    """
    Builds the 52 cards of a standard deck, suit by suit in `SUIT_ORDER`,
    Ace to King within each suit. A fresh set of cards is returned on every call.
    """
    return [Card(rank, suit) for suit in SUIT_ORDER for rank in RANK_ORDER]


def deck_grid() -> np.ndarray:
    """
    Lays the full deck out as a (4, 13) object array: one row per suit,
    one column per rank.
    """
    grid = np.empty((len(SUIT_ORDER), len(RANK_ORDER)), dtype=object)
    for i, card in enumerate(full_deck()):
        grid[divmod(i, len(RANK_ORDER))] = card
    logger.debug(f"Built deck grid with shape {grid.shape}")
    return grid


def render_full_deck() -> str:
    """
    Renders the deck grid as text. Each card is written in its compact form
    followed by a single space, and every row (including the last) ends with
    a newline.
    """
    return "".join(
        "".join(f"{card} " for card in row) + "\n"
        for row in deck_grid()
    )
