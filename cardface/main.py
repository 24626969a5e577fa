# cardface/main.py

import logging
from typing import Optional

from cardface.core.game_components.card import Card

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

RENDER_MODES = ("human", "ansi")


def main(render_mode: str = "human") -> Optional[str]:
    """
    Builds a default card and renders the full 52-card deck from it.

    Args:
        render_mode (str): 'human' prints the deck to stdout, 'ansi' returns it instead.

    Returns:
        Optional[str]: The rendered deck in 'ansi' mode, None in 'human' mode.

    Raises:
        ValueError: If the render mode is unknown.
    """
    if render_mode not in RENDER_MODES:
        raise ValueError(f"Unknown render mode {render_mode!r}, expected one of {RENDER_MODES}")

    card = Card.new_default()
    logger.info(f"Generating 52 card deck from {card!r}")
    deck = card.render_full_deck()

    if render_mode == "ansi":
        return deck
    card.print_full_deck()
    return None


def run() -> None:
    """Console entry point: configures logging, then prints the deck."""
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    main()


if __name__ == "__main__":
    run()
