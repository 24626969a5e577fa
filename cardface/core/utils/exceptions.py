# cardface/core/utils/exceptions.py


class CardError(Exception):
    pass


class InvalidCardError(CardError, ValueError):
    """Raised when a rank or suit falls outside the standard deck."""
    pass


class NullCardError(CardError, TypeError):
    """Raised when a card is copied from a missing source."""
    def __init__(self, message: str = "Cannot copy a card from None"):
        super().__init__(message)
