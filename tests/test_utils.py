import pytest

from cardface.core.game_components.card import CARD_SPACE, RANK_SPACE, SUIT_SPACE, Card
from cardface.core.game_components.rank import Rank
from cardface.core.game_components.suit import Suit
from cardface.core.utils.exceptions import CardError, InvalidCardError, NullCardError
from cardface.core.utils.result import CardResult
from cardface.core.utils.spaces import DiscreteSpace, EnumSpace, TupleSpace


class TestSpaces:
    def test_rank_space(self):
        assert RANK_SPACE == DiscreteSpace(1, 13)
        assert RANK_SPACE.n == 13
        assert 1 in RANK_SPACE
        assert 13 in RANK_SPACE
        assert 0 not in RANK_SPACE
        assert 14 not in RANK_SPACE
        assert True not in RANK_SPACE

    def test_empty_discrete_space(self):
        with pytest.raises(ValueError):
            DiscreteSpace(5, 4)

    def test_suit_space(self):
        assert SUIT_SPACE.n == 4
        assert Suit.CLUB in SUIT_SPACE
        assert "♠" in SUIT_SPACE
        assert "?" not in SUIT_SPACE
        assert repr(SUIT_SPACE) == "EnumSpace(Suit)"

    def test_card_space(self):
        assert (1, Suit.HEART) in CARD_SPACE
        assert (0, Suit.HEART) not in CARD_SPACE
        assert (1, "?") not in CARD_SPACE
        assert (1,) not in CARD_SPACE
        assert [1, Suit.HEART] not in CARD_SPACE

    def test_space_equality(self):
        assert SUIT_SPACE == EnumSpace(Suit)
        assert SUIT_SPACE != EnumSpace(Rank)
        assert CARD_SPACE == TupleSpace([DiscreteSpace(1, 13), EnumSpace(Suit)])
        assert CARD_SPACE != TupleSpace([DiscreteSpace(1, 12), EnumSpace(Suit)])
        assert CARD_SPACE != RANK_SPACE

    def test_tuple_space_shape(self):
        space = TupleSpace([DiscreteSpace(0, 1), EnumSpace(Suit)])
        assert space.shape == (2,)


class TestCardResult:
    def test_success(self):
        result = CardResult.success(Card())
        assert result.ok
        assert result.unwrap() == Card()
        assert repr(result) == "CardResult.success(Card(rank=ACE, suit=HEART))"

    def test_failure(self):
        result = CardResult.failure("bad rank")
        assert not result.ok
        assert repr(result) == "CardResult.failure('bad rank')"
        with pytest.raises(InvalidCardError, match="bad rank"):
            result.unwrap()

    def test_null_failure(self):
        with pytest.raises(NullCardError):
            CardResult.failure("nothing to copy", null_input=True).unwrap()

    def test_needs_exactly_one_outcome(self):
        with pytest.raises(ValueError):
            CardResult()
        with pytest.raises(ValueError):
            CardResult(card=Card(), reason="both")


def test_exception_hierarchy():
    assert issubclass(InvalidCardError, CardError)
    assert issubclass(InvalidCardError, ValueError)
    assert issubclass(NullCardError, CardError)
    assert issubclass(NullCardError, TypeError)
    assert str(NullCardError()) == "Cannot copy a card from None"
