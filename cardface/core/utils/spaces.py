# cardface/core/utils/spaces.py

from enum import Enum
from typing import Any, List, Tuple, Type


class Space:
    """
    Base class for the value domains a card field may take.
    Setters consult a space before touching any state.
    """
    def __init__(self, shape: Tuple[int, ...], dtype: Any):
        self.shape = shape
        self.dtype = dtype

    def contains(self, x: Any) -> bool:
        """Checks if a value is contained within the space."""
        raise NotImplementedError

    def __contains__(self, x: Any) -> bool:
        return self.contains(x)


class DiscreteSpace(Space):
    """
    A closed range of integers, {low, low + 1, ..., high}.
    Booleans are rejected even though they are ints.
    """
    def __init__(self, low: int, high: int):
        if high < low:
            raise ValueError(f"Empty space: high ({high}) < low ({low})")
        super().__init__(shape=(), dtype=int)
        self.low = low
        self.high = high

    @property
    def n(self) -> int:
        return self.high - self.low + 1

    def contains(self, x: Any) -> bool:
        return isinstance(x, int) and not isinstance(x, bool) and self.low <= x <= self.high

    def __repr__(self) -> str:
        return f"DiscreteSpace({self.low}, {self.high})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiscreteSpace):
            return NotImplemented
        return self.low == other.low and self.high == other.high


class EnumSpace(Space):
    """
    The members of an Enum. A value is contained if the enum's `parse`
    classmethod (or, lacking one, the enum constructor) accepts it.
    """
    def __init__(self, enum_cls: Type[Enum]):
        super().__init__(shape=(), dtype=enum_cls)
        self.enum_cls = enum_cls

    @property
    def n(self) -> int:
        return len(self.enum_cls)

    def contains(self, x: Any) -> bool:
        parse = getattr(self.enum_cls, "parse", self.enum_cls)
        try:
            parse(x)
        except (ValueError, TypeError): # InvalidCardError is a ValueError
            return False
        return True

    def __repr__(self) -> str:
        return f"EnumSpace({self.enum_cls.__name__})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnumSpace):
            return NotImplemented
        return self.enum_cls is other.enum_cls


class TupleSpace(Space):
    """
    A space that is a product of other spaces.
    E.g., TupleSpace([DiscreteSpace(1, 13), EnumSpace(Suit)]) for a whole card.
    """
    def __init__(self, spaces: List[Space]):
        self.spaces = spaces
        super().__init__(shape=(len(spaces),), dtype=tuple)

    def contains(self, x: Any) -> bool:
        """Checks if x is a tuple and each element is contained in its corresponding subspace."""
        if not isinstance(x, tuple) or len(x) != len(self.spaces):
            return False
        return all(space.contains(item) for space, item in zip(self.spaces, x))

    def __repr__(self) -> str:
        return f"TupleSpace({', '.join(repr(s) for s in self.spaces)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TupleSpace):
            return NotImplemented
        return self.spaces == other.spaces
