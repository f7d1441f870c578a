"""Ordering primitives and small helper types shared by the twig trees.

Elements stored in a tree only need ``__eq__`` and ``__lt__``; everything
else here turns those two into a three-way ``Ordering``.
"""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generator, List, cast, override

__all__ = [
    "Box",
    "Comparable",
    "Flip",
    "Impossible",
    "Iterating",
    "Ordering",
    "Sized",
    "compare",
]


class Impossible(Exception):
    """Raised when a match falls through to a variant that cannot exist."""

    pass


@dataclass
class Box[T]:
    """Mutable cell used to thread an accumulator through a loop."""

    value: T


class Sized(metaclass=ABCMeta):
    @abstractmethod
    def size(self) -> int: ...

    def null(self) -> bool:
        return self.size() == 0

    def __bool__(self) -> bool:
        return not self.null()

    def __len__(self) -> int:
        return self.size()


class Iterating[U](metaclass=ABCMeta):
    @abstractmethod
    def iter(self) -> Generator[U]: ...

    def list(self) -> List[U]:
        return list(self.iter())

    def __iter__(self) -> Generator[U]:
        return self.iter()


class Ordering(Enum):
    """Result of a three-way comparison."""

    Lt = -1
    Eq = 0
    Gt = 1


class Comparable[T](metaclass=ABCMeta):
    """Base for element types that define a single ``compare`` method.

    The rich comparison operators are derived from it, so subclasses can be
    stored in a tree without writing ``__lt__`` and friends by hand.
    """

    @abstractmethod
    def compare(self, other: T) -> Ordering: ...

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, type(self)):
            return self.compare(cast(T, other)) == Ordering.Eq
        else:
            return False

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    def __lt__(self, other: T) -> bool:
        return self.compare(other) == Ordering.Lt

    def __le__(self, other: T) -> bool:
        return not self.__gt__(other)

    def __gt__(self, other: T) -> bool:
        return self.compare(other) == Ordering.Gt

    def __ge__(self, other: T) -> bool:
        return not self.__lt__(other)


@dataclass(frozen=True, eq=False)
class Flip[T](Comparable["Flip[T]"]):
    """Wrapper that reverses the ordering of the wrapped value.

    Inserting ``Flip`` values builds a tree whose in-order traversal is
    descending in the underlying values.

    Example:
        >>> from twig.common import Flip, compare, Ordering
        >>> compare(1, 2)
        <Ordering.Lt: -1>
        >>> compare(Flip(1), Flip(2))
        <Ordering.Gt: 1>
    """

    value: T

    @override
    def compare(self, other: Flip[T]) -> Ordering:
        result = compare(self.value, other.value)
        if result == Ordering.Lt:
            return Ordering.Gt
        elif result == Ordering.Gt:
            return Ordering.Lt
        else:
            return Ordering.Eq

    def __hash__(self) -> int:
        return hash(self.value)


def compare[T](a: T, b: T) -> Ordering:
    """Compare two values and return their ordering relationship.

    Uses ``==`` and ``<``, so mixed operands such as ``int`` and ``float``
    compare as Python orders them. Any exception raised by either propagates
    to the caller.

    Args:
        a: First value to compare.
        b: Second value to compare.

    Returns:
        Ordering indicating the relationship between a and b.
    """
    # Operators rather than dunders so reflected operands are consulted
    if cast(Any, a) == b:
        return Ordering.Eq
    elif cast(Any, a) < b:
        return Ordering.Lt
    else:
        return Ordering.Gt
