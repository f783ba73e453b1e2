"""
Shared type variables and the Pair value type.

Defines types:
    Type variables
        T, X, Y  # these are generic type variables
        R        # accumulator type for folds
        KT, VT   # for dictionaries
        A, B     # components of a Pair
    Type aliases
        Pred[T]             Callable[[T], bool]
        IndexedPred[T]      Callable[[int, T], bool]

    class Pair(BaseModel)
        first, second       the two components
        to_tuple            (self) -> tuple[A, B]
        from_tuple          (items: Sequence) -> Pair
"""
from __future__ import annotations

from typing import TypeVar, Any, Generic

from collections.abc import Hashable, Callable, Sequence

from pydantic import BaseModel, ConfigDict

from kollect.errors import InvalidArgumentError

T, X, Y, R = TypeVar('T'), TypeVar('X'), TypeVar('Y'), TypeVar('R')
KT, VT = TypeVar('KT', bound=Hashable), TypeVar('VT')
A, B = TypeVar('A'), TypeVar('B')

Pred = Callable[[T], bool]
IndexedPred = Callable[[int, T], bool]


class Pair(BaseModel, Generic[A, B]):
    """
    An immutable two-element tuple, produced by zip and items and consumed by unzip.
    Two pairs are equal when their components are equal; a pair is hashable when both components are.
    Parametrising the class validates the components, e.g. Pair[int, str](1, 'a').
    """
    model_config = ConfigDict(frozen=True)

    first: A
    second: B

    def __init__(self, first: Any, second: Any, **data: Any) -> None:
        super().__init__(first=first, second=second, **data)

    @classmethod
    def from_tuple(cls, items: Sequence[Any]) -> Pair[A, B]:
        """
        Builds a pair from a two-element sequence.
        :param items: A sequence of exactly two elements.
        :returns: The pair (items[0], items[1]).
        """
        if len(items) != 2:
            msg = f"Pair needs exactly two elements, got {len(items)}"
            raise InvalidArgumentError(msg)
        return cls(items[0], items[1])

    def to_tuple(self) -> tuple[A, B]:
        return (self.first, self.second)

    def __str__(self) -> str:
        return f"({self.first}, {self.second})"
