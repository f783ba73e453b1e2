"""
A chainable list wrapper exposing kollect's sequence functions as methods.
Contains:
    class Seq(list)
        check                                   (obj: Any) -> bool
        head, tail                              properties
        map, map_indexed, flat_map, ...         (self, f: Callable) -> Seq
        filter, filter_indexed, filter_map      (self, pred: Callable) -> Seq
        fold, fold_indexed                      (self, initial: R, f: Callable) -> R
        reduce, reduce_indexed                  (self, f: Callable) -> T
        all, any                                (self, pred: Callable) -> bool
        partition                               (self, pred: Callable) -> tuple[Seq, Seq]
        distinct, distinct_by                   (self, ...) -> Seq
        group_by                                (self, transform: Callable) -> dict[KT, Seq]
        chunked, chunked_by, windowed           (self, ...) -> Seq[Seq]
        take_while, drop_while, ...             (self, pred: Callable) -> Seq
        zip                                     (self, other: Sequence) -> Seq[Pair]
        unzip                                   (self) -> tuple[Seq, Seq]

E.g. Seq(range(10)).filter(lambda x: x % 2).windowed(2, 2) == [[1, 3], [5, 7], [9]]
"""
from __future__ import annotations

from typing import Any, Generic, get_args

from collections.abc import Callable, Iterable, Sequence

from pydantic_core import core_schema

from kollect import combine, grouping, segment, transform
from kollect.basetypes import T, X, Y, R, KT, VT, Pair, Pred, IndexedPred
from kollect.errors import EmptyInputError


class Seq(list[T], Generic[T]):
    """
    Wrapper for lists
    Every method leaves 'self' untouched and returns a new Seq (or a plain value for folds and predicates).
    """
    def __init__(self, iterable: Iterable[T] | None = None) -> None:
        super(Seq, self).__init__([] if iterable is None else iterable)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Callable[[Any], core_schema.CoreSchema]) -> core_schema.CoreSchema:
        if args := get_args(source_type):
            list_schema = core_schema.list_schema(items_schema=handler(args[0]))
        else:
            list_schema = core_schema.list_schema()
        return core_schema.no_info_after_validator_function(cls, list_schema)

    @staticmethod
    def check(obj: Any) -> bool:
        """
        Checks if the given object is a list or subclass of Seq.
        :param obj: The object to check.
        :returns: True if the object is a list, False otherwise.
        """
        return isinstance(obj, (Seq, list))

    @property
    def head(self) -> T:
        if len(self) == 0:
            raise EmptyInputError('head of empty Seq')
        return self[0]

    @property
    def tail(self) -> Seq[T]:
        return Seq(self[1:])

    # transformation
    def map(self, f: Callable[[T], Y]) -> Seq[Y]:
        return Seq(transform.map(self, f))

    def map_indexed(self, f: Callable[[int, T], Y]) -> Seq[Y]:
        return Seq(transform.map_indexed(self, f))

    def filter(self, pred: Pred[T]) -> Seq[T]:
        return Seq(transform.filter(self, pred))

    def filter_indexed(self, pred: IndexedPred[T]) -> Seq[T]:
        return Seq(transform.filter_indexed(self, pred))

    def filter_map(self, f: Callable[[T], tuple[Y, bool]]) -> Seq[Y]:
        return Seq(transform.filter_map(self, f))

    def flat_map(self, f: Callable[[T], Iterable[Y]]) -> Seq[Y]:
        return Seq(transform.flat_map(self, f))

    def flat_map_indexed(self, f: Callable[[int, T], Iterable[Y]]) -> Seq[Y]:
        return Seq(transform.flat_map_indexed(self, f))

    def fold(self, initial: R, f: Callable[[R, T], R]) -> R:
        return transform.fold(self, initial, f)

    def fold_indexed(self, initial: R, f: Callable[[int, R, T], R]) -> R:
        return transform.fold_indexed(self, initial, f)

    def reduce(self, f: Callable[[T, T], T]) -> T:
        return transform.reduce(self, f)

    def reduce_indexed(self, f: Callable[[int, T, T], T]) -> T:
        return transform.reduce_indexed(self, f)

    # partitioning
    def all(self, pred: Pred[T]) -> bool:
        return grouping.all(self, pred)

    def any(self, pred: Pred[T]) -> bool:
        return grouping.any(self, pred)

    def partition(self, pred: Pred[T]) -> tuple[Seq[T], Seq[T]]:
        matching, non_matching = grouping.partition(self, pred)
        return Seq(matching), Seq(non_matching)

    def distinct(self) -> Seq[T]:
        return Seq(grouping.distinct(self))

    def distinct_by(self, key_fn: Callable[[T], KT]) -> Seq[T]:
        return Seq(grouping.distinct_by(self, key_fn))

    def group_by(self, f: Callable[[T], tuple[KT, VT]]) -> dict[KT, Seq[VT]]:
        return {k: Seq(v) for k, v in grouping.group_by(self, f).items()}

    # segmentation
    def chunked(self, size: int) -> Seq[Seq[T]]:
        return Seq(Seq(c) for c in segment.chunked(self, size))

    def chunked_by(self, pred: Callable[[T, T], bool]) -> Seq[Seq[T]]:
        return Seq(Seq(c) for c in segment.chunked_by(self, pred))

    def windowed(self, size: int, step: int = 1) -> Seq[Seq[T]]:
        return Seq(Seq(w) for w in segment.windowed(self, size, step))

    def take_while(self, pred: Pred[T]) -> Seq[T]:
        return Seq(segment.take_while(self, pred))

    def drop_while(self, pred: Pred[T]) -> Seq[T]:
        return Seq(segment.drop_while(self, pred))

    def take_last_while(self, pred: Pred[T]) -> Seq[T]:
        return Seq(segment.take_last_while(self, pred))

    def drop_last_while(self, pred: Pred[T]) -> Seq[T]:
        return Seq(segment.drop_last_while(self, pred))

    # combination
    def zip(self, other: Sequence[X]) -> Seq[Pair[T, X]]:
        return Seq(combine.zip(self, other))

    def unzip(self) -> tuple[Seq[Any], Seq[Any]]:
        firsts, seconds = combine.unzip(self)
        return Seq(firsts), Seq(seconds)
