"""
Element-wise transformations over sequences.

Contains:
    map, map_indexed                (seq: Sequence[X], f: Callable) -> list[Y]
    filter, filter_indexed          (seq: Sequence[T], pred: Callable) -> list[T]
    filter_map                      (seq: Sequence[X], f: Callable[[X], tuple[Y, bool]]) -> list[Y]
    flat_map, flat_map_indexed      (seq: Sequence[X], f: Callable) -> list[Y]
    fold, fold_indexed              (seq: Sequence[T], initial: R, f: Callable) -> R
    reduce, reduce_indexed          (seq: Sequence[T], f: Callable) -> T

Every function makes one left-to-right pass over its input and never mutates it.
The *_indexed variants pass the element's position in 'seq' as the first argument of the callback.
"""
from __future__ import annotations

import functools
import itertools

from collections.abc import Callable, Iterable, Sequence

import toolz

from kollect.basetypes import T, X, Y, R, Pred, IndexedPred
from kollect.errors import EmptyInputError


def map(seq: Sequence[X], f: Callable[[X], Y]) -> list[Y]:
    """
    Applies 'f' to each element of 'seq'.
    :param seq: The elements to transform.
    :param f: A callable taking X and returning Y.
    :return: A new list of the results, in input order.
    """
    return [f(x) for x in seq]

def map_indexed(seq: Sequence[X], f: Callable[[int, X], Y]) -> list[Y]:
    return [f(i, x) for i, x in enumerate(seq)]

def filter(seq: Sequence[T], pred: Pred[T]) -> list[T]:
    """
    Keeps the elements of 'seq' for which 'pred' is truthy.
    :param seq: The elements to filter.
    :param pred: A callable returning True for items to keep, False otherwise.
    :return: A new list of the kept elements, in input order.
    """
    return [x for x in seq if pred(x)]

def filter_indexed(seq: Sequence[T], pred: IndexedPred[T]) -> list[T]:
    return [x for i, x in enumerate(seq) if pred(i, x)]

def filter_map(seq: Sequence[X], f: Callable[[X], tuple[Y, bool]]) -> list[Y]:
    """
    Filters and maps in a single pass.
    'f' returns a (value, keep) pair for every element; value is collected only when keep is truthy.
    :param seq: The elements to transform.
    :param f: A callable returning (mapped value, whether to keep it).
    :return: A new list of the kept values.
    """
    result: list[Y] = []
    for x in seq:
        value, keep = f(x)
        if keep:
            result.append(value)
    return result

def flat_map(seq: Sequence[X], f: Callable[[X], Iterable[Y]]) -> list[Y]:
    """
    Applies 'f' to each element and concatenates the resulting iterables.
    :param seq: The elements to transform.
    :param f: A callable returning an iterable of Y for each element.
    :return: A single flattened list.
    """
    return list(toolz.concat(f(x) for x in seq))

def flat_map_indexed(seq: Sequence[X], f: Callable[[int, X], Iterable[Y]]) -> list[Y]:
    return list(toolz.concat(f(i, x) for i, x in enumerate(seq)))

def fold(seq: Sequence[T], initial: R, f: Callable[[R, T], R]) -> R:
    """
    Accumulates from 'initial', combining the accumulator with each element from left to right.
    :param seq: The elements to fold.
    :param initial: The starting accumulator; returned unchanged when 'seq' is empty.
    :param f: A callable (accumulator, element) -> accumulator.
    :return: The final accumulator.
    """
    return functools.reduce(f, seq, initial)

def fold_indexed(seq: Sequence[T], initial: R, f: Callable[[int, R, T], R]) -> R:
    """
    Like fold, but 'f' also receives the index of the element being combined.
    :param seq: The elements to fold.
    :param initial: The starting accumulator.
    :param f: A callable (index, accumulator, element) -> accumulator.
    :return: The final accumulator.
    """
    acc = initial
    for i, x in enumerate(seq):
        acc = f(i, acc, x)
    return acc

def reduce(seq: Sequence[T], f: Callable[[T, T], T]) -> T:
    """
    Folds 'seq' using its first element as the initial accumulator.
    A single-element sequence is returned as-is without calling 'f'.
    :param seq: A non-empty sequence.
    :param f: A callable (accumulator, element) -> accumulator.
    :return: The final accumulator.
    :raises EmptyInputError: If 'seq' is empty.
    """
    if len(seq) == 0:
        raise EmptyInputError("reduce called on an empty sequence")
    return fold(itertools.islice(seq, 1, None), seq[0], f)

def reduce_indexed(seq: Sequence[T], f: Callable[[int, T, T], T]) -> T:
    """
    Like reduce, but 'f' also receives the index of the element being combined (starting at 1).
    :param seq: A non-empty sequence.
    :param f: A callable (index, accumulator, element) -> accumulator.
    :return: The final accumulator.
    :raises EmptyInputError: If 'seq' is empty.
    """
    if len(seq) == 0:
        raise EmptyInputError("reduce_indexed called on an empty sequence")
    acc = seq[0]
    for i, x in enumerate(itertools.islice(seq, 1, None), 1):
        acc = f(i, acc, x)
    return acc
