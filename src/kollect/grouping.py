"""
Predicates, partitioning, deduplication and grouping over sequences.

Contains:
    all, any        (seq: Sequence[T], pred: Pred[T]) -> bool
    partition       (seq: Sequence[T], pred: Pred[T]) -> tuple[list[T], list[T]]
    distinct        (seq: Sequence[T]) -> list[T]
    distinct_by     (seq: Sequence[T], key_fn: Callable[[T], KT]) -> list[T]
    group_by        (seq: Sequence[T], transform: Callable[[T], tuple[KT, VT]]) -> dict[KT, list[VT]]
"""
from __future__ import annotations

import builtins

from collections.abc import Callable, Sequence

import toolz

from kollect.basetypes import T, KT, VT, Pred


def all(seq: Sequence[T], pred: Pred[T]) -> bool:
    """
    True iff every element satisfies 'pred'. Vacuously true for an empty sequence.
    Stops at the first failing element.
    """
    return builtins.all(pred(x) for x in seq)

def any(seq: Sequence[T], pred: Pred[T]) -> bool:
    """
    True iff at least one element satisfies 'pred'. False for an empty sequence.
    Stops at the first matching element.
    """
    return builtins.any(pred(x) for x in seq)

def partition(seq: Sequence[T], pred: Pred[T]) -> tuple[list[T], list[T]]:
    """
    Splits 'seq' in two by 'pred', keeping relative order within each half.
    :param seq: The elements to split.
    :param pred: Called once per element.
    :return: (elements satisfying pred, elements not satisfying pred).
    """
    matching, non_matching = [], []
    for x in seq:
        (matching if pred(x) else non_matching).append(x)
    return matching, non_matching

def distinct(seq: Sequence[T]) -> list[T]:
    """
    Removes duplicates while keeping the first occurrence of each element.
    Elements must be hashable.
    :param seq: The elements to deduplicate.
    :return: A new list in first-occurrence order; empty for empty input.
    """
    return list(toolz.unique(seq))

def distinct_by(seq: Sequence[T], key_fn: Callable[[T], KT]) -> list[T]:
    """
    Removes elements whose key_fn(element) was already seen; the first element per key wins.
    :param seq: The elements to deduplicate.
    :param key_fn: Maps each element to a hashable key.
    :return: A new list in first-occurrence order; empty for empty input.
    """
    return list(toolz.unique(seq, key=key_fn))

def group_by(seq: Sequence[T], transform: Callable[[T], tuple[KT, VT]]) -> dict[KT, list[VT]]:
    """
    Groups values by key, where transform(element) yields the (key, value) pair for each element.
    Each group keeps the relative order of the elements that produced it, and groups appear in
    the order their keys were first seen. Only keys actually produced appear in the result.
    :param seq: The elements to group.
    :param transform: Maps an element to a (key, value) pair.
    :return: A new dict from key to the list of its values.
    """
    groups: dict[KT, list[VT]] = {}
    for x in seq:
        key, value = transform(x)
        groups.setdefault(key, []).append(value)
    return groups
