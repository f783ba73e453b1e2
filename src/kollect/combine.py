"""
Pairing two sequences element by element, and splitting pairs back apart.

Contains:
    zip     (first: Sequence[A], second: Sequence[B]) -> list[Pair[A, B]]
    unzip   (pairs: Iterable[Pair[A, B] | tuple[A, B]]) -> tuple[list[A], list[B]]
"""
from __future__ import annotations

import builtins

from collections.abc import Iterable, Sequence

from kollect.basetypes import A, B, Pair


def zip(first: Sequence[A], second: Sequence[B]) -> list[Pair[A, B]]:
    """
    Pairs the elements of 'first' and 'second' that share an index.
    The result has min(len(first), len(second)) pairs; the tail of the longer sequence is dropped.
    :param first: Supplies Pair.first.
    :param second: Supplies Pair.second.
    :return: A new list of pairs; empty if either input is empty.
    """
    return [Pair(a, b) for a, b in builtins.zip(first, second)]

def unzip(pairs: Iterable[Pair[A, B] | tuple[A, B]]) -> tuple[list[A], list[B]]:
    """
    Inverse of zip: splits pairs into the list of first components and the list of second components.
    Plain 2-tuples are accepted alongside Pair objects.
    :param pairs: The pairs to split.
    :return: (firsts, seconds), two lists of equal length.
    """
    firsts: list[A] = []
    seconds: list[B] = []
    for pair in pairs:
        a, b = pair.to_tuple() if isinstance(pair, Pair) else pair
        firsts.append(a)
        seconds.append(b)
    return firsts, seconds
