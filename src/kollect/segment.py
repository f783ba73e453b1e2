"""
Splitting sequences into contiguous runs.

Contains:
    chunked             (seq: Sequence[T], size: int) -> list[list[T]]
    chunked_by          (seq: Sequence[T], pred: Callable[[T, T], bool]) -> list[list[T]]
    windowed            (seq: Sequence[T], size: int, step: int = 1) -> list[list[T]]
    take_while          (seq: Sequence[T], pred: Pred[T]) -> list[T]
    drop_while          (seq: Sequence[T], pred: Pred[T]) -> list[T]
    take_last_while     (seq: Sequence[T], pred: Pred[T]) -> list[T]
    drop_last_while     (seq: Sequence[T], pred: Pred[T]) -> list[T]
"""
from __future__ import annotations

import itertools
import logging

from collections.abc import Callable, Sequence

import toolz

from kollect.basetypes import T, Pred
from kollect.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def _require_positive(name: str, value: int) -> None:
    if value <= 0:
        msg = f"{name} must be positive, got {value}"
        logger.warning(msg)
        raise InvalidArgumentError(msg)

def chunked(seq: Sequence[T], size: int) -> list[list[T]]:
    """
    Splits 'seq' into consecutive, non-overlapping chunks of 'size' elements.
    The last chunk holds whatever remains, so it may be shorter.
    E.g. chunked([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
    :param seq: The elements to split.
    :param size: The length of every chunk but the last.
    :return: A new list of chunks; empty for empty input.
    :raises InvalidArgumentError: If size <= 0.
    """
    _require_positive("size", size)
    return [list(chunk) for chunk in toolz.partition_all(size, seq)]

def chunked_by(seq: Sequence[T], pred: Callable[[T, T], bool]) -> list[list[T]]:
    """
    Splits 'seq' into runs decided pairwise.
    The first element opens the first run. Each following element is compared with the last element
    of the current run: pred(last, element) true appends it, false closes the run and opens a new one.
    This only groups equal neighbours if 'pred' says so, e.g.
        chunked_by([1, 2, 3, 2, 3, 4], lambda a, b: b == a + 1) == [[1, 2, 3], [2, 3, 4]]
    :param seq: The elements to split.
    :param pred: A callable (last element of the run, next element) -> bool.
    :return: A new list of runs; empty for empty input.
    """
    if len(seq) == 0:
        return []
    runs: list[list[T]] = []
    run = [seq[0]]
    for x in itertools.islice(seq, 1, None):
        if pred(run[-1], x):
            run.append(x)
        else:
            runs.append(run)
            run = [x]
    runs.append(run)
    return runs

def windowed(seq: Sequence[T], size: int, step: int = 1) -> list[list[T]]:
    """
    Slides a window of 'size' elements over 'seq', advancing by 'step'.
    Windows start at 0, step, 2*step, ... for as long as the start lies inside 'seq'; each one spans
    [start, min(start + size, len(seq))), so the windows near the end are shorter than 'size'.
    E.g. windowed(range(1, 11), 5, 3) == [[1, 2, 3, 4, 5], [4, 5, 6, 7, 8], [7, 8, 9, 10], [10]]
    With step > size the elements between windows are skipped.
    :param seq: The elements to window.
    :param size: The maximum window length.
    :param step: The distance between consecutive window starts.
    :return: A new list of ceil(len(seq) / step) windows; empty for empty input.
    :raises InvalidArgumentError: If size <= 0 or step <= 0.
    """
    _require_positive("size", size)
    _require_positive("step", step)
    return [list(itertools.islice(seq, start, start + size)) for start in range(0, len(seq), step)]

def take_while(seq: Sequence[T], pred: Pred[T]) -> list[T]:
    """Returns the longest prefix of 'seq' whose elements all satisfy 'pred'."""
    return list(itertools.takewhile(pred, seq))

def drop_while(seq: Sequence[T], pred: Pred[T]) -> list[T]:
    """Returns 'seq' without the prefix that take_while would return."""
    return list(itertools.dropwhile(pred, seq))

def _suffix_start(seq: Sequence[T], pred: Pred[T]) -> int:
    # index where the longest suffix satisfying pred begins
    return len(seq) - sum(1 for _ in itertools.takewhile(pred, reversed(seq)))

def take_last_while(seq: Sequence[T], pred: Pred[T]) -> list[T]:
    """Returns the longest suffix of 'seq' whose elements all satisfy 'pred'."""
    return list(itertools.islice(seq, _suffix_start(seq, pred), None))

def drop_last_while(seq: Sequence[T], pred: Pred[T]) -> list[T]:
    """Returns 'seq' without the suffix that take_last_while would return."""
    return list(itertools.islice(seq, _suffix_start(seq, pred)))
