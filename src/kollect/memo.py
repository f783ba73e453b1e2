"""
A get-or-compute table for memoizing expensive values.

Contains:
    class MemoTable(Generic[KT, VT])
        get_or_put          (self, key: KT, compute: Callable[[], VT]) -> VT
        get                 (self, key: KT, default: Any = None) -> VT | Any
        keys, values, items (self) -> list
"""
from __future__ import annotations

import logging

from typing import Any, Generic

from collections.abc import Callable, Iterator, Mapping

from kollect.basetypes import KT, VT

logger = logging.getLogger(__name__)


class MemoTable(Generic[KT, VT]):
    """
    Key-value store that only grows through get_or_put.
    For a given key, the compute callback handed to get_or_put runs at most once over the table's
    lifetime; later calls return the stored value, even when they pass a different callback.
    Entries are never updated or removed.

    Not thread-safe: the membership check and the insert are separate steps, so concurrent callers
    must hold their own lock around get_or_put to keep the at-most-once guarantee.
    """
    def __init__(self, items: Mapping[KT, VT] | None = None) -> None:
        self._data: dict[KT, VT] = dict(items) if items is not None else {}

    def get_or_put(self, key: KT, compute: Callable[[], VT]) -> VT:
        """
        Returns the value stored under 'key', computing and storing it first if absent.
        :param key: A hashable key.
        :param compute: Called with no arguments, only on a miss. Exceptions propagate and leave the key absent.
        :returns: The stored value.
        """
        if key in self._data:
            return self._data[key]
        logger.debug(f"MemoTable miss for key {key!r}")
        value = compute()
        # first stored value wins when compute re-entered get_or_put for the same key
        return self._data.setdefault(key, value)

    def get(self, key: KT, default: Any = None) -> VT | Any:
        return self._data.get(key, default)

    def __getitem__(self, key: KT) -> VT:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[KT]:
        return iter(self._data)

    def keys(self) -> list[KT]:
        return list(self._data.keys())

    def values(self) -> list[VT]:
        return list(self._data.values())

    def items(self) -> list[tuple[KT, VT]]:
        return list(self._data.items())

    def __repr__(self) -> str:
        return f"MemoTable({self._data!r})"
