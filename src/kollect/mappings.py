"""
Helpers over key-value mappings.

Contains:
    get_or_put          (mapping: MutableMapping[KT, VT], key: KT, compute: Callable[[], VT]) -> VT
    get_or_insert       (mapping: MutableMapping[KT, VT], key: KT, compute: Callable[[KT], VT]) -> VT
    items               (mapping: Mapping[KT, VT]) -> list[Pair[KT, VT]]
    transform_map       (mapping: Mapping[KT, VT], f: Callable[[KT, VT], tuple[X, Y, bool]]) -> dict[X, Y]
    fold_items          (mapping: Mapping[KT, VT], initial: R, f: Callable[[R, KT, VT], R]) -> R
"""
from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping

from kollect.basetypes import KT, VT, X, Y, R, Pair


def get_or_put(mapping: MutableMapping[KT, VT], key: KT, compute: Callable[[], VT]) -> VT:
    """
    Returns mapping[key], first storing compute() under 'key' if it is missing.
    'compute' is not called when the key is present. If it raises, the mapping is left unchanged.
    :param mapping: The mapping to read from and insert into.
    :param key: The key to look up.
    :param compute: Produces the value for a missing key.
    :return: The stored value.
    """
    if key in mapping:
        return mapping[key]
    value = compute()
    mapping[key] = value
    return value

def get_or_insert(mapping: MutableMapping[KT, VT], key: KT, compute: Callable[[KT], VT]) -> VT:
    """
    Same as get_or_put, except 'compute' receives the missing key.
    """
    return get_or_put(mapping, key, lambda: compute(key))

def items(mapping: Mapping[KT, VT]) -> list[Pair[KT, VT]]:
    """
    Lists the entries of 'mapping' as pairs, in the mapping's iteration order.
    """
    return [Pair(k, v) for k, v in mapping.items()]

def transform_map(mapping: Mapping[KT, VT], f: Callable[[KT, VT], tuple[X, Y, bool]]) -> dict[X, Y]:
    """
    Builds a new dict by passing every entry through 'f'.
    f(key, value) returns (new key, new value, keep); entries with a falsy keep are dropped.
    When two entries map to the same new key, the later one wins.
    :param mapping: The source mapping, left untouched.
    :param f: The entry transformer.
    :return: The transformed dict.
    """
    result: dict[X, Y] = {}
    for k, v in mapping.items():
        new_key, new_value, keep = f(k, v)
        if keep:
            result[new_key] = new_value
    return result

def fold_items(mapping: Mapping[KT, VT], initial: R, f: Callable[[R, KT, VT], R]) -> R:
    acc = initial
    for k, v in mapping.items():
        acc = f(acc, k, v)
    return acc
