"""
Module dependencies:
    errors.py:
        no dependencies
    basetypes.py:
        depends on errors
        imports typing
        requires pydantic
    transform.py:
        depends on basetypes, errors
        imports functools
        requires toolz
    grouping.py:
        depends on basetypes
        imports builtins
        requires toolz
    segment.py:
        depends on basetypes, errors
        imports itertools, logging
        requires toolz
    combine.py:
        depends on basetypes
        imports builtins
    mappings.py:
        depends on basetypes
    memo.py:
        depends on basetypes
        imports logging
    supertypes.py:
        depends on basetypes, errors, transform, grouping, segment, combine
        requires pydantic_core

Requirements:
    pydantic
    pydantic_core
    toolz

Several functions deliberately share a name with a builtin (map, filter, all, any, zip);
import them qualified (kollect.map) or by name, not with a star import.
"""
from kollect.errors import KollectError, InvalidArgumentError, EmptyInputError
from kollect.basetypes import Pair
from kollect.transform import (
    map, map_indexed, filter, filter_indexed, filter_map, flat_map, flat_map_indexed,
    fold, fold_indexed, reduce, reduce_indexed,
)
from kollect.grouping import all, any, partition, distinct, distinct_by, group_by
from kollect.segment import (
    chunked, chunked_by, windowed, take_while, drop_while, take_last_while, drop_last_while,
)
from kollect.combine import zip, unzip
from kollect.mappings import get_or_put, get_or_insert, items, transform_map, fold_items
from kollect.memo import MemoTable
from kollect.supertypes import Seq
