"""
Tests for the mappings module.
"""

import pytest
from kollect.mappings import get_or_put, get_or_insert, items, transform_map, fold_items
from kollect.basetypes import Pair


class TestGetOrPut:
    def test_existing_key(self, dict_a1b2) -> None:
        assert get_or_put(dict_a1b2, "a", lambda: pytest.fail("compute called")) == 1
        assert dict_a1b2 == {"a": 1, "b": 2}

    def test_missing_key(self, dict_a1b2) -> None:
        assert get_or_put(dict_a1b2, "c", lambda: 3) == 3
        assert dict_a1b2 == {"a": 1, "b": 2, "c": 3}

    def test_stored_value_is_shared(self) -> None:
        table: dict[str, list[int]] = {}
        get_or_put(table, "xs", list).append(1)
        get_or_put(table, "xs", list).append(2)
        assert table == {"xs": [1, 2]}

    def test_failed_compute_leaves_key_absent(self) -> None:
        table: dict[str, int] = {}
        with pytest.raises(ZeroDivisionError):
            get_or_put(table, "x", lambda: 1 // 0)
        assert "x" not in table

    def test_get_or_insert_passes_key(self) -> None:
        table: dict[str, int] = {}
        assert get_or_insert(table, "four", len) == 4
        assert get_or_insert(table, "four", lambda k: pytest.fail("compute called")) == 4


def test_items(dict_a1b2) -> None:
    assert items(dict_a1b2) == [Pair("a", 1), Pair("b", 2)]
    assert items({}) == []

def test_transform_map(dict_a1b2) -> None:
    result = transform_map(dict_a1b2, lambda k, v: (k.upper(), v * 10, v > 1))
    assert result == {"B": 20}
    assert dict_a1b2 == {"a": 1, "b": 2}

def test_transform_map_collisions_keep_last() -> None:
    assert transform_map({"a": 1, "b": 2}, lambda k, v: ("k", v, True)) == {"k": 2}

def test_fold_items(dict_a1b2) -> None:
    assert fold_items(dict_a1b2, "", lambda acc, k, v: acc + f"{k}{v}") == "a1b2"
    assert fold_items({}, 7, lambda acc, k, v: pytest.fail("called")) == 7
