"""
Test configuration and fixtures.
"""

# tests/conftest.py
import pytest
from typing import TypeVar, Callable

T = TypeVar('T')

def fixture(obj: T) -> Callable[[], T]:
    @pytest.fixture
    def _fixture() -> T:
        # hand each test its own copy so in-place mutation cannot leak between tests
        return obj.copy() if hasattr(obj, 'copy') else obj
    return _fixture

# Common test objects that will be available to all tests
test_objects = {
    "one_to_nine": [1, 2, 3, 4, 5, 6, 7, 8, 9],
    "one_to_ten": list(range(1, 11)),
    "empty_list": [],
    "single": [5],
    "runs": [10, 20, 30, 40, 31, 31, 33, 34, 21, 22, 23, 24, 11, 12, 13, 14],
    "fruits": ["a", "apricot", "banana", "avocado"],
    "dict_a1b2": {"a": 1, "b": 2},
}

# Register fixtures globally
globals().update({
    name: fixture(obj)
    for name, obj in test_objects.items()
})
