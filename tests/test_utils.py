"""
Utilities for testing properties.
"""

# tests/test_utils.py
from typing import Callable, Any

TestFn = Callable[[Any], bool]

def assert_prop(prop: TestFn, name: str = "") -> Callable[[Any], None]:
    """Create a test function that asserts a property holds"""
    def test(x: Any) -> None:
        assert prop(x), f"Property {name or prop.__name__} failed for input {x}"
    return test

# Property combinators
def and_then(prop1: TestFn, prop2: TestFn) -> TestFn:
    return lambda x: prop1(x) and prop2(x)


def flatten(chunks: list[list[Any]]) -> list[Any]:
    return [x for chunk in chunks for x in chunk]

def no_duplicates(xs: list[Any]) -> bool:
    return len(set(xs)) == len(xs)
