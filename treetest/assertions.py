"""expect() and the same-value comparison behind it.

`to_be` does not use `==`. It follows same-value semantics: nan is the
same as nan, 0.0 and -0.0 are different, True is not 1, and containers
or other objects are only the same when they are the same object.
"""
from typing import Any, Generic, TypeVar
import json
import math

from .errors import TestAssertionError

T = TypeVar("T")

# Largest integer a double holds exactly; bigger ints get the "n" marker.
MAX_SAFE_INTEGER = 2 ** 53 - 1

_VALUE_TYPES = (str, bytes, type(None))


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _is_nan(v: Any) -> bool:
    return isinstance(v, float) and math.isnan(v)


def _sign(v: Any) -> float:
    return math.copysign(1.0, v) if isinstance(v, float) else 1.0


def same_value(a: Any, b: Any) -> bool:
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b

    if _is_number(a) and _is_number(b):
        if _is_nan(a) or _is_nan(b):
            return _is_nan(a) and _is_nan(b)
        if a == 0 and b == 0:
            return _sign(a) == _sign(b)
        # int vs float compares exactly, without converting the int
        return a == b

    if isinstance(a, _VALUE_TYPES) and isinstance(b, _VALUE_TYPES):
        return type(a) is type(b) and a == b

    return a is b


def render_value(v: Any) -> str:
    """Stable text for `v` in failure messages; never raises."""
    try:
        if isinstance(v, str):
            return json.dumps(v, ensure_ascii=False)
        if isinstance(v, int) and not isinstance(v, bool) and abs(v) > MAX_SAFE_INTEGER:
            return f"{v}n"
        return json.dumps(v, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(v)


class Expectation(Generic[T]):
    """Matchers bound to one actual value."""

    def __init__(self, actual: T):
        self.actual = actual

    def to_be(self, expected: T) -> None:
        if not same_value(self.actual, expected):
            raise TestAssertionError(
                f"Expected {render_value(self.actual)} to be {render_value(expected)}"
            )

    toBe = to_be


def expect(actual: T) -> Expectation[T]:
    """
    Start an assertion on `actual`.

        expect(2 + 3).to_be(5)
    """
    return Expectation(actual)
