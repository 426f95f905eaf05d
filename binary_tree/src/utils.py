from collections.abc import Callable, Iterable
from typing import Any


type Compare[T] = Callable[[T, T], int]


def natural_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def goes_left[T](compare: Compare[T], value: T, node_value: T) -> bool:
    # ties go left, for insert and lookup alike
    return compare(value, node_value) <= 0


def join_values(values: Iterable[Any], sep: str = " ") -> str:
    return sep.join(str(v) for v in values)
