"""Pure integer routines behind the ``fibonacci``, ``prime``, ``hcf`` and ``lcm`` keys.

Values arrive straight from decoded JSON, so "integer" means a JSON number
with no fractional part: ``5`` and ``5.0`` are accepted, ``True`` and
``"5"`` are not.
"""
import math
from collections.abc import Sequence
from functools import reduce
from typing import Any

from app.core.errors import InvalidArgumentError


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


MAX_FIBONACCI_TERMS = 10000


def fibonacci(n: Any, max_terms: int = MAX_FIBONACCI_TERMS) -> list[int]:
    count = _as_int(n)
    if count is None or count < 0:
        raise InvalidArgumentError("Input must be a non-negative integer")
    if count > max_terms:
        raise InvalidArgumentError(f"Input must not exceed {max_terms} terms")
    if count == 0:
        return []
    if count == 1:
        return [0]

    series = [0, 1]
    for i in range(2, count):
        series.append(series[i - 1] + series[i - 2])
    return series


def is_prime(x: int) -> bool:
    if x < 2:
        return False
    if x == 2:
        return True
    if x % 2 == 0:
        return False
    for divisor in range(3, math.isqrt(x) + 1, 2):
        if x % divisor == 0:
            return False
    return True


def filter_primes(values: Any) -> list[int]:
    if not _is_sequence(values):
        raise InvalidArgumentError("Input must be an array")

    primes = []
    for value in values:
        number = _as_int(value)
        if number is None:
            raise InvalidArgumentError("All elements must be integers")
        if is_prime(number):
            primes.append(number)
    return primes


def gcd(a: int, b: int) -> int:
    return a if b == 0 else gcd(b, a % b)


def _positive_ints(values: Any) -> list[int]:
    if not _is_sequence(values) or len(values) == 0:
        raise InvalidArgumentError("Input must be a non-empty array")

    numbers = []
    for value in values:
        number = _as_int(value)
        if number is None or number <= 0:
            raise InvalidArgumentError("All elements must be positive integers")
        numbers.append(number)
    return numbers


def hcf(values: Any) -> int:
    return reduce(gcd, _positive_ints(values))


def lcm(values: Any) -> int:
    # Python ints are unbounded, so a * b never overflows.
    return reduce(lambda a, b: a * b // gcd(a, b), _positive_ints(values))
