"""
evaluator.py — Factorial evaluation
====================================
Recursive factorial plus the per-number result record used for output.

Results are exact Python integers. Each one also carries the value a C `int`
would hold after silent 32-bit overflow, so the caller can print either.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

import numpy as np

# ── Config ────────────────────────────────────────────────────────────────────
MAX_DEPTH = 500         # largest n evaluated; one stack frame per step

INT32_MIN = int(np.iinfo(np.int32).min)
INT32_MAX = int(np.iinfo(np.int32).max)

EXACT = "exact"
OVERFLOWED = "overflowed"
UNDEFINED = "undefined"


class FactorialError(ValueError):
    """Raised when n! cannot be computed for the given input."""


class NegativeInputError(FactorialError):
    """Factorial is not defined for negative numbers."""


class RecursionBoundError(FactorialError):
    """Input is larger than the configured recursion depth."""


def factorial(n: int, max_depth: int = MAX_DEPTH) -> int:
    """
    Computes n! by direct recursion: n! = n * (n-1)!, with 0! = 1! = 1.
    """
    if n < 0:
        raise NegativeInputError(f"factorial is not defined for negative numbers: {n}")
    if n > max_depth:
        raise RecursionBoundError(f"{n} exceeds the maximum recursion depth of {max_depth}")
    if n == 0 or n == 1:
        return 1
    return n * factorial(n - 1, max_depth)


def wrap_int32(value: int) -> int:
    """Reduce an integer to what a signed 32-bit C int holds after overflow."""
    low_bits = np.array(value % 2**32, dtype=np.uint64)
    return int(low_bits.astype(np.int32))


@dataclass(frozen=True)
class FactorialResult:
    number: int
    value: Optional[int]
    kind: str
    reason: str = ""

    @property
    def wrapped(self) -> Optional[int]:
        if self.value is None:
            return None
        return wrap_int32(self.value)

    @property
    def is_defined(self) -> bool:
        return self.kind != UNDEFINED

    def format(self, wrap: bool = False) -> str:
        if not self.is_defined:
            shown = UNDEFINED
        elif wrap:
            shown = self.wrapped
        else:
            shown = self.value
        return f"{self.number}! = {shown}"


def evaluate(n: int, max_depth: int = MAX_DEPTH) -> FactorialResult:
    """Evaluate n! into a result record. Errors become UNDEFINED results."""
    try:
        value = factorial(n, max_depth)
    except FactorialError as e:
        return FactorialResult(n, None, UNDEFINED, str(e))

    if INT32_MIN <= value <= INT32_MAX:
        return FactorialResult(n, value, EXACT)
    return FactorialResult(n, value, OVERFLOWED, f"{n}! does not fit in a 32-bit integer")


def evaluate_all(numbers: Iterable[int], max_depth: int = MAX_DEPTH) -> Iterator[FactorialResult]:
    for n in numbers:
        yield evaluate(n, max_depth)
