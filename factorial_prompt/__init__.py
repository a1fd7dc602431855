"""Interactive factorial calculator: collect numbers from stdin, print n! for each."""

from factorial_prompt.collector import NumbersBuffer, coerce_int, collect_numbers, is_sentinel
from factorial_prompt.evaluator import (
    FactorialError,
    FactorialResult,
    NegativeInputError,
    RecursionBoundError,
    evaluate,
    evaluate_all,
    factorial,
    wrap_int32,
)

__version__ = "1.0.0"
