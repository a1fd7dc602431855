"""
collector.py — Input collection
================================
Prompts for numbers one at a time and stores them in a bounded buffer.

Collection stops when:
  - a token starting with 'q' or 'Q' is entered (the token is discarded)
  - the buffer reaches its capacity (no further prompt is shown)
  - standard input is exhausted
"""

import re
import sys

# ── Config ────────────────────────────────────────────────────────────────────
MAX_SIZE = 100          # numbers accepted per run
MAX_TOKEN_LENGTH = 9    # characters kept from each token
SENTINELS = ("q", "Q")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


class NumbersBuffer:
    """Ordered list of collected numbers that never grows past its capacity."""

    def __init__(self, capacity: int = MAX_SIZE):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._numbers = []

    def append(self, number: int):
        if self.is_full():
            raise OverflowError(f"buffer already holds {self.capacity} numbers")
        self._numbers.append(number)

    def is_full(self) -> bool:
        return len(self._numbers) >= self.capacity

    def __len__(self):
        return len(self._numbers)

    def __iter__(self):
        return iter(self._numbers)

    def __repr__(self):
        return f"NumbersBuffer({self._numbers!r}, capacity={self.capacity})"


# ── Token helpers ─────────────────────────────────────────────────────────────
def read_tokens(stream):
    """Yield whitespace-delimited tokens, reading one line only when needed."""
    for line in stream:
        yield from line.split()


def is_sentinel(token: str) -> bool:
    return token[:1] in SENTINELS


def truncate_token(token: str, limit: int = MAX_TOKEN_LENGTH) -> str:
    return token[:limit]


def coerce_int(token: str) -> int:
    """
    Lenient integer conversion: parse the leading digits (with an optional sign)
    and return 0 when there are none. Never raises.

        coerce_int("42")   -> 42
        coerce_int("-7x")  -> -7
        coerce_int("abc")  -> 0
    """
    match = _LEADING_INT.match(token)
    if match is None:
        return 0
    return int(match.group(1))


# ── Collection loop ───────────────────────────────────────────────────────────
def collect_numbers(stream=None, out=None, capacity: int = MAX_SIZE) -> NumbersBuffer:
    """
    Prompt for numbers until the sentinel, end of input, or `capacity` entries.
    Returns the filled buffer in entry order.
    """
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out

    numbers = NumbersBuffer(capacity)
    tokens = read_tokens(stream)

    while not numbers.is_full():
        print(f"Number {len(numbers) + 1}: ", end="", file=out, flush=True)
        token = next(tokens, None)

        # End of input behaves like the quit sentinel
        if token is None or is_sentinel(token):
            break

        numbers.append(coerce_int(truncate_token(token)))

    return numbers
