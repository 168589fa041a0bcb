"""Solutions for problems numbered 1001 to 1200."""

import math
import struct
from collections import Counter
from typing import NamedTuple

FIB_LIMIT = 40
SEQUENCE_LIMIT = 10000
MAX_OCCURRENCE_VALUE = 2000


class FibCalls(NamedTuple):
    """Number of recursive calls made and the Fibonacci value reached."""

    calls: int
    value: int


def _fib_table():
    table = [FibCalls(0, 0), FibCalls(0, 1)]
    while len(table) < FIB_LIMIT:
        before, last = table[-2], table[-1]
        table.append(
            FibCalls(2 + before.calls + last.calls, before.value + last.value)
        )
    return tuple(table)


_FIB_TABLE = _fib_table()


def fib_calls(x):
    """Return the calls a naive recursive fib(x) makes, and its value."""
    if not 0 <= x < FIB_LIMIT:
        raise ValueError(f"x must be in 0..{FIB_LIMIT - 1}, got {x}")
    return _FIB_TABLE[x]


def game_duration(hi, mi, hf, mf):
    """Return (hours, minutes) of a game; equal start and end means 24 hours."""
    hours = hf - hi
    minutes = mf - mi
    if minutes < 0:
        minutes += 60
        hours -= 1
    if hours < 0:
        hours += 24
    if hours == 0 and minutes == 0:
        hours = 24
    return hours, minutes


def count_diamonds(text):
    """Count '<' ... '>' pairs that can be matched in order."""
    open_count = 0
    diamonds = 0
    for char in text:
        if char == "<":
            open_count += 1
        elif char == ">" and open_count:
            open_count -= 1
            diamonds += 1
    return diamonds


def remainder_sequence(step):
    """Return 2, 2 + step, 2 + 2*step, ... up to 10000."""
    if step <= 0:
        raise ValueError("step must be positive")
    return list(range(2, SEQUENCE_LIMIT + 1, step))


def count_peaks(heights):
    """Count points of a circular profile that are strict peaks or valleys."""
    heights = list(heights)
    if not heights:
        return 0
    previous = heights[-1:] + heights[:-1]
    following = heights[1:] + heights[:1]
    return sum(
        1
        for before, here, after in zip(previous, heights, following)
        if (here > before and here > after) or (here < before and here < after)
    )


def minutes_until(h1, m1, h2, m2):
    """Return minutes from h1:m1 forward to h2:m2 on a 24-hour clock."""
    start = h1 * 60 + m1
    end = h2 * 60 + m2
    if start <= end:
        return end - start
    return end - start + 24 * 60


def can_call_all(n, balls):
    """Tell whether differences of balls cover every number from 0 to n."""
    balls = list(balls)
    reached = {0}
    reached.update(
        abs(first - second)
        for index, first in enumerate(balls)
        for second in balls[index + 1:]
    )
    return all(number in reached for number in range(n + 1))


def _as_single(value):
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError as exc:
        raise ValueError(f"amount out of range: {value}") from exc


def days_to_consume(amount):
    """Count halvings of a single-precision amount until it is at most 1."""
    remaining = _as_single(amount)
    if math.isinf(remaining):
        raise ValueError("amount must be finite")
    days = 0
    while remaining > 1:
        days += 1
        remaining /= 2
    return days


def count_occurrences(numbers):
    """Return sorted (number, count) pairs for numbers from 1 to 2000."""
    counts = Counter(numbers)
    for number in counts:
        if not 0 <= number <= MAX_OCCURRENCE_VALUE:
            raise ValueError(f"number out of range: {number}")
    return sorted(
        (number, count) for number, count in counts.items() if number >= 1
    )