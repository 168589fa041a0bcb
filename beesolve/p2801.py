"""Solutions for problems numbered 2801 to 3400."""

import math
from itertools import islice

HOUR_DEGREES = 30
MINUTE_DEGREES = 6
_VOWELS = frozenset("aeiouAEIOU")


def _non_fibonacci():
    low, high = 1, 2
    while True:
        yield from range(low + 1, high)
        low, high = high, low + high


def nth_non_fibonacci(k):
    """Return the k-th positive integer that is not a Fibonacci number."""
    if k < 1:
        raise ValueError("k must be positive")
    return next(islice(_non_fibonacci(), k - 1, None))


def digit_count(n, m):
    """Return the number of decimal digits of n**m, via logarithms."""
    if n <= 0:
        raise ValueError("n must be positive")
    return math.floor(m * math.log10(n)) + 1


def clock_reading(hour_angle, minute_angle):
    """Return 'HH:MM' shown by hands at the given angles in degrees."""
    if hour_angle < 0 or minute_angle < 0:
        raise ValueError("angles must not be negative")
    hours = hour_angle // HOUR_DEGREES
    minutes = minute_angle // MINUTE_DEGREES
    return f"{hours:02d}:{minutes:02d}"


def middle_earth_safe(h, e, a, o, w, x):
    """Tell whether the free peoples outnumber the orcs and wargs."""
    return h + e + a + x > o + w


def elevator_presses(floors, start, goal, up, down):
    """Return the button presses to reach goal, or None if it cannot be reached."""
    floor = start
    visited = set()
    presses = 0
    while True:
        if floor == goal:
            return presses
        if floor <= 0 or floor > floors or floor in visited:
            return None
        visited.add(floor)
        if floor < goal:
            presses += 1
            floor += up
        if floor > goal:
            presses += 1
            floor -= down


def is_unlucky(text):
    """Tell whether the text holds the digits '13' side by side."""
    return "13" in text


def _is_consonant(char):
    return char not in _VOWELS


def is_easy(word):
    """Tell whether the word has no three consonants in a row."""
    return not any(
        all(map(_is_consonant, triple))
        for triple in zip(word, word[1:], word[2:])
    )