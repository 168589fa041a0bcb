"""Solutions for problems numbered 1201 to 1400."""

import math
from collections import Counter

CARRY_DIGITS = 9


def count_carries(a, b):
    """Count carry operations when adding a and b over their low nine digits."""
    carry = 0
    total = 0
    for _ in range(CARRY_DIGITS):
        a, digit_a = divmod(a, 10)
        b, digit_b = divmod(b, 10)
        carry = 1 if digit_a + digit_b + carry >= 10 else 0
        total += carry
    return total


def _is_letter(char):
    return char.isascii() and char.isalpha()


def dictionary_words(lines):
    """Return the sorted distinct lowercase words found in the lines.

    A word counts once a non-letter follows it on its line.
    """
    words = set()
    for line in lines:
        current = []
        for char in line:
            if _is_letter(char):
                current.append(char.lower())
            elif current:
                words.add("".join(current))
                current = []
    return sorted(words)


def is_prime(x):
    """Tell whether no number from 2 to sqrt(x) divides x."""
    if x < 0:
        raise ValueError("x must not be negative")
    return all(x % divisor for divisor in range(2, math.isqrt(x) + 1))


def sort_by_length(words):
    """Order words longest first, keeping the input order among equals."""
    return sorted(words, key=len, reverse=True)


def count_matched_pairs(boots):
    """Count pairs of one left ('E') and one right boot of the same size."""
    pending = Counter()
    pairs = 0
    for size, side in boots:
        side = "E" if side == "E" else "D"
        other = "D" if side == "E" else "E"
        if pending[size, other]:
            pending[size, other] -= 1
            pairs += 1
        else:
            pending[size, side] += 1
    return pairs


def caesar_decode(text, shift):
    """Shift every uppercase letter back by ``shift``, wrapping past 'A'."""
    decoded = []
    for char in text:
        code = ord(char) - shift
        if code < ord("A"):
            code += 26
        decoded.append(chr(code))
    return "".join(decoded)


def anyone_attended_all(rows):
    """Tell whether some column is non-zero in every row."""
    return any(all(column) for column in zip(*rows))


def count_squares(n):
    """Count squares of every size in an n by n grid."""
    if n < 1:
        raise ValueError("n must be positive")
    return sum(size * size for size in range(1, n + 1))


def head_tail_tally(results):
    """Return (Mary's wins, John's wins); a 0 is a win for Mary."""
    results = list(results)
    mary = sum(1 for result in results if result == 0)
    return mary, len(results) - mary


def count_frames(sticks):
    """Count frames from (length, count) stick groups, four sticks a frame."""
    usable = sum(count - count % 2 for _, count in sticks)
    return usable // 4


def score_rounds(rounds):
    """Return how many rounds each side won; ties count for nobody."""
    first = second = 0
    for x, y in rounds:
        if x > y:
            first += 1
        elif x < y:
            second += 1
    return first, second