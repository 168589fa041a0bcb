"""Solutions for problems numbered 2201 to 2800."""

PASCAL_ROWS = 32
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 32
BOX_WIDTH = 432
BOX_HEIGHT = 468


def pascal_sum(n):
    """Return 2**n - 1 for n from 0 to 31."""
    if not 0 <= n < PASCAL_ROWS:
        raise ValueError(f"n must be in 0..{PASCAL_ROWS - 1}, got {n}")
    return (1 << n) - 1


def is_valid_password(text):
    """Check length, ASCII letters and digits only, and one of each kind."""
    if not PASSWORD_MIN_LENGTH <= len(text) <= PASSWORD_MAX_LENGTH:
        return False
    if not all(char.isascii() and char.isalnum() for char in text):
        return False
    return (
        any(char.isupper() for char in text)
        and any(char.islower() for char in text)
        and any(char.isdigit() for char in text)
    )


def check_overflow(limit, p, op, q):
    """Return 'OK' if p op q fits in limit, else 'OVERFLOW'."""
    result = p + q if op == "+" else p * q
    return "OK" if limit >= result else "OVERFLOW"


def pressure_difference(n, m):
    """Return n minus m."""
    return n - m


def inside_box(x, y):
    """Tell whether the point lies in the 432 by 468 rectangle."""
    return 0 <= x <= BOX_WIDTH and 0 <= y <= BOX_HEIGHT


def remaining_queue(queue, leaving):
    """Return the queue without anyone who left, keeping its order."""
    gone = set(leaving)
    return [person for person in queue if person not in gone]


def count_distinct(words):
    """Return the number of distinct words."""
    return len(set(words))