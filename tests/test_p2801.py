import pytest

from beesolve.p2801 import (
    clock_reading,
    digit_count,
    elevator_presses,
    is_easy,
    is_unlucky,
    middle_earth_safe,
    nth_non_fibonacci,
)


def _fibonacci_set(limit):
    numbers = {0, 1}
    a, b = 1, 2
    while a <= limit:
        numbers.add(a)
        a, b = b, a + b
    return numbers


def test_first_non_fibonacci():
    assert nth_non_fibonacci(1) == 4


def test_non_fibonacci_sequence_properties():
    values = [nth_non_fibonacci(k) for k in range(1, 60)]
    fib = _fibonacci_set(max(values))
    assert all(value not in fib for value in values)
    assert values == sorted(set(values))
    between = [v for v in range(values[0], values[-1] + 1) if v not in fib]
    assert between == values


def test_non_fibonacci_rejects_zero():
    with pytest.raises(ValueError):
        nth_non_fibonacci(0)


@pytest.mark.parametrize("n, m", [(2, 10), (3, 5), (7, 3), (12, 4), (5, 1), (10, 3)])
def test_digit_count_matches_decimal_length(n, m):
    assert digit_count(n, m) == len(str(n**m))


def test_digit_count_rejects_zero_base():
    with pytest.raises(ValueError):
        digit_count(0, 3)


def test_clock_reading_round_trip():
    for hours in range(12):
        for minutes in range(60):
            expected = f"{hours:02d}:{minutes:02d}"
            assert clock_reading(hours * 30, minutes * 6) == expected


def test_clock_reading_rounds_down_within_step():
    assert clock_reading(3 * 30 + 29, 7 * 6 + 5) == clock_reading(3 * 30, 7 * 6)


def test_clock_reading_negative():
    with pytest.raises(ValueError):
        clock_reading(-30, 0)


def test_middle_earth():
    assert middle_earth_safe(1, 1, 1, 1, 1, 0) is True
    assert middle_earth_safe(1, 1, 1, 2, 1, 0) is False
    assert middle_earth_safe(0, 0, 0, 0, 0, 0) is False


def test_elevator_sample():
    assert elevator_presses(10, 1, 10, 2, 1) == 6


def test_elevator_already_there():
    assert elevator_presses(5, 3, 3, 1, 1) == 0


def test_elevator_unreachable():
    assert elevator_presses(100, 2, 1, 1, 0) is None


def test_elevator_leaves_building():
    assert elevator_presses(5, 1, 4, 10, 1) is None
    assert elevator_presses(5, 4, 1, 1, 10) is None


def test_is_unlucky():
    assert is_unlucky("4136") is True
    assert is_unlucky("31") is False
    assert is_unlucky("1") is False


def test_is_easy():
    assert is_easy("casa") is True
    assert is_easy("strong") is False
    assert is_easy("ab") is True
    assert is_easy("AbC") is True