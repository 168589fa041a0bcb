import pytest

from beesolve.scanner import Scanner


def test_words_in_order():
    scanner = Scanner("a bb\n  ccc\t")
    assert [scanner.word(), scanner.word(), scanner.word()] == ["a", "bb", "ccc"]


def test_int_and_negative():
    scanner = Scanner("12 -3")
    assert scanner.int() == 12
    assert scanner.int() == -3


def test_float_token():
    assert Scanner(" 2.5 ").float() == 2.5


def test_ints_reads_count():
    scanner = Scanner("4 5 6 7")
    assert scanner.ints(3) == [4, 5, 6]
    assert scanner.int() == 7


def test_has_more_tracks_consumption():
    scanner = Scanner("x  \n ")
    assert scanner.has_more() is True
    scanner.word()
    assert scanner.has_more() is False


def test_whitespace_only_has_nothing():
    assert Scanner(" \n\t ").has_more() is False


def test_exhausted_raises_eof():
    scanner = Scanner("one")
    scanner.word()
    with pytest.raises(EOFError):
        scanner.word()


def test_bad_int_raises_value_error():
    with pytest.raises(ValueError):
        Scanner("abc").int()


def test_lines_after_token_skip_rest_of_line():
    scanner = Scanner("2\nhello world\nfoo bar\n")
    assert scanner.int() == 2
    assert scanner.lines() == ["hello world", "foo bar"]
    assert scanner.has_more() is False


def test_lines_from_start():
    assert Scanner("a b\nc\n").lines() == ["a b", "c"]