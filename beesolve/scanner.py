"""Whitespace-separated reader over a block of judge input text."""

import re

_WORD_PATTERN = re.compile(r"\s*(\S+)")
_NON_SPACE = re.compile(r"\S")


class Scanner:
    """Read words and lines from input text, front to back."""

    def __init__(self, text):
        self._text = text
        self._pos = 0

    def word(self):
        """Return the next whitespace-separated word."""
        match = _WORD_PATTERN.match(self._text, self._pos)
        if match is None:
            raise EOFError("no more input")
        self._pos = match.end()
        return match.group(1)

    def int(self):
        """Return the next word as an integer."""
        return int(self.word())

    def float(self):
        """Return the next word as a float."""
        return float(self.word())

    def ints(self, count):
        """Return the next ``count`` words as integers."""
        return [self.int() for _ in range(count)]

    def has_more(self):
        """Tell whether any word is left."""
        return _NON_SPACE.search(self._text, self._pos) is not None

    def lines(self):
        """Return the remaining lines, skipping the rest of a partly read line."""
        text = self._text
        if self._pos > 0 and text[self._pos - 1] != "\n":
            newline = text.find("\n", self._pos)
            self._pos = len(text) if newline == -1 else newline + 1
        remaining = text[self._pos:].splitlines()
        self._pos = len(text)
        return remaining