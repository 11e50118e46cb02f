"""Read cursor and primitive token recognizers.

Every recognizer either matches completely and advances the cursor, or
returns ``None`` (``False`` for the boolean ones) and leaves the position
where it was. Composite parsers are run through :meth:`Cursor.attempt`,
which restores the saved position whenever the parser reports no match, so
a malformed group never leaves a partially consumed report behind.
"""
from __future__ import annotations

import string
from typing import Callable, Dict, Final, Iterable, List, Optional, Tuple, TypeVar

__all__ = ["Cursor", "Parser", "keyword", "DIGITS", "UPPER", "ALNUM"]

T = TypeVar("T")

DIGITS: Final[str] = string.digits
UPPER: Final[str] = string.ascii_uppercase
ALNUM: Final[str] = UPPER + DIGITS

# Characters that may follow a complete token.
BOUNDARY: Final[str] = " ="

Parser = Callable[["Cursor"], Optional[T]]


class Cursor:
    """Position over an immutable report string."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        # offset -> names of the elements that failed to match there
        self._failures: Dict[int, List[str]] = {}

    # ------------------------------------------------------------------
    # Position queries
    # ------------------------------------------------------------------
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def at_boundary(self) -> bool:
        """True at the end of input or before a separator."""
        return self.at_end() or self.text[self.pos] in BOUNDARY

    def peek(self, count: int = 1) -> str:
        return self.text[self.pos : self.pos + count]

    # ------------------------------------------------------------------
    # Primitive recognizers
    # ------------------------------------------------------------------
    def literal(self, word: str) -> bool:
        if self.text.startswith(word, self.pos):
            self.pos += len(word)
            return True
        return False

    def one_of(self, words: Iterable[str]) -> Optional[str]:
        """Match the first of ``words`` present; list longer words first."""
        for word in words:
            if self.literal(word):
                return word
        return None

    def chars(self, *classes: str) -> Optional[str]:
        """Match one character from each class in turn.

        ``cursor.chars("012", DIGITS)`` matches ``00``-``29``.
        """
        end = self.pos + len(classes)
        chunk = self.text[self.pos : end]
        if len(chunk) != len(classes):
            return None
        for char, allowed in zip(chunk, classes):
            if char not in allowed:
                return None
        self.pos = end
        return chunk

    def digits(self, count: int) -> Optional[str]:
        return self.chars(*([DIGITS] * count))

    def letters(self, count: int) -> Optional[str]:
        return self.chars(*([UPPER] * count))

    def digit_run(self, minimum: int, maximum: int) -> Optional[str]:
        """Greedily match between ``minimum`` and ``maximum`` digits."""
        end = self.pos
        while end < len(self.text) and end - self.pos < maximum and self.text[end] in DIGITS:
            end += 1
        if end - self.pos < minimum:
            return None
        run = self.text[self.pos : end]
        self.pos = end
        return run

    def slashes(self, count: int) -> bool:
        """Match the missing-data spelling of a ``count`` wide field."""
        return self.literal("/" * count)

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------
    def attempt(self, parser: Parser[T], name: str) -> Optional[T]:
        """Run ``parser``; on no match restore the position and record ``name``."""
        start = self.pos
        result = parser(self)
        if result is None:
            self.pos = start
            self._failures.setdefault(start, []).append(name)
        return result

    def token(self, parser: Parser[T], name: str) -> Optional[T]:
        """Match a space, then ``parser``, then a token boundary, atomically."""

        def spaced(cursor: Cursor) -> Optional[T]:
            if not cursor.literal(" "):
                return None
            result = parser(cursor)
            if result is None or not cursor.at_boundary():
                return None
            return result

        return self.attempt(spaced, name)

    def repeat(self, parser: Parser[T], name: str, spaced: bool = True) -> Tuple[T, ...]:
        """Match ``parser`` zero or more times, stopping at the first failure."""
        items: List[T] = []
        while True:
            start = self.pos
            item = self.token(parser, name) if spaced else self.attempt(parser, name)
            if item is None:
                break
            if self.pos == start:
                break
            items.append(item)
        return tuple(items)

    def choice(self, *parsers: Parser[T]) -> Optional[T]:
        """Return the result of the first parser that matches."""
        start = self.pos
        for parser in parsers:
            result = parser(self)
            if result is not None:
                return result
            self.pos = start
        return None

    def followed_by(self, parser: Parser[T]) -> bool:
        """Look ahead without consuming anything."""
        start = self.pos
        try:
            return parser(self) is not None
        finally:
            self.pos = start

    def expected_at(self, offset: int) -> Tuple[str, ...]:
        """Names of the elements that failed at ``offset``, first attempt first."""
        return tuple(dict.fromkeys(self._failures.get(offset, [])))


def keyword(word: str) -> Parser[bool]:
    """Parser for a fixed literal that yields ``True`` when present."""

    def parse(cursor: Cursor) -> Optional[bool]:
        return True if cursor.literal(word) else None

    return parse
