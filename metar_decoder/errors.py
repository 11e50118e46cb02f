"""Errors raised when a report cannot be decoded."""
from __future__ import annotations

from typing import Tuple

__all__ = ["ParseError", "StructuralError", "UnexpectedTrailingInput", "FieldShapeError"]


class ParseError(ValueError):
    """Raised when a report cannot be decoded.

    Parameters
    ----------
    text
        The report being decoded.
    offset
        0-based character offset of the failure.
    element
        Name of the grammar element being matched at ``offset``.
    expected
        Names of every element that was attempted at ``offset``.
    """

    def __init__(
        self,
        text: str,
        offset: int,
        element: str,
        expected: Tuple[str, ...] = (),
    ) -> None:
        self.text = text
        self.offset = offset
        self.element = element
        self.expected = expected
        super().__init__(self._message())

    def _message(self) -> str:
        return f"cannot decode {self.element} at offset {self.offset}"

    def __str__(self) -> str:
        lines = [self._message(), self.text, " " * self.offset + "^"]
        if self.expected:
            lines.append("expected one of: " + ", ".join(self.expected))
        return "\n".join(lines)


class StructuralError(ParseError):
    """A required field (station, observation time) is missing or malformed."""


class UnexpectedTrailingInput(ParseError):
    """Every field was attempted but input remains before the end of the report."""

    def _message(self) -> str:
        return f"unexpected input at offset {self.offset}"


class FieldShapeError(ParseError):
    """A field whose prefix was unambiguously consumed does not follow its grammar."""
