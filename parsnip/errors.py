# parsnip/errors.py
"""Failure taxonomy.

Every user-input failure is a `ParseError`. Only `SyntaxMismatch` is
recovered by the backtracking combinators; the numeric and arithmetic
failures are semantic and always reach the caller.
"""

from __future__ import annotations
from typing import Optional


def prefix(text: str, pos: int = 0, n: int = 10) -> str:
    """Short excerpt of the input used in diagnostics."""
    return text[pos:pos + n]


class ParseError(Exception):
    def __init__(self, msg: str, pos: Optional[int] = None):
        super().__init__(msg)
        self.msg = msg
        self.pos = pos

    def __str__(self) -> str:
        return self.msg


class SyntaxMismatch(ParseError, SyntaxError):
    """A literal, character class or sub-grammar did not match here."""


class TrailingData(ParseError, SyntaxError):
    def __init__(self, rest: str, pos: Optional[int] = None):
        super().__init__(f"Trailing data: {rest}", pos)
        self.rest = rest


class NumericConversionFailure(ParseError, ValueError):
    """Digits outside the integer range, or a negative exponent."""


class ArithmeticFailure(ParseError, ArithmeticError):
    """Division by zero or overflow while folding an expression."""


class StructuralMismatch(ParseError, TypeError):
    """Conversion-time shape error (non-string key, bare pair)."""


class GrammarError(RuntimeError):
    """The grammar itself is broken (undefined rule, missing start)."""
