# parsnip/numbers.py
"""Bounded integer type and the integer literal production.

Both grammars share one integer literal: an optional ``-`` directly
followed by one or more decimal digits. The magnitude must fit the signed
32-bit range before the sign is applied.
"""

from __future__ import annotations
from typing import FrozenSet

from .ast import Fragment, Number, Sequence, String
from .errors import ArithmeticFailure, NumericConversionFailure, SyntaxMismatch
from .peg.ast import Action, CharRun, Literal, Seq, Span, optional

NUMBER_BITS = 32
NUMBER_MIN = -(1 << (NUMBER_BITS - 1))
NUMBER_MAX = (1 << (NUMBER_BITS - 1)) - 1

NUMBER_CHARACTERS: FrozenSet[str] = frozenset("1234567890")


def bounded(value: int, what: str = "result") -> int:
    if not NUMBER_MIN <= value <= NUMBER_MAX:
        raise ArithmeticFailure(f"{what} {value} overflows a {NUMBER_BITS}-bit integer")
    return value


def _to_number(frag: Fragment, span: Span) -> Number:
    if not isinstance(frag, Sequence) or not isinstance(frag.items[-1], String):
        raise AssertionError(f"digit run produced {frag!r}")
    digits = frag.items[-1].value
    if not digits:
        raise SyntaxMismatch(
            f"{span.excerpt()!r} did not start with an integer literal", span.start)
    magnitude = int(digits)
    if magnitude > NUMBER_MAX:
        raise NumericConversionFailure(
            f"number too large to fit in target type: {digits}", span.start)
    return Number(-magnitude if span.matched.startswith("-") else magnitude)


INTEGER = Action(
    Seq((optional(Literal("-")), CharRun(NUMBER_CHARACTERS)), skip_ws=False),
    _to_number,
)
