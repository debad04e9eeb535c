# parsnip/__init__.py
"""parsnip: a small recursive-descent parsing toolkit.

Two grammars are built on the generic engine in `parsnip.peg`:
`parsnip.jsonish` (relaxed JSON documents) and `parsnip.arith`
(integer arithmetic with precedence).
"""

from .ast import Number, String, Sequence, Mapping, Pair, Boolean, Null, make_pair
from .errors import (
    ParseError, SyntaxMismatch, TrailingData, NumericConversionFailure,
    ArithmeticFailure, StructuralMismatch, GrammarError,
)
from .jsonish import loads, convert, to_python
from .arith import evaluate

__all__ = [
    "Number", "String", "Sequence", "Mapping", "Pair", "Boolean", "Null",
    "make_pair",
    "ParseError", "SyntaxMismatch", "TrailingData", "NumericConversionFailure",
    "ArithmeticFailure", "StructuralMismatch", "GrammarError",
    "loads", "convert", "to_python", "evaluate",
]
