# parsnip/peg/__init__.py
"""Generic recursive-descent engine for parsnip.

This package provides:
- Grammar expression nodes (literal, character run, optional/repeat,
  whitespace, sequence, ordered choice, delimited list, infix fold)
- A backtracking evaluator over those nodes
- A runner returning ``(remaining_text, fragment)`` pairs

Grammars are plain data; see parsnip.jsonish and parsnip.arith.
"""

from .ast import (
    Literal, CharRun, Whitespace, Ref, Repeat, Seq, Choice, Delimited,
    Action, Infix, Span, RuleDef, PegGrammar, optional, many,
)
from .engine import Engine, WHITESPACE_CHARACTERS
from .runtime import PegRunner, parse
