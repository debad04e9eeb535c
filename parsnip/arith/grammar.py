# parsnip/arith/grammar.py
"""Integer arithmetic with precedence, tightest first:

    primary <- integer / '(' sum ')'
    power   <- primary ('^' primary)*
    product <- power (('*' / '/') power)*
    sum     <- product (('+' / '-') product)*

Expressions are evaluated while they are parsed; every rule yields a Number.
"""

from __future__ import annotations
from typing import Callable, Optional, Tuple

from ..ast import Fragment, Number, Sequence
from ..numbers import INTEGER
from ..peg import Action, Choice, Infix, Literal, PegGrammar, PegRunner, Ref, RuleDef, Seq, Span
from .infix import POWER_OPERATORS, PRODUCT_OPERATORS, SUM_OPERATORS


def _unwrap(frag: Fragment, span: Span) -> Number:
    if isinstance(frag, Number):
        return frag
    # '(' sum ')' keeps only the inner Number
    if isinstance(frag, Sequence) and len(frag) == 1 and isinstance(frag.items[0], Number):
        return frag.items[0]
    raise AssertionError(f"primary produced {frag!r}")


ARITH_GRAMMAR = PegGrammar.of(
    RuleDef("sum", Infix(Ref("product"), SUM_OPERATORS)),
    RuleDef("product", Infix(Ref("power"), PRODUCT_OPERATORS)),
    RuleDef("power", Infix(Ref("primary"), POWER_OPERATORS)),
    RuleDef("primary", Action(
        Choice((Ref("integer"), Seq((Literal("("), Ref("sum"), Literal(")"))))),
        _unwrap,
    )),
    RuleDef("integer", INTEGER),
)


def parse(text: str, rule: str = "sum") -> Tuple[str, Fragment]:
    """Parse and evaluate a prefix of `text`; returns ``(remaining_text, Number)``."""
    return PegRunner(ARITH_GRAMMAR).run(rule, text)


def evaluate(text: str, trace: Optional[Callable[[str], None]] = None) -> int:
    """Evaluate a whole expression; surrounding whitespace is ignored."""
    node = PegRunner(ARITH_GRAMMAR, trace=trace).run_complete("sum", text)
    if not isinstance(node, Number):
        raise AssertionError(f"expression produced {node!r}")
    return node.value
