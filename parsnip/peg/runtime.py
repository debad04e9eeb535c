# parsnip/peg/runtime.py
from __future__ import annotations
from typing import Callable, Optional, Tuple

from ..ast import Fragment, Sequence
from ..errors import TrailingData
from .ast import PegGrammar, Ref, Seq, Whitespace, Node as Expr
from .engine import Engine


class PegRunner:
    """Execute a grammar (or a bare expression) against input text.

    Results are ``(remaining_text, fragment)``: the unconsumed suffix of the
    input and the optional AST fragment. Failures raise `ParseError`.
    """
    def __init__(self, grammar: Optional[PegGrammar] = None,
                 trace: Optional[Callable[[str], None]] = None):
        self.grammar = grammar if grammar is not None else PegGrammar()
        self.trace = trace

    def _engine(self) -> Engine:
        return Engine(self.grammar, trace=self.trace)

    def run(self, rule_name: Optional[str], text: str, pos: int = 0) -> Tuple[str, Fragment]:
        end, frag = self._engine().apply_rule(rule_name or self.grammar.start, text, pos)
        return text[end:], frag

    def run_expr(self, expr: Expr, text: str, pos: int = 0) -> Tuple[str, Fragment]:
        end, frag = self._engine().eval(expr, text, pos)
        return text[end:], frag

    def run_complete(self, rule_name: Optional[str], text: str) -> Fragment:
        """Parse exactly one `rule_name` surrounded by optional whitespace."""
        name = rule_name or self.grammar.start
        whole = Seq((Whitespace(), Ref(name), Whitespace()))
        end, frag = self._engine().eval(whole, text, 0)
        if end != len(text):
            raise TrailingData(text[end:], end)
        if not isinstance(frag, Sequence):
            raise AssertionError(f"sequence produced {frag!r}")
        return frag.items[0] if frag.items else None


def parse(expr: Expr, text: str) -> Tuple[str, Fragment]:
    """Evaluate a standalone expression (no named rules) on `text`."""
    return PegRunner().run_expr(expr, text)
