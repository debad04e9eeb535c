# parsnip/peg/engine.py
from __future__ import annotations
from functools import lru_cache
from typing import Callable, FrozenSet, List, Optional, Tuple

import regex

from ..ast import Fragment, Number, Sequence, String
from ..errors import SyntaxMismatch, prefix
from .ast import (
    Literal, CharRun, Whitespace, Ref, Repeat, Seq, Choice, Delimited,
    Action, Infix, PegGrammar, Node, Span, many,
)

# Recursive-descent engine:
# - Every evaluation is a pure function (text, pos) -> (end, fragment).
# - Failure is a raised SyntaxMismatch; the caller's position is untouched.
# - No memoization: each Choice alternative re-parses from its start.
# - Left recursion is not supported.

WHITESPACE_CHARACTERS: FrozenSet[str] = frozenset(" \n")

_WHITESPACE_RUN = many(Choice(tuple(Literal(c) for c in sorted(WHITESPACE_CHARACTERS))))

Result = Tuple[int, Fragment]


@lru_cache(maxsize=None)
def _run_pattern(chars: FrozenSet[str]):
    # every non-alphanumeric member is escaped, so ']' '^' '-' '\' stay literal
    body = "".join(c if c.isalnum() else "\\" + c for c in sorted(chars))
    return regex.compile(f"[{body}]*")


class Engine:
    def __init__(self, g: Optional[PegGrammar] = None,
                 trace: Optional[Callable[[str], None]] = None):
        self.g = g if g is not None else PegGrammar()
        self.trace = trace

    # ---- Rule application ----
    def apply_rule(self, name: str, text: str, pos: int = 0) -> Result:
        rule = self.g.require_rule(name)
        if self.trace is None:
            return self.eval(rule.expr, text, pos)
        self.trace(f"enter {name} @{pos}")
        try:
            end, frag = self.eval(rule.expr, text, pos)
        except SyntaxMismatch:
            self.trace(f"fail  {name} @{pos}")
            raise
        self.trace(f"exit  {name} @{pos}..{end}")
        return end, frag

    def skip_ws(self, text: str, pos: int) -> int:
        end, _ = self.eval(Whitespace(), text, pos)
        return end

    # ---- Evaluator for expressions ----
    def eval(self, node: Node, text: str, pos: int) -> Result:
        if isinstance(node, Literal):
            if text.startswith(node.text, pos):
                return pos + len(node.text), None
            raise SyntaxMismatch(
                f"{prefix(text, pos)!r} did not start with {node.text!r}", pos)

        if isinstance(node, CharRun):
            if not node.chars:
                return pos, String("")
            m = _run_pattern(node.chars).match(text, pos)
            return m.end(), String(text[pos:m.end()])

        if isinstance(node, Whitespace):
            end, _ = self.eval(_WHITESPACE_RUN, text, pos)
            return end, None

        if isinstance(node, Ref):
            return self.apply_rule(node.name, text, pos)

        if isinstance(node, Repeat):
            if node.kind == "?":
                try:
                    return self.eval(node.node, text, pos)
                except SyntaxMismatch:
                    return pos, None
            elif node.kind == "*":
                cur = pos
                items: List = []
                while True:
                    try:
                        end, frag = self.eval(node.node, text, cur)
                    except SyntaxMismatch:
                        break
                    if frag is not None:
                        items.append(frag)
                    if end == cur:
                        break
                    cur = end
                return cur, (Sequence(items) if items else None)
            else:
                raise AssertionError(f"unknown repeat kind {node.kind!r}")

        if isinstance(node, Seq):
            cur = pos
            items = []
            for i, it in enumerate(node.items):
                if i and node.skip_ws:
                    cur = self.skip_ws(text, cur)
                cur, frag = self.eval(it, text, cur)
                if frag is not None:
                    items.append(frag)
            return cur, Sequence(items)

        if isinstance(node, Choice):
            for it in node.alts:
                try:
                    return self.eval(it, text, pos)
                except SyntaxMismatch:
                    continue
            if node.expected:
                raise SyntaxMismatch(
                    f"expected {node.expected} at {prefix(text, pos)!r}", pos)
            raise SyntaxMismatch(
                f"none of the options matched at {prefix(text, pos)!r}", pos)

        if isinstance(node, Delimited):
            return self._delimited(node, text, pos)

        if isinstance(node, Action):
            end, frag = self.eval(node.node, text, pos)
            return end, node.fn(frag, Span(text, pos, end))

        if isinstance(node, Infix):
            return self._infix(node, text, pos)

        raise AssertionError(f"unknown node: {node!r}")

    def _delimited(self, node: Delimited, text: str, pos: int) -> Result:
        # the empty collection is its own production
        try:
            end, _ = self.eval(Seq((Literal(node.start), Literal(node.end))), text, pos)
            return end, Sequence()
        except SyntaxMismatch:
            pass

        cur, _ = self.eval(Seq((Literal(node.start), Whitespace())), text, pos)
        elements = []
        cur, el = self.eval(node.element, text, cur)
        if el is not None:
            elements.append(el)

        separator = Seq((Whitespace(), Literal(node.sep), Whitespace()), skip_ws=False)
        while True:
            try:
                cur, _ = self.eval(separator, text, cur)
            except SyntaxMismatch:
                break
            # the separator stays consumed, which admits one trailing separator
            try:
                cur, el = self.eval(node.element, text, cur)
            except SyntaxMismatch:
                break
            if el is not None:
                elements.append(el)

        cur, _ = self.eval(Seq((Whitespace(), Literal(node.end)), skip_ws=False), text, cur)
        return cur, Sequence(elements)

    def _infix(self, node: Infix, text: str, pos: int) -> Result:
        cur, first = self.eval(node.operand, text, pos)
        acc = _number(first, node)
        pending = []
        while True:
            at = self.skip_ws(text, cur)
            for delim, make in node.operators:
                try:
                    end, frag = self.eval(Seq((Literal(delim), node.operand)), text, at)
                except SyntaxMismatch:
                    continue
                if not isinstance(frag, Sequence) or len(frag) != 1:
                    raise AssertionError(f"operator step produced {frag!r}")
                pending.append(make(_number(frag.items[0], node)))
                cur = end
                break
            else:
                break
        for op in pending:
            acc = op.apply(acc)
        return cur, Number(acc)


def _number(frag: Fragment, node: Infix) -> int:
    if not isinstance(frag, Number):
        raise AssertionError(f"operand of {node.operators!r} produced {frag!r}, not a Number")
    return frag.value
