# parsnip/peg/ast.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, Iterator, Optional, Tuple, Union

from ..ast import Fragment
from ..errors import GrammarError

# ---- Grammar expression definitions ----

@dataclass(frozen=True)
class Literal:
    text: str

@dataclass(frozen=True)
class CharRun:
    # greedy run over a membership set; may be empty, always yields a String
    chars: FrozenSet[str]

@dataclass(frozen=True)
class Whitespace:
    pass

@dataclass(frozen=True)
class Ref:
    name: str

@dataclass(frozen=True)
class Repeat:
    node: "Node"
    kind: str  # '?' (optional), '*' (zero or more)

@dataclass(frozen=True)
class Seq:
    items: Tuple["Node", ...]
    skip_ws: bool = True  # intersperse Whitespace between adjacent items

@dataclass(frozen=True)
class Choice:
    alts: Tuple["Node", ...]
    expected: Optional[str] = None  # label used in the failure message

@dataclass(frozen=True)
class Delimited:
    element: "Node"
    start: str
    end: str
    sep: str = ","

@dataclass(frozen=True)
class Span:
    text: str
    start: int
    end: int

    @property
    def matched(self) -> str:
        return self.text[self.start:self.end]

    def excerpt(self, n: int = 10) -> str:
        return self.text[self.start:self.start + n]

@dataclass(frozen=True)
class Action:
    # fn(fragment, span of the match) -> fragment
    node: "Node"
    fn: Callable[[Fragment, Span], Fragment]

@dataclass(frozen=True)
class Infix:
    # operand, then (op operand)* folded left to right onto the first operand.
    # operators: (literal, constructor) pairs; constructor(n).apply(acc) -> int
    operand: "Node"
    operators: Tuple[Tuple[str, Callable], ...]

Node = Union[Literal, CharRun, Whitespace, Ref, Repeat, Seq, Choice, Delimited, Action, Infix]


def optional(node: Node) -> Repeat:
    return Repeat(node, "?")

def many(node: Node) -> Repeat:
    return Repeat(node, "*")


def children(node: Node) -> Iterator[Node]:
    if isinstance(node, (Repeat, Action)):
        yield node.node
    elif isinstance(node, Seq):
        yield from node.items
    elif isinstance(node, Choice):
        yield from node.alts
    elif isinstance(node, Delimited):
        yield node.element
    elif isinstance(node, Infix):
        yield node.operand


@dataclass
class RuleDef:
    name: str
    expr: Node

@dataclass
class PegGrammar:
    rules: Dict[str, RuleDef] = field(default_factory=dict)
    start: Optional[str] = None

    @classmethod
    def of(cls, *defs: RuleDef, start: Optional[str] = None) -> "PegGrammar":
        rules: Dict[str, RuleDef] = {}
        for d in defs:
            if d.name in rules:
                raise GrammarError(f"duplicate rule '{d.name}'")
            rules[d.name] = d
        g = cls(rules, start if start is not None else (defs[0].name if defs else None))
        g.validate()
        return g

    def require_rule(self, name: str) -> RuleDef:
        try:
            return self.rules[name]
        except KeyError:
            raise GrammarError(f"undefined rule '{name}'")

    def validate(self) -> None:
        if self.start is not None:
            self.require_rule(self.start)
        for rule in self.rules.values():
            stack = [rule.expr]
            while stack:
                node = stack.pop()
                if isinstance(node, Ref):
                    self.require_rule(node.name)
                stack.extend(children(node))
