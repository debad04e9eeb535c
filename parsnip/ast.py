# parsnip/ast.py
"""Output AST shared by every grammar.

A parser returns an optional *fragment*: one of the nodes below, or None
when it matched something structurally inert such as punctuation.
Nodes are immutable; list arguments are stored as tuples.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Number:
    value: int


@dataclass(frozen=True)
class String:
    value: str


@dataclass(frozen=True)
class Sequence:
    items: Tuple["Node", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class Mapping:
    # (key, value) pairs in source order; keys are String nodes
    entries: Tuple[Tuple["Node", "Node"], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple((k, v) for k, v in self.entries))

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class Pair:
    key: "Node"
    value: "Node"


@dataclass(frozen=True)
class Boolean:
    value: bool


@dataclass(frozen=True)
class Null:
    pass


Node = Union[Number, String, Sequence, Mapping, Pair, Boolean, Null]
Fragment = Optional[Node]


def make_pair(key: str, value: Node) -> Pair:
    return Pair(String(key), value)
