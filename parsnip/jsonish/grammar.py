# parsnip/jsonish/grammar.py
"""Relaxed JSON grammar.

    value   <- boolean / integer / string / array / object / null
    array   <- '[' value (',' value)* ','? ']'  /  '[' ']'
    object  <- '{' pair (',' pair)* ','? '}'    /  '{' '}'
    pair    <- string ':' value
    string  <- '"' [A-Za-z0-9-@.]* '"'

Strings have no escape sequences. Whitespace is spaces and newlines.
"""

from __future__ import annotations
from typing import FrozenSet, Tuple

from ..ast import Boolean, Fragment, Mapping, Null, Pair, Sequence, String
from ..numbers import INTEGER
from ..peg import (
    Action, CharRun, Choice, Delimited, Literal, PegGrammar, PegRunner,
    Ref, RuleDef, Seq, Span,
)

STRING_CHARACTERS: FrozenSet[str] = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz1234567890-@."
)

VALUE_RULES = ("boolean", "integer", "string", "array", "object", "null")


def _const(node):
    return lambda frag, span: node


def _string(frag: Fragment, span: Span) -> String:
    if not isinstance(frag, Sequence) or len(frag) != 1:
        raise AssertionError(f"string body produced {frag!r}")
    return frag.items[0]


def _pair(frag: Fragment, span: Span) -> Pair:
    if not isinstance(frag, Sequence) or len(frag) != 2:
        raise AssertionError(f"key-value sequence produced {frag!r}")
    key, value = frag.items
    return Pair(key, value)


def _mapping(frag: Fragment, span: Span) -> Mapping:
    if not isinstance(frag, Sequence):
        raise AssertionError(f"delimited list produced {frag!r}")
    entries = []
    for item in frag.items:
        if not isinstance(item, Pair):
            raise AssertionError(f"object member {item!r} is not a Pair")
        entries.append((item.key, item.value))
    return Mapping(entries)


def _value_choice() -> Choice:
    return Choice(tuple(Ref(name) for name in VALUE_RULES))


JSON_GRAMMAR = PegGrammar.of(
    RuleDef("value", _value_choice()),
    RuleDef("boolean", Choice(
        (Action(Literal("true"), _const(Boolean(True))),
         Action(Literal("false"), _const(Boolean(False)))),
        expected='"true" or "false"',
    )),
    RuleDef("null", Action(Literal("null"), _const(Null()))),
    RuleDef("integer", INTEGER),
    RuleDef("string", Action(
        Seq((Literal('"'), CharRun(STRING_CHARACTERS), Literal('"')), skip_ws=False),
        _string,
    )),
    RuleDef("array", Delimited(_value_choice(), "[", "]")),
    RuleDef("pair", Action(Seq((Ref("string"), Literal(":"), _value_choice())), _pair)),
    RuleDef("object", Action(Delimited(Ref("pair"), "{", "}"), _mapping)),
)


def parse(text: str, rule: str = "value") -> Tuple[str, Fragment]:
    """Parse a prefix of `text`; returns ``(remaining_text, fragment)``."""
    return PegRunner(JSON_GRAMMAR).run(rule, text)
