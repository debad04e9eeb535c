# parsnip/jsonish/convert.py
"""Conversion of the generic AST into JSON values, and `loads`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Union

from ..ast import Boolean, Mapping, Node, Null, Number, Pair, Sequence, String
from ..errors import StructuralMismatch
from ..peg import PegRunner
from .grammar import JSON_GRAMMAR


@dataclass
class JSONObject:
    entries: Dict[str, "JSONElement"] = field(default_factory=dict)

    def __str__(self) -> str:
        return "{" + ",".join(f'"{k}":{v}' for k, v in self.entries.items()) + "}"


@dataclass
class JSONArray:
    items: List["JSONElement"] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + ",".join(str(v) for v in self.items) + "]"


@dataclass
class JSONString:
    value: str

    def __str__(self) -> str:
        return f'"{self.value}"'


@dataclass
class JSONNumber:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class JSONBoolean:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass
class JSONNull:
    def __str__(self) -> str:
        return "null"


JSONElement = Union[JSONObject, JSONArray, JSONString, JSONNumber, JSONBoolean, JSONNull]


def convert(node: Node) -> JSONElement:
    """Map an AST node onto a JSON value.

    Raises StructuralMismatch for a non-string mapping key or a bare Pair.
    """
    if isinstance(node, Number):
        return JSONNumber(node.value)
    if isinstance(node, String):
        return JSONString(node.value)
    if isinstance(node, Boolean):
        return JSONBoolean(node.value)
    if isinstance(node, Null):
        return JSONNull()
    if isinstance(node, Pair):
        raise StructuralMismatch("Can't have top-level pair")
    if isinstance(node, Sequence):
        return JSONArray([convert(item) for item in node.items])
    if isinstance(node, Mapping):
        entries: Dict[str, JSONElement] = {}
        for key, value in node.entries:
            if not isinstance(key, String):
                raise StructuralMismatch(f"Key {key!r} was not a string")
            entries[key.value] = convert(value)
        return JSONObject(entries)
    raise AssertionError(f"unknown node: {node!r}")


def loads(text: str, trace: Optional[Callable[[str], None]] = None) -> JSONElement:
    """Parse one JSON value from `text` and convert it.

    Leading and trailing whitespace is ignored; anything else left after
    the value raises TrailingData.
    """
    node = PegRunner(JSON_GRAMMAR, trace=trace).run_complete("value", text)
    return convert(node)


def to_python(value: JSONElement):
    if isinstance(value, JSONObject):
        return {k: to_python(v) for k, v in value.entries.items()}
    if isinstance(value, JSONArray):
        return [to_python(v) for v in value.items]
    if isinstance(value, JSONNull):
        return None
    return value.value
