# parsnip/jsonish/__init__.py
"""JSON-like documents: grammar, AST conversion and `loads`."""

from .grammar import JSON_GRAMMAR, STRING_CHARACTERS, parse
from .convert import (
    JSONElement, JSONObject, JSONArray, JSONString, JSONNumber, JSONBoolean,
    JSONNull, convert, loads, to_python,
)
