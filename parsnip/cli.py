# parsnip/cli.py
"""parsnip command line front end

Examples)
    $ parsnip json --text '{"a": 1, "b": [1, 2, "3"],}'
    $ parsnip json --input doc.json -D
    $ parsnip calc "5 - 2^5"
    $ parsnip demo

Commands
--------
- json : parse a relaxed JSON document and print it back in compact form
- calc : evaluate an integer arithmetic expression
- demo : load the built-in demonstration document

With -D/--debug the rule trace and the AST are written to stderr.
"""

from __future__ import annotations
import argparse
import sys
from typing import Callable, Optional, Tuple

# The fixed demonstration document: mixed element types and a trailing comma.
DEMO_DOCUMENT = """[
    "Dog",
    2,
    false,
    ["frank"],
    {"sing": 55},
    null,
    ]"""

# ------------------------------
# Helpers
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _line_bounds(src: str, pos: int) -> Tuple[int, int]:
    """[start, end) of the line containing pos."""
    start = src.rfind("\n", 0, pos)
    start = 0 if start < 0 else start + 1
    end = src.find("\n", pos)
    end = len(src) if end < 0 else end
    return start, end


def _caret_snippet(src: str, pos: int) -> str:
    start, end = _line_bounds(src, pos)
    line = src[start:end]
    caret = " " * (pos - start) + "^"
    return f"{line}\n{caret}"


def _tracer(debug: bool) -> Optional[Callable[[str], None]]:
    if not debug:
        return None
    return lambda msg: _eprint("[TRACE] " + msg)


def _report(e: Exception, text: str) -> int:
    from .errors import ParseError
    if isinstance(e, SyntaxError) and isinstance(e, ParseError):
        _eprint("[SYNTAX ERROR]")
        _eprint(str(e))
        if e.pos is not None:
            _eprint(_caret_snippet(text, e.pos))
    else:
        _eprint("[ERROR]", type(e).__name__, str(e))
    return 2

# ------------------------------
# Commands
# ------------------------------

def _load_document(text: str, debug: bool) -> int:
    from .jsonish import JSON_GRAMMAR, convert
    from .peg import PegRunner

    if debug: _eprint(f"[DEBUG] input chars={len(text)}")
    try:
        node = PegRunner(JSON_GRAMMAR, trace=_tracer(debug)).run_complete("value", text)
        if debug: _eprint("\n[AST]\n" + repr(node))
        value = convert(node)
    except Exception as e:
        return _report(e, text)
    print(value)
    return 0


def cmd_json(args) -> int:
    if args.text is not None:
        text = args.text
    else:
        from .loader import load_text
        try:
            text = load_text(args.input)
        except OSError as e:
            _eprint("[ERROR]", type(e).__name__, str(e))
            return 2
    return _load_document(text, args.debug)


def cmd_calc(args) -> int:
    from .arith import evaluate
    try:
        result = evaluate(args.expr, trace=_tracer(args.debug))
    except Exception as e:
        return _report(e, args.expr)
    print(result)
    return 0


def cmd_demo(args) -> int:
    if args.debug: _eprint("[DEBUG] demo document\n" + DEMO_DOCUMENT)
    return _load_document(DEMO_DOCUMENT, args.debug)

# ------------------------------
# Entry point
# ------------------------------

def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="parsnip", description="parsnip recursive-descent parsers")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_json = sub.add_parser("json", help="parse a JSON-like document")
    src_group = p_json.add_mutually_exclusive_group(required=True)
    src_group.add_argument("--text", help="document text")
    src_group.add_argument("--input", help="path of a document file")
    p_json.add_argument("-D", "--debug", action="store_true", help="print rule trace and AST")
    p_json.set_defaults(func=cmd_json)

    p_calc = sub.add_parser("calc", help="evaluate an integer expression")
    p_calc.add_argument("expr", help='expression, e.g. "5 + 3*2"')
    p_calc.add_argument("-D", "--debug", action="store_true", help="print rule trace")
    p_calc.set_defaults(func=cmd_calc)

    p_demo = sub.add_parser("demo", help="load the demonstration document")
    p_demo.add_argument("-D", "--debug", action="store_true", help="print rule trace and AST")
    p_demo.set_defaults(func=cmd_demo)

    args = ap.parse_args(argv)
    return int(args.func(args))

if __name__ == "__main__":
    sys.exit(main())
